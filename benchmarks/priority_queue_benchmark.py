# coding=utf-8

import random
from queue import PriorityQueue
from heapq import heappush, heappop

from ipqueue import IndexPriorityQueue, Config, configure_logger

from benchmarks.utils import log, log_time

CAPACITY = 100000


@log_time('prepare benchmark data')
def prepare_benchmark_data(push_rate=0.5, update_rate=0.0, total=0, capacity=CAPACITY):
    data = []
    n = 0
    while len(data) + n < total:
        r = random.random()
        if r < push_rate:
            op = 'push' if n < capacity else 'pop'
        elif r < push_rate + update_rate:
            op = 'update' if n > 0 else 'push'
        else:
            op = 'pop' if n > 0 else 'push'
        if op == 'push':
            data.append((op, random.randint(0, 2147483647)))
            n += 1
        elif op == 'update':
            data.append((op, random.randint(0, 2147483647)))
        else:
            data.append((op, None))
            n -= 1
    while n > 0:
        data.append(('pop', None))
        n -= 1
    return data


@log_time('system priority queue')
def benchmark_system_priority_queue(data):
    q = PriorityQueue()
    for op, v in data:
        if op == 'push':
            q.put_nowait(v)
        elif op == 'pop':
            q.get_nowait()


@log_time('list heap priority queue')
def benchmark_list_heap_priority_queue(data):
    q = []
    for op, v in data:
        if op == 'push':
            heappush(q, v)
        elif op == 'pop':
            heappop(q)


@log_time('index priority queue')
def benchmark_index_priority_queue(data):
    q = IndexPriorityQueue(CAPACITY)
    positions = []
    for op, v in data:
        if op == 'push':
            positions.append(q.push(v))
        elif op == 'update':
            i = positions[v % len(positions)]
            if i in q:
                q.insert(i, v)
        else:
            q.pop()


def main():
    configure_logger(Config.defaults(log_level='info', log_format='%(message)s'))
    log.info('--------------------------------')
    log.info('push rate: 0.6    total: 1000000')
    log.info('--------------------------------')
    data1 = prepare_benchmark_data(push_rate=0.6, total=1000000)
    benchmark_system_priority_queue(data1)
    benchmark_list_heap_priority_queue(data1)
    benchmark_index_priority_queue(data1)
    log.info('--------------------------------')
    log.info('push rate: 0.5    update rate: 0.3    total: 1000000')
    log.info('--------------------------------')
    data2 = prepare_benchmark_data(push_rate=0.5, update_rate=0.3, total=1000000)
    benchmark_index_priority_queue(data2)


if __name__ == '__main__':
    main()
