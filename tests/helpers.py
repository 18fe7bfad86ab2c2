# coding=utf-8


def check_invariants(q):
    pq, qp, elements, n = q._pq, q._qp, q._elements, q._length
    assert 0 <= n <= q.capacity
    assert sum(1 for i in pq if i != -1) == n
    for j in range(n):
        assert 0 <= qp[j] < q.capacity
        assert pq[qp[j]] == j
    for i in range(q.capacity):
        if pq[i] != -1:
            assert qp[pq[i]] == i
    for j in range(1, n):
        assert not q._less(elements[j], elements[j >> 1])
    for j in range(n, q.capacity):
        assert elements[j] is None and qp[j] == -1
