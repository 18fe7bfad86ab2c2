# coding=utf-8

import logging
from heapq import heappush, heappop
from operator import lt, index

from .config import Config
from .errors import PositionOutOfRange, QueueFull, QueueEmpty, InvalidPosition
from .utils import load_object

log = logging.getLogger(__name__)


class IndexPriorityQueue:
    """
    A binary min-heap whose elements are also addressable by a stable logical index.

    ``_pq[i]`` is the heap slot holding the element of logical index ``i`` (``-1`` if free),
    ``_qp[j]`` is the logical index of the element in heap slot ``j``.
    The root is slot 0 and the children of slot ``p`` are ``2p`` and ``2p + 1``.
    """

    def __init__(self, size, less=None):
        if not isinstance(size, int) or size < 0:
            raise ValueError("size should be a non-negative integer, got {!r}".format(size))
        self._capacity = size
        self._length = 0
        self._elements = [None] * size
        self._pq = [-1] * size
        self._qp = [-1] * size
        self._less = lt if less is None else load_object(less)
        self._free = list(range(size))
        self._pooled = [True] * size

    @classmethod
    def from_config(cls, config):
        config = Config.defaults(config)
        return cls(config.getcapacity(), less=config.getless())

    def __len__(self):
        return self._length

    def __contains__(self, position):
        return self.element_at_index(position)

    def __getitem__(self, position):
        return self.get_element(position)

    def __setitem__(self, position, value):
        self.insert(position, value)

    def __delitem__(self, position):
        self.remove(position)

    def __iter__(self):
        for i in range(self._capacity):
            if self._pq[i] != -1:
                yield i

    def __repr__(self):
        return "<IndexPriorityQueue length={} capacity={}>".format(self._length, self._capacity)

    @property
    def length(self):
        return self._length

    @property
    def capacity(self):
        return self._capacity

    def empty(self):
        return self._length == 0

    def is_full(self):
        return self._length == self._capacity

    def insert(self, position, value):
        """
        Put ``value`` at the logical ``position``, replacing the element already there.
        """
        i = self._position(position)
        if i is None:
            raise PositionOutOfRange("Position {} is out of range [0, {})".format(position, self._capacity),
                                     position=position)
        position = i
        pos = self._pq[position]
        if pos != -1:
            log.debug("Overwrite the element at position %s", position)
            self._elements[pos] = value
        else:
            pos = self._length
            self._elements[pos] = value
            self._pq[position] = pos
            self._qp[pos] = position
            self._length += 1
        self._fix(pos)

    def push(self, value):
        """
        Insert ``value`` at the lowest free logical position and return that position.
        """
        free, pq = self._free, self._pq
        while free:
            i = heappop(free)
            self._pooled[i] = False
            if pq[i] == -1:
                self.insert(i, value)
                return i
        raise QueueFull("No free position, capacity = {}".format(self._capacity))

    def pop(self):
        return self.popitem()[1]

    def popitem(self):
        """
        Remove the element with the highest priority, return its logical position and value.
        """
        if self._length == 0:
            raise QueueEmpty("Cannot pop from an empty queue")
        position = self._qp[0]
        return position, self._detach(0)

    def top(self):
        if self._length == 0:
            raise QueueEmpty("No top element in an empty queue")
        return self._elements[0]

    def top_index(self):
        if self._length == 0:
            raise QueueEmpty("No top element in an empty queue")
        return self._qp[0]

    def remove(self, position):
        i = self._occupied(position)
        if i is None:
            raise InvalidPosition("Invalid position {}: no element".format(position), position=position)
        log.debug("Remove the element at position %s", position)
        return self._detach(self._pq[i])

    def element_at_index(self, position):
        return self._occupied(position) is not None

    def get_element(self, position):
        i = self._occupied(position)
        if i is None:
            raise InvalidPosition("Invalid position {}: no element".format(position), position=position)
        return self._elements[self._pq[i]]

    def _position(self, position):
        # bool is an int but never a position
        if isinstance(position, bool):
            return None
        try:
            i = index(position)
        except TypeError:
            return None
        return i if 0 <= i < self._capacity else None

    def _occupied(self, position):
        i = self._position(position)
        if i is None or self._pq[i] == -1:
            return None
        return i

    def _detach(self, pos):
        # move the last element into the hole and release the logical index
        self._length -= 1
        last = self._length
        position = self._qp[pos]
        value = self._elements[pos]
        self._exch(pos, last)
        self._elements[last] = None
        self._qp[last] = -1
        self._pq[position] = -1
        self._release(position)
        if pos < last:
            self._fix(pos)
        return value

    def _release(self, position):
        if not self._pooled[position]:
            self._pooled[position] = True
            heappush(self._free, position)

    def _fix(self, pos):
        # at most one direction can be needed
        if pos != 0 and self._less(self._elements[pos], self._elements[pos >> 1]):
            self._swim(self._qp[pos])
        elif self._has_child(pos):
            self._sink(self._qp[pos])

    def _has_child(self, pos):
        c = pos << 1
        if c == pos:
            c += 1
        return c < self._length

    def _swim(self, position):
        elements, less = self._elements, self._less
        pos = self._pq[position]
        while pos != 0:
            p = pos >> 1
            if not less(elements[pos], elements[p]):
                break
            self._exch(pos, p)
            pos = p

    def _sink(self, position):
        elements, less, n = self._elements, self._less, self._length
        pos = self._pq[position]
        while True:
            c = pos << 1
            if c == pos:
                # slot 0 is not a child of itself
                c += 1
            if c >= n:
                break
            r = (pos << 1) + 1
            if r != c and r < n and less(elements[r], elements[c]):
                c = r
            if not less(elements[c], elements[pos]):
                break
            self._exch(pos, c)
            pos = c

    def _exch(self, a, b):
        elements, pq, qp = self._elements, self._pq, self._qp
        elements[a], elements[b] = elements[b], elements[a]
        qp[a], qp[b] = qp[b], qp[a]
        pq[qp[a]] = a
        pq[qp[b]] = b
