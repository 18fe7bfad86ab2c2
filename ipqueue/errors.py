# coding=utf-8


class IndexPriorityQueueError(Exception):
    """
    Base error of the indexed priority queue.
    """


class PositionOutOfRange(IndexPriorityQueueError, IndexError):
    """
    Logical position is not in [0, capacity).
    """

    def __init__(self, *args, position=None, **kwargs):
        self.position = position
        super().__init__(*args, **kwargs)


class QueueFull(IndexPriorityQueueError):
    """
    No free logical position.
    """


class QueueEmpty(IndexPriorityQueueError):
    """
    No element in the queue.
    """


class InvalidPosition(IndexPriorityQueueError, KeyError):
    """
    No element at the logical position.
    """

    def __init__(self, *args, position=None, **kwargs):
        self.position = position
        super().__init__(*args, **kwargs)

    def __str__(self):
        return Exception.__str__(self)
