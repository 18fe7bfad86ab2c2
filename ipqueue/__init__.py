# coding=utf-8

from .ds import IndexPriorityQueue
from .config import Config
from .errors import IndexPriorityQueueError, PositionOutOfRange, QueueFull, QueueEmpty, InvalidPosition
from .utils import configure_logger, key_less, reverse

__all__ = ['IndexPriorityQueue',
           'Config',
           'IndexPriorityQueueError', 'PositionOutOfRange', 'QueueFull', 'QueueEmpty', 'InvalidPosition',
           'configure_logger', 'key_less', 'reverse']

__version__ = '0.1.0'
