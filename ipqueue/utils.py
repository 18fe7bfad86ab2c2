# coding=utf-8

import logging
from importlib import import_module


def load_object(path):
    """
    Resolve a dotted path such as ``'operator.lt'``, other objects are returned as they are.
    """
    if not isinstance(path, str):
        return path
    module, _, name = path.rpartition('.')
    if not module:
        raise ValueError("'{}' is not a dotted path".format(path))
    return getattr(import_module(module), name)


def configure_logger(config, name='ipqueue'):
    level = config.get('log_level').upper()
    log_file = config.get('log_file')
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(config.get('log_format'), config.get('log_dateformat')))
    logger = logging.getLogger(name)
    for h in logger.handlers:
        h.close()
    logger.handlers = [handler]
    logger.setLevel(level)
    return logger


def key_less(key):
    def less(a, b):
        return key(a) < key(b)

    return less


def reverse(less):
    """
    Swap the operands of a comparator, so a min-queue becomes a max-queue.
    """

    def greater(a, b):
        return less(b, a)

    return greater
