# coding=utf-8

import copy
from collections.abc import MutableMapping

from .utils import load_object, reverse

DEFAULT_CONFIG = {
    'log_level': 'warning',
    'log_format': '%(asctime)s %(name)s [%(levelname)s] %(message)s',
    'log_dateformat': '[%Y-%m-%d %H:%M:%S %z]',
    'log_file': None,
    'queue_capacity': 16,
    'queue_less': 'operator.lt',
    'queue_reverse': False
}


class Config(MutableMapping):
    """
    Settings of a queue, missing keys read as ``None``.
    """

    def __init__(self, __values=None, **kwargs):
        self.attrs = {}
        self.update(__values, **kwargs)

    @classmethod
    def defaults(cls, __values=None, **kwargs):
        config = cls(DEFAULT_CONFIG)
        config.update(__values, **kwargs)
        return config

    def __getitem__(self, name):
        return self.attrs.get(name)

    def __contains__(self, name):
        return name in self.attrs

    def __setitem__(self, name, value):
        self.attrs[name] = value

    def __delitem__(self, name):
        del self.attrs[name]

    def __iter__(self):
        return iter(self.attrs)

    def __len__(self):
        return len(self.attrs)

    def get(self, name, default=None):
        v = self[name]
        return default if v is None else v

    def getint(self, name, default=None):
        return _to_int(self.get(name, default))

    def getbool(self, name, default=None):
        v = self.get(name, default)
        if isinstance(v, str):
            v = {'true': True, 'false': False}.get(v.lower(), v)
        if isinstance(v, bool):
            return v
        n = _to_int(v)
        return None if n is None else n != 0

    def getcapacity(self):
        """
        Capacity of the queue, a non-negative integer.
        """
        capacity = self.getint('queue_capacity')
        if capacity is None or capacity < 0:
            raise ValueError("queue_capacity should be a non-negative integer, got {!r}"
                             .format(self['queue_capacity']))
        return capacity

    def getless(self):
        """
        Comparator of the queue, ``queue_reverse`` turns it into a max-queue.
        """
        less = load_object(self.get('queue_less', DEFAULT_CONFIG['queue_less']))
        if not callable(less):
            raise ValueError("queue_less should be callable, got {!r}".format(less))
        if self.getbool('queue_reverse'):
            less = reverse(less)
        return less

    def update(self, __values=None, **kwargs):
        if __values is not None:
            for name in __values:
                self[name] = __values[name]
        for k, v in kwargs.items():
            self[k] = v

    def copy(self):
        return copy.deepcopy(self)


def _to_int(v):
    try:
        return int(v)
    except (ValueError, TypeError):
        return None
