# -*- coding: utf-8; -*-
"""A pickle-aware singleton base class.

Used for the marker objects of the sequence engine: the end-of-sequence
outcome ``stop``, the end-of-unfold step result ``done``, and the empty
linked list ``nil``. Each of these must be tested by identity (``x is stop``),
so there must be exactly one instance per process, also across a pickle
roundtrip.

Behavior:

- Unpickling an instance of a singleton type whose instance already exists in
  this process returns the existing instance, so identity checks keep working.

- Calling the constructor of a singleton type again while its instance is
  alive raises ``TypeError``. Obtain the instance from the module that created
  it instead.
"""

# The instance registry lives at module level, not in the class or the
# metaclass, so that unpickling cannot clobber it. Weak references only; once
# the last reference to an instance dies, a new one may be created.
#
# Two layers are needed, because pickle bypasses the class call:
#   - the metaclass intercepts constructor calls, refusing a second instance;
#   - the base class `__new__` redirects unpickling to the live instance.

__all__ = ["Singleton"]

import threading
from weakref import WeakValueDictionary

_instances = WeakValueDictionary()
_instances_update_lock = threading.RLock()

class ThereCanBeOnlyOne(type):
    def __call__(cls, *args, **kwargs):
        with _instances_update_lock:
            if cls in _instances:
                raise TypeError("Singleton instance of {} already exists".format(cls))
            instance = cls.__new__(cls, *args, **kwargs)
            cls.__init__(instance, *args, **kwargs)
            return instance

class Singleton(metaclass=ThereCanBeOnlyOne):
    """Base class for singletons. Can be used as a mixin."""
    def __new__(cls, *args, **kwargs):
        try:  # EAFP, no TOCTTOU
            return _instances[cls]
        except KeyError:
            with _instances_update_lock:
                if cls not in _instances:
                    # strong reference keeps the instance alive until construction is done
                    instance = _instances[cls] = super().__new__(cls)
                else:
                    instance = _instances[cls]
            return instance
