# -*- coding: utf-8 -*-
"""Optional-value container for consumers that may find nothing."""

__all__ = ["Some", "unbox"]

from collections.abc import Container, Iterable, Sized

class Some:
    """Explicitly represent thing-ness as opposed to nothingness.

    Consumers that may come up empty (``find``, ``reduce``, ``last``, ``first``,
    ``at``, ``find_map``) return ``Some(x)`` when they have a result, and
    ``None`` when they do not. This tells apart a ``None`` element from the
    absence of an element::

        x = Some(42)    # we have a value, it's `42`
        x = Some(None)  # we have a value, it's `None`
        x = None        # we don't have a value

    Immutable single-item container. Supports ``.get`` and ``unbox``.
    """
    def __init__(self, x=None):
        self.x = x
        self._immutable = True
    def __setattr__(self, k, v):
        if hasattr(self, "_immutable"):
            raise TypeError("'Some' object is immutable")
        super().__setattr__(k, v)
    def __repr__(self):
        return f"Some({repr(self.x)})"
    def __contains__(self, x):
        return self.x == x
    def __iter__(self):
        return (x for x in (self.x,))
    def __len__(self):
        return 1
    def __eq__(self, other):
        if isinstance(other, Some):
            return other.x == self.x
        return NotImplemented
    def __hash__(self):
        return hash((Some, self.x))
    def get(self):
        """Return the value inside the `Some`.

        The syntactic sugar for `b.get()` is `unbox(b)`.
        """
        return self.x

def unbox(b):
    """Return the value from inside the `Some` b.

    If `b` is not a `Some` (e.g. it is `None`, meaning "not found"),
    raises `TypeError`.
    """
    if not isinstance(b, Some):
        raise TypeError(f"Expected Some, got {type(b)} with value {repr(b)}")
    return b.get()

for abscls in (Container, Iterable, Sized):
    abscls.register(Some)
del abscls  # namespace cleanup
