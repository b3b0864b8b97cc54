# -*- coding: utf-8 -*-
"""Control signals returned by user functions to the short-circuiting folds.

``fold_until`` expects its function to return ``Proceed(acc)`` to keep going,
or ``Halt(acc)`` to stop right there with ``acc`` as the result.

``try_fold`` expects its function to return ``Ok(acc)`` on success, or
``Err(error)`` to abort the traversal. The ``Err`` is handed back to the
caller unchanged.

All four are immutable single-value wrappers that compare by type and value.
"""

__all__ = ["Proceed", "Halt", "Ok", "Err"]

class _Signal:
    __slots__ = ("value",)
    def __init__(self, value):
        object.__setattr__(self, "value", value)
    def __setattr__(self, k, v):
        raise TypeError(f"'{type(self).__name__}' object is immutable")
    def __repr__(self):
        return f"{type(self).__name__}({repr(self.value)})"
    def __eq__(self, other):
        if type(other) is type(self):
            return other.value == self.value
        return NotImplemented
    def __hash__(self):
        return hash((type(self), self.value))
    def __reduce__(self):
        return (type(self), (self.value,))

class Proceed(_Signal):
    """``fold_until``: continue folding with this accumulator."""
    __slots__ = ()

class Halt(_Signal):
    """``fold_until``: stop folding; this accumulator is the result."""
    __slots__ = ()

class Ok(_Signal):
    """``try_fold``: the step succeeded; continue with this accumulator.

    Also the overall result of a ``try_fold`` that ran to completion.
    """
    __slots__ = ()

class Err(_Signal):
    """``try_fold``: the step failed with this error; abort the traversal."""
    __slots__ = ()
    @property
    def error(self):
        return self.value
