# -*- coding: utf-8 -*-
"""The suspension cell, its outcomes, and the sequence handle.

A **cell** is any zero-argument callable. Invoking it advances the sequence by
one element: it returns either ``stop`` (no more elements), or
``Continue(element, next)``, where ``next`` is the cell for the remainder.

Suspending means returning a value that represents the rest of the
computation; resuming means calling it. There is no hidden execution context,
so a cell can be invoked any number of times, and every invocation gives an
equal outcome (as long as the user functions involved are pure). This is what
lets several consumers drive the same sequence independently::

    from lazyseq import Seq, Continue, stop

    def count_from(k):
        return lambda: Continue(k, count_from(k + 1))

    naturals = Seq(count_from(0))
    element, rest = naturals.cell()  # 0, and the cell for 1, 2, 3, ...
    element, rest = naturals.cell()  # 0 again; nothing was consumed

A **sequence handle** ``Seq`` wraps exactly one cell. Handles are immutable;
every combinator returns a new one. No elements are produced until a consumer
invokes the cell.

The step results ``Next(element, accumulator)`` and ``done`` are the
producer-facing counterpart of the outcomes: an ``unfold`` step function
returns them, and so does the consumer ``step``.

**CAUTION**: If a user function passed to a producer or combinator has side
effects, driving the same handle twice performs those side effects twice, and
the two traversals may observe different elements. That is the only
non-reentrancy caveat of the engine.
"""

__all__ = ["Seq", "Stop", "stop", "Continue", "Next", "Done", "done"]

from .singleton import Singleton

class Stop(Singleton):
    """Outcome of a cell when the sequence has no more elements. Singleton."""
    def __bool__(self):
        return False
    def __repr__(self):
        return "stop"
stop = Stop()

class _Pair:
    # Immutable two-slot record, unpackable like a 2-tuple.
    __slots__ = ()
    _fields = ()
    def __init__(self, a, b):
        first, second = self._fields
        object.__setattr__(self, first, a)
        object.__setattr__(self, second, b)
    def __setattr__(self, k, v):
        raise TypeError(f"'{type(self).__name__}' object is immutable")
    def __iter__(self):
        return (getattr(self, name) for name in self._fields)
    def __len__(self):
        return 2
    def __eq__(self, other):
        if type(other) is type(self):
            return tuple(other) == tuple(self)
        return NotImplemented
    def __hash__(self):
        return hash((type(self),) + tuple(self))
    def __reduce__(self):
        return (type(self), tuple(self))

class Continue(_Pair):
    """Outcome of a cell that produced one element.

    ``element`` is the produced element; ``next`` is the cell for the
    remainder of the sequence.
    """
    __slots__ = ("element", "next")
    _fields = ("element", "next")
    def __repr__(self):
        return f"Continue({repr(self.element)}, <cell>)"

class Next(_Pair):
    """Step result: yield ``element``, then continue from ``accumulator``.

    Returned by ``unfold`` step functions, and by the consumer ``step``,
    where the accumulator is the ``Seq`` of the remaining elements.
    """
    __slots__ = ("element", "accumulator")
    _fields = ("element", "accumulator")
    def __repr__(self):
        return f"Next({repr(self.element)}, {repr(self.accumulator)})"

class Done(Singleton):
    """Step result: the sequence ends here. Singleton."""
    def __bool__(self):
        return False
    def __repr__(self):
        return "done"
done = Done()

class Seq:
    """Sequence handle. Wraps one cell.

    Immutable. Iterable with the Python iterator protocol, for interoperability
    with ``for`` loops, ``list()``, and friends; each ``iter()`` starts a fresh
    traversal from the handle's cell::

        s = from_eager_collection([1, 2, 3])
        assert list(s) == [1, 2, 3]
        assert list(s) == [1, 2, 3]  # the handle was not consumed

    **CAUTION**: Iterating over an infinite sequence (``repeat``, ``cycle``,
    ``iterate``, ...) with ``list()`` or a ``for`` loop without a ``break``
    will not terminate. Use ``take`` first.
    """
    def __init__(self, cell):
        if not callable(cell):
            raise TypeError(f"expected a callable cell, got {type(cell)} with value {repr(cell)}")
        self.cell = cell
        self._immutable = True
    def __setattr__(self, k, v):
        if hasattr(self, "_immutable"):
            raise TypeError("'Seq' object is immutable")
        super().__setattr__(k, v)
    def __iter__(self):
        cell = self.cell
        while True:
            outcome = cell()
            if outcome is stop:
                return
            yield outcome.element
            cell = outcome.next
    def __repr__(self):
        # never invoke the cell here; that would force an element
        return "<Seq at 0x{:x}>".format(id(self))

def _stop():
    return stop

# Argument validation shared by the producers, combinators and consumers.
# Errors in how the library is called are raised eagerly, at construction time.

def _check_seq(seq, name="seq"):
    if not isinstance(seq, Seq):
        raise TypeError(f"expected a Seq for `{name}`, got {type(seq)} with value {repr(seq)}")
    return seq

def _check_callable(f, name="f"):
    if not callable(f):
        raise TypeError(f"expected a callable for `{name}`, got {type(f)} with value {repr(f)}")
    return f

def _check_int(n, name="n"):
    # bool is an int, but almost certainly a mistake here
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected integer `{name}`, got {type(n)} with value {repr(n)}")
    return n
