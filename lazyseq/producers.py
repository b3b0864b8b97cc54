# -*- coding: utf-8 -*-
"""Producers: make a sequence from a seed, a collection, or a constant.

``unfold`` is the universal producer, the counterpart of a fold; everything
else in this module is ``unfold`` with a particular step function.

Nothing is computed when a producer is called; each element is computed
when a consumer pulls it, and recomputed on every traversal.

**CAUTION**: ``repeat``, ``repeatedly`` and ``iterate`` produce infinite
sequences. Draining them with a consumer that needs the whole sequence
(``fold``, ``to_list``, ``group``, ``run``, ``length``, ...) never returns.
Bound them first, e.g. with ``take`` or ``take_while``.
"""

__all__ = ["unfold", "from_eager_collection", "from_list",
           "repeat", "repeatedly", "range",
           "once", "single", "empty", "iterate"]

from collections.abc import MutableSequence, Sequence

from .core import Seq, Continue, stop, Next, done, _check_callable, _check_int
from .llist import cons, nil

def unfold(seed, step):
    """Generate a sequence corecursively. The counterpart of a fold.

    State starts from the value ``seed``. When an element is pulled, ``step``
    is called with the current state, and must return either:

      - ``Next(element, newstate)``: yield ``element``, then continue
        from ``newstate``, or
      - ``done``: the sequence ends here.

    Example::

        def evens(k):
            return Next(k, k + 2) if k < 10 else done

        assert to_list(unfold(0, evens)) == [0, 2, 4, 6, 8]

        def fibo(state):
            a, b = state
            return Next(a, (b, a + b))

        assert to_list(take(unfold((1, 1), fibo), 10)) == [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]

    A step function returning anything else raises ``TypeError`` when the
    offending element is pulled.
    """
    _check_callable(step, "step")
    def cell_from(state):
        def cell():
            result = step(state)
            if result is done:
                return stop
            if not isinstance(result, Next):
                raise TypeError(f"expected `step` to return Next(...) or done, got {type(result)} with value {repr(result)}")
            element, newstate = result
            return Continue(element, cell_from(newstate))
        return cell
    return Seq(cell_from(seed))

def _walk_llist(cell):
    if cell is nil:
        return done
    if not isinstance(cell, cons):
        raise TypeError(f"Not a linked list; tail is {type(cell)} with value {repr(cell)}")
    return Next(cell.car, cell.cdr)

def from_eager_collection(items):
    """Make a sequence that yields the items of ``items`` in their stored order.

    - An immutable sequence (``tuple``, ``str``, ``range``, ...) is walked by index.
    - A mutable sequence (``list``, ...) is first copied into a ``tuple``, so
      later mutation of the original does not change the sequence.
    - A cons list (see ``lazyseq.llist``) is walked cell by cell; cons lists
      are immutable, so no copy is needed.
    - Any other iterable (``set``, a dict view, a generator, ...) is read into
      a ``tuple`` right away. Note this forces generators at call time.
    """
    if items is nil or isinstance(items, cons):
        return unfold(items, _walk_llist)
    if isinstance(items, MutableSequence) or not isinstance(items, Sequence):
        items = tuple(items)
    n = len(items)
    def walk(k):
        if k < n:
            return Next(items[k], k + 1)
        return done
    return unfold(0, walk)

from_list = from_eager_collection

def repeat(value):
    """Make an infinite sequence that yields ``value`` on every pull.

    **CAUTION**: Never terminates. See the module docstring.
    """
    return unfold(None, lambda _: Next(value, None))

def repeatedly(f):
    """Make an infinite sequence that yields a fresh ``f()`` on every pull.

    ``f`` is called once per pulled element, and again for every traversal.

    **CAUTION**: Never terminates. See the module docstring.
    """
    _check_callable(f)
    return unfold(None, lambda _: Next(f(), None))

def range(start, stop):
    """Make a sequence of the integers from ``start`` towards ``stop``.

    ``stop`` itself is excluded. Counts up by one if ``start < stop``,
    otherwise counts down by one. ``range(n, n)`` is empty.

    Examples::

        assert to_list(range(1, 4)) == [1, 2, 3]
        assert to_list(range(4, 1)) == [4, 3, 2]
        assert to_list(range(3, 3)) == []
    """
    _check_int(start, "start")
    _check_int(stop, "stop")
    if start < stop:
        return unfold(start, lambda k: Next(k, k + 1) if k < stop else done)
    return unfold(start, lambda k: Next(k, k - 1) if k > stop else done)

def once(f):
    """Make a sequence of exactly one element, ``f()``.

    ``f`` is called when the element is pulled, not before.
    """
    _check_callable(f)
    return unfold(True, lambda pending: Next(f(), False) if pending else done)

def single(value):
    """Make a sequence of exactly one element, ``value``."""
    return unfold(True, lambda pending: Next(value, False) if pending else done)

def empty():
    """Make a sequence with no elements."""
    return unfold(None, lambda _: done)

def iterate(initial, f):
    """Make the infinite sequence ``initial, f(initial), f(f(initial)), ...``

    ``f`` is applied only when the next element is actually pulled, so taking
    ``n`` elements calls ``f`` exactly ``n - 1`` times.

    **CAUTION**: Never terminates. See the module docstring.
    """
    _check_callable(f)
    # The state is a thunk for the next value, so that computing it is
    # deferred until it is needed.
    def step(thunk):
        x = thunk()
        return Next(x, lambda: f(x))
    return unfold(lambda: initial, step)
