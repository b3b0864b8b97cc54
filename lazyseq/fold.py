# -*- coding: utf-8 -*-
"""Consumers: folds, searches, and materialization.

These are the only operations that actually pull elements. Each one drives
the handle's cell in a loop (never recursively, so long finite sequences are
fine) until the sequence ends or the consumer has its answer.

Note the argument order of the accumulating functions: ``f(element, acc)``,
like Racket's ``foldl``. This is the opposite of ``functools.reduce``.

Consumers that may come up empty return ``Some(x)`` when they find something,
and ``None`` when they do not; see ``lazyseq.collections.Some``.

**CAUTION**: ``fold``, ``to_list``, ``to_llist``, ``group``, ``run``, ``each``,
``length`` and ``last`` need the whole sequence, so they never return on an
infinite one (``repeat``, ``repeatedly``, ``iterate``, ``cycle``). The same
goes for ``find``, ``find_map``, ``any`` and ``all`` when nothing short-circuits
them, e.g. ``all`` with an always-true predicate. Use ``take``/``take_while``
first, or a short-circuiting consumer.
"""

__all__ = ["fold", "fold_until", "try_fold",
           "run", "each",
           "to_eager_collection", "to_list", "to_llist",
           "find", "find_map", "any", "all",
           "reduce", "last", "first", "at", "length",
           "group", "step"]

from .collections import Some
from .control import Proceed, Halt, Ok, Err
from .core import Seq, stop, Next, done, _check_seq, _check_callable, _check_int
from .llist import cons, nil, lreverse

def fold(seq, initial, f):
    """Strict left fold. ``f(element, acc)`` returns the new accumulator.

    Example::

        from operator import add
        assert fold(range(1, 5), 0, add) == 10

    **CAUTION**: Never returns on infinite input. See ``fold_until``.
    """
    _check_seq(seq)
    _check_callable(f)
    acc = initial
    outcome = seq.cell()
    while outcome is not stop:
        acc = f(outcome.element, acc)
        outcome = outcome.next()
    return acc

def fold_until(seq, initial, f):
    """Left fold that ``f`` can stop early.

    ``f(element, acc)`` returns ``Proceed(newacc)`` to keep folding, or
    ``Halt(result)`` to stop immediately with ``result``. No further elements
    are pulled after a ``Halt``. If the sequence ends first, the result is the
    last accumulator.

    Example - sum until the total would exceed 10, also on infinite input::

        def add_upto_10(x, acc):
            return Proceed(acc + x) if acc + x <= 10 else Halt(acc)

        assert fold_until(iterate(1, lambda k: k + 1), 0, add_upto_10) == 10
    """
    _check_seq(seq)
    _check_callable(f)
    acc = initial
    outcome = seq.cell()
    while outcome is not stop:
        signal = f(outcome.element, acc)
        if isinstance(signal, Halt):
            return signal.value
        if not isinstance(signal, Proceed):
            raise TypeError(f"expected `f` to return Proceed(...) or Halt(...), got {type(signal)} with value {repr(signal)}")
        acc = signal.value
        outcome = outcome.next()
    return acc

def try_fold(seq, initial, f):
    """Left fold with a fallible step function.

    ``f(element, acc)`` returns ``Ok(newacc)`` on success, or ``Err(error)`` on
    failure. The first ``Err`` aborts the traversal (no further elements are
    pulled) and is returned unchanged. If every step succeeds, the result is
    ``Ok(final_acc)``.

    Example::

        def checked_add(x, acc):
            return Err(f"negative: {x}") if x < 0 else Ok(acc + x)

        assert try_fold(from_list([1, 2, 3]), 0, checked_add) == Ok(6)
        assert try_fold(from_list([1, -2, 3]), 0, checked_add) == Err("negative: -2")
    """
    _check_seq(seq)
    _check_callable(f)
    acc = initial
    outcome = seq.cell()
    while outcome is not stop:
        result = f(outcome.element, acc)
        if isinstance(result, Err):
            return result
        if not isinstance(result, Ok):
            raise TypeError(f"expected `f` to return Ok(...) or Err(...), got {type(result)} with value {repr(result)}")
        acc = result.value
        outcome = outcome.next()
    return Ok(acc)

def run(seq):
    """Drain the sequence for its side effects; discard the elements.

    Returns ``None``.
    """
    _check_seq(seq)
    outcome = seq.cell()
    while outcome is not stop:
        outcome = outcome.next()

def each(seq, f):
    """Call ``f(element)`` on each element, in order. Returns ``None``."""
    _check_seq(seq)
    _check_callable(f)
    outcome = seq.cell()
    while outcome is not stop:
        f(outcome.element)
        outcome = outcome.next()

def to_eager_collection(seq):
    """Materialize the sequence into a ``list``, preserving order."""
    _check_seq(seq)
    out = []
    outcome = seq.cell()
    while outcome is not stop:
        out.append(outcome.element)
        outcome = outcome.next()
    return out

to_list = to_eager_collection

def to_llist(seq):
    """Materialize the sequence into a cons list (see ``lazyseq.llist``).

    Elements are prepended as they arrive, and the result is reversed once
    at the end, for O(n) total.
    """
    _check_seq(seq)
    acc = nil
    outcome = seq.cell()
    while outcome is not stop:
        acc = cons(outcome.element, acc)
        outcome = outcome.next()
    return lreverse(acc)

def find(seq, pred):
    """Return ``Some(x)`` for the first element ``x`` satisfying ``pred``.

    If there is no such element, return ``None``. Stops pulling at the first match.
    """
    _check_seq(seq)
    _check_callable(pred, "pred")
    outcome = seq.cell()
    while outcome is not stop:
        if pred(outcome.element):
            return Some(outcome.element)
        outcome = outcome.next()
    return None

def find_map(seq, f):
    """Return the first ``Some`` that ``f(element)`` returns.

    ``f`` returns ``Some(x)`` for a hit and ``None`` for a miss. If no element
    is a hit, return ``None``.
    """
    _check_seq(seq)
    _check_callable(f)
    outcome = seq.cell()
    while outcome is not stop:
        result = f(outcome.element)
        if isinstance(result, Some):
            return result
        if result is not None:
            raise TypeError(f"expected `f` to return Some(...) or None, got {type(result)} with value {repr(result)}")
        outcome = outcome.next()
    return None

def any(seq, pred):
    """Whether some element satisfies ``pred``. ``False`` for an empty sequence.

    Stops at the first element that satisfies ``pred``.
    """
    return find(seq, pred) is not None

def all(seq, pred):
    """Whether every element satisfies ``pred``. ``True`` for an empty sequence.

    Stops at the first element that does not satisfy ``pred``.
    """
    _check_callable(pred, "pred")
    return find(seq, lambda x: not pred(x)) is None

def reduce(seq, f):
    """Left fold seeded with the first element.

    Returns ``Some(result)``, or ``None`` if the sequence is empty. For a
    single-element sequence, ``f`` is never called and the result is that
    element.
    """
    _check_seq(seq)
    _check_callable(f)
    outcome = seq.cell()
    if outcome is stop:
        return None
    return Some(fold(Seq(outcome.next), outcome.element, f))

def last(seq):
    """Return ``Some(x)`` for the last element ``x``, or ``None`` if empty.

    Linear time; walks the whole sequence.
    """
    return reduce(seq, lambda current, _: current)

def first(seq):
    """Return ``Some(x)`` for the first element ``x``, or ``None`` if empty.

    Pulls at most one element.
    """
    _check_seq(seq)
    outcome = seq.cell()
    if outcome is stop:
        return None
    return Some(outcome.element)

def at(seq, index):
    """Return ``Some(x)`` for the element ``x`` at zero-based ``index``.

    If the sequence is too short, or ``index`` is negative, return ``None``.
    Pulls at most ``index + 1`` elements.
    """
    _check_seq(seq)
    _check_int(index, "index")
    if index < 0:
        return None
    outcome = seq.cell()
    while outcome is not stop:
        if index == 0:
            return Some(outcome.element)
        index -= 1
        outcome = outcome.next()
    return None

def length(seq):
    """Return the number of elements. Walks the whole sequence."""
    return fold(seq, 0, lambda _, n: n + 1)

def group(seq, keyfn):
    """Group elements by ``keyfn(element)``, over the whole sequence.

    Returns a ``dict`` that maps each key to a ``list`` of the elements with
    that key, in the order they occurred. Keys appear in order of first
    occurrence. Unlike ``chunk``, elements with the same key need not be
    adjacent.

    Example::

        words = from_list(["apple", "avocado", "banana", "apricot", "blueberry"])
        assert group(words, lambda w: w[0]) == {"a": ["apple", "avocado", "apricot"],
                                                "b": ["banana", "blueberry"]}
    """
    _check_seq(seq)
    _check_callable(keyfn, "keyfn")
    groups = {}
    outcome = seq.cell()
    while outcome is not stop:
        groups.setdefault(keyfn(outcome.element), []).append(outcome.element)
        outcome = outcome.next()
    return groups

def step(seq):
    """Pull exactly one element, for driving a sequence by hand.

    Returns ``done`` if the sequence is empty, or ``Next(head, rest)``, where
    ``rest`` is a ``Seq`` of the remaining elements. ``seq`` itself is not
    consumed; stepping it again gives the same result.

    Example::

        result = step(from_list([1, 2]))
        head, rest = result                    # 1, and a Seq for [2]
        assert step(step(rest).accumulator) is done
    """
    _check_seq(seq)
    outcome = seq.cell()
    if outcome is stop:
        return done
    return Next(outcome.element, Seq(outcome.next))
