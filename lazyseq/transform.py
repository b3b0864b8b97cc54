# -*- coding: utf-8 -*-
"""Transformation combinators: element-wise maps, filters, and prefixes.

Every combinator here takes a sequence handle first, and returns a new
handle. Nothing is pulled from the input until the returned handle's cell is
invoked. Each downstream pull pulls at most one upstream element, except for
the filters (``filter``, ``filter_map``, ``drop``, ``drop_while``), which loop
past rejected elements within a single pull.

For the producer ``iterate``, see ``lazyseq.producers``.
"""

__all__ = ["map", "filter", "filter_map",
           "take", "drop", "take_while", "drop_while",
           "scan", "transform", "index", "intersperse"]

import logging

from .collections import Some
from .core import (Seq, Continue, stop, Next, done,
                   _check_seq, _check_callable, _check_int)

logger = logging.getLogger(__name__)

def map(seq, f):
    """Apply ``f`` to each element. Same length, same termination point.

    Example::

        assert to_list(map(range(1, 4), lambda x: 10 * x)) == [10, 20, 30]
    """
    _check_seq(seq)
    _check_callable(f)
    def mapped(cell):
        def cell_():
            outcome = cell()
            if outcome is stop:
                return stop
            return Continue(f(outcome.element), mapped(outcome.next))
        return cell_
    return Seq(mapped(seq.cell))

def filter(seq, pred):
    """Keep only the elements for which ``pred`` returns truthy.

    A single pull loops through as many rejected upstream elements as it takes
    to find a match, or until upstream ends.

    **CAUTION**: Filtering an infinite sequence with a predicate that never
    matches again hangs the consumer on its next pull.
    """
    _check_seq(seq)
    _check_callable(pred, "pred")
    def filtered(cell):
        def cell_():
            outcome = cell()
            while outcome is not stop:
                if pred(outcome.element):
                    return Continue(outcome.element, filtered(outcome.next))
                outcome = outcome.next()
            return stop
        return cell_
    return Seq(filtered(seq.cell))

def filter_map(seq, f):
    """Map and filter in one pass.

    ``f`` returns ``Some(x)`` to emit ``x``, or ``None`` to drop the element.

    Example::

        def parse(s):
            return Some(int(s)) if s.isdigit() else None

        assert to_list(filter_map(from_list(["1", "x", "3"]), parse)) == [1, 3]
    """
    _check_seq(seq)
    _check_callable(f)
    def filtered(cell):
        def cell_():
            outcome = cell()
            while outcome is not stop:
                result = f(outcome.element)
                if isinstance(result, Some):
                    return Continue(result.get(), filtered(outcome.next))
                if result is not None:
                    raise TypeError(f"expected `f` to return Some(...) or None, got {type(result)} with value {repr(result)}")
                outcome = outcome.next()
            return stop
        return cell_
    return Seq(filtered(seq.cell))

def take(seq, n):
    """Yield at most the first ``n`` elements, then stop.

    Stops earlier if ``seq`` has fewer than ``n`` elements. After the ``n``th
    element, upstream is not pulled again, so this is safe on infinite input.

    ``n <= 0`` gives an empty sequence that never pulls upstream.
    """
    _check_seq(seq)
    _check_int(n)
    if n < 0:
        logger.debug("take: clamping n = %d to 0", n)
    def taken(cell, k):
        def cell_():
            if k <= 0:
                return stop
            outcome = cell()
            if outcome is stop:
                return stop
            return Continue(outcome.element, taken(outcome.next, k - 1))
        return cell_
    return Seq(taken(seq.cell, n))

def drop(seq, n):
    """Skip the first ``n`` elements, then yield the rest unchanged.

    The skipping happens on the first pull, not when ``drop`` is called. If
    ``seq`` has at most ``n`` elements, the result is empty.

    ``n <= 0`` passes everything through.
    """
    _check_seq(seq)
    _check_int(n)
    if n < 0:
        logger.debug("drop: clamping n = %d to 0", n)
    upstream = seq.cell
    def cell_():
        outcome = upstream()
        k = n
        while k > 0 and outcome is not stop:
            outcome = outcome.next()
            k -= 1
        return outcome
    return Seq(cell_)

def take_while(seq, pred):
    """Yield elements while ``pred`` holds; stop for good at the first failure.

    Elements after the first failing one are never examined, even if some of
    them would satisfy ``pred``.
    """
    _check_seq(seq)
    _check_callable(pred, "pred")
    def taken(cell):
        def cell_():
            outcome = cell()
            if outcome is stop or not pred(outcome.element):
                return stop
            return Continue(outcome.element, taken(outcome.next))
        return cell_
    return Seq(taken(seq.cell))

def drop_while(seq, pred):
    """Skip the leading run of elements satisfying ``pred``, yield the rest.

    From the first failing element onward, everything is passed through
    unchanged, without calling ``pred`` again.
    """
    _check_seq(seq)
    _check_callable(pred, "pred")
    upstream = seq.cell
    def cell_():
        outcome = upstream()
        while outcome is not stop and pred(outcome.element):
            outcome = outcome.next()
        return outcome
    return Seq(cell_)

def scan(seq, initial, f):
    """Running fold. Yield the accumulator after folding in each element.

    One output per input. The first output is ``f(first_element, initial)``;
    ``initial`` itself is not yielded. The argument order of ``f`` is
    ``(element, acc)``, like in ``fold``.

    Example - partial sums::

        from operator import add
        assert to_list(scan(range(1, 5), 0, add)) == [1, 3, 6, 10]
    """
    _check_seq(seq)
    _check_callable(f)
    def scanned(cell, acc):
        def cell_():
            outcome = cell()
            if outcome is stop:
                return stop
            newacc = f(outcome.element, acc)
            return Continue(newacc, scanned(outcome.next, newacc))
        return cell_
    return Seq(scanned(seq.cell, initial))

def transform(seq, initial, f):
    """Stateful map, with optional early termination.

    ``f(element, acc)`` returns either ``Next(output, newacc)`` to emit
    ``output`` and continue with ``newacc``, or ``done`` to end the output
    right there (the rest of the input is never pulled).

    Example - running differences, stopping at the first negative element::

        def diffs(x, prev):
            if x < 0:
                return done
            return Next(x - prev, x)

        data = from_list([1, 4, 9, 16, -1, 25])
        assert to_list(transform(data, 0, diffs)) == [1, 3, 5, 7]
    """
    _check_seq(seq)
    _check_callable(f)
    def transformed(cell, acc):
        def cell_():
            outcome = cell()
            if outcome is stop:
                return stop
            result = f(outcome.element, acc)
            if result is done:
                return stop
            if not isinstance(result, Next):
                raise TypeError(f"expected `f` to return Next(...) or done, got {type(result)} with value {repr(result)}")
            output, newacc = result
            return Continue(output, transformed(outcome.next, newacc))
        return cell_
    return Seq(transformed(seq.cell, initial))

def index(seq):
    """Pair each element with its zero-based position.

    Yields ``(position, element)`` tuples, in the same order as the builtin
    ``enumerate``.
    """
    _check_seq(seq)
    def indexed(cell, k):
        def cell_():
            outcome = cell()
            if outcome is stop:
                return stop
            return Continue((k, outcome.element), indexed(outcome.next, k + 1))
        return cell_
    return Seq(indexed(seq.cell, 0))

def intersperse(seq, sep):
    """Insert ``sep`` between consecutive elements.

    Never before the first element, nor after the last one; so a sequence
    with at most one element is passed through unchanged.

    Example::

        assert to_list(intersperse(from_list("abc"), "-")) == ["a", "-", "b", "-", "c"]
    """
    _check_seq(seq)
    # After the first element, each upstream element is emitted as the pair
    # `sep, element`; the separator is only emitted once its successor exists.
    def rest(cell):
        def cell_():
            outcome = cell()
            if outcome is stop:
                return stop
            element, nxt = outcome
            return Continue(sep, lambda: Continue(element, rest(nxt)))
        return cell_
    upstream = seq.cell
    def first():
        outcome = upstream()
        if outcome is stop:
            return stop
        return Continue(outcome.element, rest(outcome.next))
    return Seq(first)
