# -*- coding: utf-8 -*-
"""Structural combinators: concatenation, merging, and grouping into chunks.

Like everything else that returns a ``Seq``, these are lazy; nothing is pulled
from any input until the returned handle's cell is invoked.

Merge order:

  - ``append``, ``concat``, ``flatten``: all of the first input, then all of the
    next one, and so on. An infinite input hides everything after it.
  - ``zip``, ``map2``: pairwise; the output ends as soon as either input ends.
  - ``interleave``: alternating; once one input ends, the rest of the other one
    follows uninterrupted.

**CAUTION**: ``cycle`` produces an infinite sequence; see its docstring for the
special case of an empty input.
"""

__all__ = ["append", "prepend", "concat", "flatten", "flat_map",
           "zip", "map2", "interleave", "cycle",
           "chunk", "sized_chunk"]

import logging

from .config import SeqConfig
from .core import Seq, Continue, stop, _stop, _check_seq, _check_callable, _check_int
from .producers import from_eager_collection
from .transform import map

logger = logging.getLogger(__name__)

def append(a, b):
    """Yield all elements of ``a``, then all elements of ``b``.

    ``b`` is not touched until ``a`` has ended. If ``a`` is infinite, it never is.
    """
    _check_seq(a, "a")
    _check_seq(b, "b")
    def appended(cell):
        def cell_():
            outcome = cell()
            if outcome is stop:
                return b.cell()
            return Continue(outcome.element, appended(outcome.next))
        return cell_
    return Seq(appended(a.cell))

def prepend(seq, element):
    """Yield ``element``, then all elements of ``seq``."""
    _check_seq(seq)
    upstream = seq.cell
    return Seq(lambda: Continue(element, upstream))

def _inner_cell(element):
    if not isinstance(element, Seq):
        raise TypeError(f"expected a Seq as an element of the outer sequence, got {type(element)} with value {repr(element)}")
    return element.cell

def flatten(seqs):
    """Concatenate a sequence of sequences, lazily.

    Only the currently active inner sequence and the rest of the outer one are
    held; the next inner sequence is not even pulled from the outer one until
    the current one has ended. Empty inner sequences are skipped within the
    same pull.

    Example::

        nested = from_list([from_list([1, 2]), empty(), from_list([3])])
        assert to_list(flatten(nested)) == [1, 2, 3]
    """
    _check_seq(seqs, "seqs")
    def flattened(inner, outer):
        def cell_():
            current, rest = inner, outer
            while True:
                if current is not None:
                    outcome = current()
                    if outcome is not stop:
                        return Continue(outcome.element, flattened(outcome.next, rest))
                outcome = rest()
                if outcome is stop:
                    return stop
                current, rest = _inner_cell(outcome.element), outcome.next
        return cell_
    return Seq(flattened(None, seqs.cell))

def concat(seqs):
    """Concatenate an eager collection (``list``, ``tuple``, ...) of sequences.

    Same as ``flatten(from_eager_collection(seqs))``, but checks up front that
    every item of ``seqs`` is a ``Seq``.
    """
    seqs = tuple(seqs)
    for s in seqs:
        _check_seq(s, "seqs[...]")
    return flatten(from_eager_collection(seqs))

def flat_map(seq, f):
    """Map each element to a sequence with ``f``, then concatenate those.

    Same as ``flatten(map(seq, f))``.
    """
    return flatten(map(seq, f))

def map2(a, b, f):
    """Combine corresponding elements of ``a`` and ``b`` with ``f(x, y)``.

    Ends as soon as either input ends. ``b`` is not pulled when ``a`` has
    already ended.
    """
    _check_seq(a, "a")
    _check_seq(b, "b")
    _check_callable(f)
    def mapped(ca, cb):
        def cell_():
            oa = ca()
            if oa is stop:
                return stop
            ob = cb()
            if ob is stop:
                return stop
            return Continue(f(oa.element, ob.element), mapped(oa.next, ob.next))
        return cell_
    return Seq(mapped(a.cell, b.cell))

def zip(a, b):
    """Pair up corresponding elements of ``a`` and ``b`` into 2-tuples.

    Truncates to the shorter input; no padding.

    Example::

        pairs = zip(from_list([1, 2, 3]), from_list([10, 20]))
        assert to_list(pairs) == [(1, 10), (2, 20)]
    """
    return map2(a, b, lambda x, y: (x, y))

def interleave(a, b):
    """Alternate elements of ``a`` and ``b``, starting with ``a``.

    Once one side runs out, the remainder of the other side follows
    uninterrupted (no truncation, unlike ``zip``).

    Example::

        merged = interleave(from_list([1, 2, 3, 4]), from_list([10, 20]))
        assert to_list(merged) == [1, 10, 2, 20, 3, 4]
    """
    _check_seq(a, "a")
    _check_seq(b, "b")
    def interleaved(current, other):
        def cell_():
            outcome = current()
            if outcome is stop:
                return other()
            return Continue(outcome.element, interleaved(other, outcome.next))
        return cell_
    return Seq(interleaved(a.cell, b.cell))

def cycle(seq):
    """Repeat the whole of ``seq`` forever.

    Each pass is a fresh traversal from the original handle's cell, so a
    stateful pipeline (e.g. one with ``drop_while`` in it) behaves the same on
    every pass.

    **CAUTION**: If ``seq`` is empty, the result never yields anything and a
    pull on it never returns; it busy-loops, starting pass after empty pass.
    After ``SeqConfig.empty_cycle_warning_passes`` consecutive empty passes, a
    warning is logged (once) to make such a hang diagnosable. Set
    ``SeqConfig.warn_on_empty_cycle = False`` to silence it.
    """
    _check_seq(seq)
    source = seq.cell
    def cycled(cell):
        def cell_():
            outcome = cell()
            if outcome is not stop:
                return Continue(outcome.element, cycled(outcome.next))
            # a stop straight from the source is an empty pass; otherwise a pass just ended
            empty_passes = 1 if cell is source else 0
            warned = False
            while True:
                outcome = source()
                if outcome is not stop:
                    return Continue(outcome.element, cycled(outcome.next))
                empty_passes += 1
                if (not warned and SeqConfig.warn_on_empty_cycle and
                        empty_passes >= SeqConfig.empty_cycle_warning_passes):
                    logger.warning("cycle: source sequence produced nothing in %d consecutive passes; "
                                   "cycling an empty sequence never yields and never terminates",
                                   empty_passes)
                    warned = True
        return cell_
    return Seq(cycled(source))

def chunk(seq, keyfn):
    """Group runs of consecutive elements that have the same key.

    ``keyfn`` is called once per element; consecutive elements whose keys
    compare equal go into the same chunk. Each chunk is emitted as a ``list``,
    in input order. This needs one element of lookahead: a chunk is only
    complete once the first element of the next chunk (or the end) is seen.

    Example::

        data = from_list([1, 2, 2, 3, 4, 4, 6, 7, 7])
        assert to_list(chunk(data, lambda n: n % 2)) == [[1], [2, 2], [3], [4, 4, 6], [7, 7]]
    """
    _check_seq(seq)
    _check_callable(keyfn, "keyfn")
    def collect(element, key, cell):
        group = [element]
        while True:
            outcome = cell()
            if outcome is stop:
                return Continue(group, _stop)
            k = keyfn(outcome.element)
            if k != key:
                return Continue(group, resume(outcome.element, k, outcome.next))
            group.append(outcome.element)
            cell = outcome.next
    def resume(element, key, cell):  # first element of the chunk already pulled
        return lambda: collect(element, key, cell)
    upstream = seq.cell
    def first():
        outcome = upstream()
        if outcome is stop:
            return stop
        return collect(outcome.element, keyfn(outcome.element), outcome.next)
    return Seq(first)

def sized_chunk(seq, n):
    """Group elements into ``list`` chunks of ``n`` elements each.

    The last chunk is shorter if the length of ``seq`` is not a multiple of
    ``n``. An empty ``seq`` gives no chunks at all (not one empty chunk).
    ``n <= 0`` is treated as ``1``.

    Example::

        assert to_list(sized_chunk(range(1, 6), 2)) == [[1, 2], [3, 4], [5]]
    """
    _check_seq(seq)
    _check_int(n)
    if n < 1:
        logger.debug("sized_chunk: clamping n = %d to 1", n)
        n = 1
    def chunked(cell):
        def cell_():
            group = []
            current = cell
            while len(group) < n:
                outcome = current()
                if outcome is stop:
                    return Continue(group, _stop) if group else stop
                group.append(outcome.element)
                current = outcome.next
            return Continue(group, chunked(current))
        return cell_
    return Seq(chunked(seq.cell))
