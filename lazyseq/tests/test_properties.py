# -*- coding: utf-8 -*-
"""Whole-engine properties: laziness, and how the pieces compose."""

import pytest

from ..collections import Some
from ..control import Ok, Err
from ..fold import to_list, to_eager_collection, reduce, try_fold
from ..producers import from_eager_collection, from_list, empty, single, range
from ..structure import (append, prepend, concat, flatten, flat_map, zip, map2,
                         interleave, cycle, chunk, sized_chunk)
from ..transform import (map, filter, filter_map, take, drop, take_while, drop_while,
                         scan, transform, index, intersperse)
from .conftest import never

combinators = {
    "map": lambda s: map(s, never),
    "filter": lambda s: filter(s, never),
    "filter_map": lambda s: filter_map(s, never),
    "take": lambda s: take(s, 3),
    "drop": lambda s: drop(s, 3),
    "take_while": lambda s: take_while(s, never),
    "drop_while": lambda s: drop_while(s, never),
    "scan": lambda s: scan(s, 0, never),
    "transform": lambda s: transform(s, 0, never),
    "index": index,
    "intersperse": lambda s: intersperse(s, None),
    "append": lambda s: append(s, s),
    "prepend": lambda s: drop(prepend(s, 0), 1),
    "concat": lambda s: concat([s, s]),
    "flatten": lambda s: flatten(map(s, never)),
    "flat_map": lambda s: flat_map(s, never),
    "zip": lambda s: zip(s, s),
    "map2": lambda s: map2(s, s, never),
    "interleave": lambda s: interleave(s, s),
    "cycle": cycle,
    "chunk": lambda s: chunk(s, never),
    "sized_chunk": lambda s: sized_chunk(s, 2),
}

@pytest.mark.parametrize("name", sorted(combinators))
def test_construction_pulls_nothing(name, source):
    src = source()
    build = combinators[name]
    build(build(src.seq()))
    assert src.calls == 0

def test_a_long_chain_pulls_nothing(source):
    src = source()
    s = src.seq()
    for build in combinators.values():
        s = build(s)
    assert src.calls == 0

@pytest.mark.parametrize("items", [[], [1], [1, 2, 3], list("abcdefg")])
@pytest.mark.parametrize("n", [0, 1, 2, 3, 10])
def test_take_and_drop_are_complementary(items, n):
    s = from_eager_collection(items)
    assert to_list(append(take(s, n), drop(s, n))) == items
    assert to_list(take(s, n)) == items[:n]
    assert to_list(drop(s, n)) == items[n:]

@pytest.mark.parametrize("items", [[], [0], [3, 1, 4, 1, 5, 9, 2, 6]])
def test_map_then_filter_matches_the_eager_version(items):
    def f(x):
        return 3 * x + 1
    def p(x):
        return x % 2 == 0
    lazy = to_eager_collection(filter(map(from_eager_collection(items), f), p))
    assert lazy == [y for y in (f(x) for x in items) if p(y)]

def test_documented_examples():
    assert to_list(zip(from_list([1, 2, 3]), from_list([10, 20]))) == [(1, 10), (2, 20)]
    assert to_list(chunk(from_list([1, 2, 2, 3, 4, 4, 6, 7, 7]), lambda n: n % 2)) == \
        [[1], [2, 2], [3], [4, 4, 6], [7, 7]]
    assert to_list(sized_chunk(from_list([1, 2, 3, 4, 5]), 2)) == [[1, 2], [3, 4], [5]]
    assert to_list(sized_chunk(empty(), 2)) == []
    assert to_list(intersperse(single(1), 0)) == [1]
    assert to_list(intersperse(empty(), 0)) == []
    assert reduce(empty(), never) is None
    assert reduce(single(5), never) == Some(5)
    assert to_eager_collection(take(cycle(from_list([1, 2])), 5)) == [1, 2, 1, 2, 1]

def test_try_fold_visits_exactly_up_to_the_failure():
    calls = []
    def fail_from_3(x, acc):
        calls.append(x)
        return Err(x) if x >= 3 else Ok(acc + x)
    assert try_fold(from_list([1, 2, 3, 4]), 0, fail_from_3) == Err(3)
    assert len(calls) == 3

def test_handles_are_shared_safely():
    base = range(0, 5)
    evens = filter(base, lambda x: x % 2 == 0)
    odds = filter(base, lambda x: x % 2 == 1)
    assert to_list(interleave(evens, odds)) == [0, 1, 2, 3, 4]
    assert to_list(base) == [0, 1, 2, 3, 4]
