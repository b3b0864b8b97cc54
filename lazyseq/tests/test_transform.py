# -*- coding: utf-8 -*-

import logging
from operator import add

import pytest

from ..collections import Some
from ..core import Next, done
from ..fold import to_list
from ..producers import from_list, range, empty, repeat, iterate
from ..transform import (map, filter, filter_map, take, drop, take_while, drop_while,
                         scan, transform, index, intersperse)

def test_map():
    assert to_list(map(range(1, 4), lambda x: 10 * x)) == [10, 20, 30]
    assert to_list(map(empty(), lambda x: 10 * x)) == []

def test_filter():
    assert to_list(filter(range(0, 10), lambda x: x % 3 == 0)) == [0, 3, 6, 9]
    assert to_list(filter(range(0, 10), lambda x: False)) == []

def test_filter_skips_long_runs_without_recursion():
    s = filter(range(0, 100000), lambda x: x == 99999)
    assert to_list(s) == [99999]

def test_filter_map():
    def parse(s):
        return Some(int(s)) if s.isdigit() else None
    assert to_list(filter_map(from_list(["1", "x", "3"]), parse)) == [1, 3]
    # a None element is kept when wrapped
    assert to_list(filter_map(from_list([None, 1]), lambda x: Some(x))) == [None, 1]

def test_filter_map_rejects_bare_values():
    s = filter_map(from_list([1]), lambda x: x)
    with pytest.raises(TypeError, match="Some"):
        to_list(s)

class TestTake:
    def test_basic(self):
        assert to_list(take(range(1, 10), 3)) == [1, 2, 3]
        assert to_list(take(range(1, 3), 5)) == [1, 2]
        assert to_list(take(repeat(0), 2)) == [0, 0]

    def test_does_not_pull_past_the_last_taken_element(self, source):
        src = source()
        assert to_list(take(src.seq(), 3)) == [0, 1, 2]
        assert src.calls == 3

    def test_zero_and_negative(self, source):
        src = source()
        assert to_list(take(src.seq(), 0)) == []
        assert to_list(take(src.seq(), -5)) == []
        assert src.calls == 0

    def test_negative_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lazyseq.transform"):
            take(range(0, 3), -1)
        assert "clamping" in caplog.text

    def test_requires_an_integer(self):
        with pytest.raises(TypeError):
            take(range(0, 3), 2.0)

class TestDrop:
    def test_basic(self):
        assert to_list(drop(range(1, 6), 2)) == [3, 4, 5]
        assert to_list(drop(range(1, 3), 5)) == []
        assert to_list(drop(range(1, 3), 0)) == [1, 2]
        assert to_list(drop(range(1, 3), -1)) == [1, 2]

    def test_skips_on_first_pull(self, source):
        src = source()
        s = drop(src.seq(), 2)
        assert src.calls == 0
        assert s.cell().element == 2
        assert src.calls == 3

    def test_on_infinite_input(self):
        assert to_list(take(drop(iterate(0, lambda x: x + 1), 1000), 2)) == [1000, 1001]

def test_take_while():
    assert to_list(take_while(from_list([1, 2, 5, 1]), lambda x: x < 3)) == [1, 2]
    assert to_list(take_while(iterate(1, lambda x: x + 1), lambda x: x < 4)) == [1, 2, 3]

def test_take_while_never_looks_past_the_first_failure():
    seen = []
    def small(x):
        seen.append(x)
        return x < 3
    to_list(take_while(from_list([1, 2, 5, 1, 0]), small))
    assert seen == [1, 2, 5]

def test_drop_while():
    assert to_list(drop_while(from_list([1, 2, 5, 1]), lambda x: x < 3)) == [5, 1]
    assert to_list(drop_while(from_list([1, 2]), lambda x: x < 3)) == []

def test_drop_while_stops_calling_pred():
    seen = []
    def small(x):
        seen.append(x)
        return x < 3
    to_list(drop_while(from_list([1, 2, 5, 1, 0]), small))
    assert seen == [1, 2, 5]

def test_scan():
    assert to_list(scan(range(1, 5), 0, add)) == [1, 3, 6, 10]
    assert to_list(scan(empty(), 0, add)) == []
    # argument order is f(element, acc)
    assert to_list(scan(from_list("abc"), "", lambda x, acc: acc + x)) == ["a", "ab", "abc"]

def test_transform():
    def diffs(x, prev):
        if x < 0:
            return done
        return Next(x - prev, x)
    data = from_list([1, 4, 9, 16, -1, 25])
    assert to_list(transform(data, 0, diffs)) == [1, 3, 5, 7]

def test_transform_stops_pulling_at_done(source):
    src = source()
    s = transform(src.seq(), None, lambda x, acc: Next(x, acc) if x < 2 else done)
    assert to_list(s) == [0, 1]
    assert src.calls == 3

def test_transform_rejects_bad_results():
    with pytest.raises(TypeError, match="Next"):
        to_list(transform(from_list([1]), 0, lambda x, acc: x + acc))

def test_index():
    assert to_list(index(from_list("ab"))) == [(0, "a"), (1, "b")]
    assert to_list(index(empty())) == []

def test_intersperse():
    assert to_list(intersperse(from_list("abc"), "-")) == ["a", "-", "b", "-", "c"]
    assert to_list(intersperse(from_list("a"), "-")) == ["a"]
    assert to_list(intersperse(empty(), "-")) == []

def test_intersperse_on_infinite_input():
    s = take(intersperse(iterate(1, lambda x: x + 1), 0), 5)
    assert to_list(s) == [1, 0, 2, 0, 3]
