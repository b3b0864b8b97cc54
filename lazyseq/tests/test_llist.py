# -*- coding: utf-8 -*-

import pickle

import pytest

from ..llist import (cons, nil, car, cdr,
                     ll, llist, lreverse, lappend, llength, lsplit)

def test_cons_car_cdr():
    c = cons(1, 2)
    assert car(c) == 1
    assert cdr(c) == 2
    with pytest.raises(TypeError, match="item assignment"):
        c.car = 3
    with pytest.raises(TypeError, match="expected a cons"):
        car(42)
    assert cons(1, 2) == cons(1, 2)
    assert cons(1, 2) != cons(2, 3)

def test_ll():
    assert ll(1, 2, 3) == cons(1, cons(2, cons(3, nil)))
    assert ll() is nil
    assert ll(1, 2) != ll(1, 2, 3)
    # new lists may share structure with existing ones
    l1 = ll(3, 2, 1)
    l2 = cons(4, l1)
    assert l1 == ll(3, 2, 1)
    assert l2 == ll(4, 3, 2, 1)
    assert cdr(l2) is l1

def test_repr():
    assert repr(nil) == "nil"
    assert repr(ll(1, 2, 3)) == "ll(1, 2, 3)"
    assert repr(cons(1, 2)) == "cons(1, 2)"

def test_iteration_and_length():
    assert tuple(ll(1, 2, 3)) == (1, 2, 3)
    assert tuple(nil) == ()
    assert len(ll(1, 2, 3)) == 3
    assert len(nil) == 0
    assert llength(ll("a", "b")) == 2
    assert not nil
    assert ll(None)
    with pytest.raises(TypeError, match="Not a linked list"):
        tuple(cons(1, 2))

def test_llist_and_lreverse():
    assert llist([1, 2, 3]) == ll(1, 2, 3)
    assert llist(x for x in (1, 2, 3)) == ll(1, 2, 3)
    assert llist({1}) == ll(1)
    assert lreverse([1, 2, 3]) == ll(3, 2, 1)
    assert lreverse(ll(1, 2, 3)) == ll(3, 2, 1)
    assert lreverse(()) is nil

def test_lappend():
    assert lappend(ll(1, 2), ll(3), nil, ll(4, 5)) == ll(1, 2, 3, 4, 5)
    assert lappend() is nil
    tail = ll(3, 4)
    result = lappend(ll(1, 2), tail)
    assert cdr(cdr(result)) is tail

def test_lsplit():
    assert lsplit(2, ll(1, 2, 3)) == (ll(1, 2), ll(3))
    assert lsplit(0, ll(1, 2)) == (nil, ll(1, 2))
    assert lsplit(5, ll(1)) == (ll(1), nil)
    assert lsplit(-1, ll(1)) == (nil, ll(1))
    lst = ll(1, 2, 3)
    _, suffix = lsplit(1, lst)
    assert suffix is cdr(lst)

def test_hash_and_pickle():
    assert hash(ll(1, 2)) == hash(ll(1, 2))
    assert {ll(1, 2): "x"}[ll(1, 2)] == "x"
    assert pickle.loads(pickle.dumps(nil)) is nil
    assert pickle.loads(pickle.dumps(ll(1, 2, 3))) == ll(1, 2, 3)

def test_improper_pair():
    c = cons(1, 2)
    assert repr(c) == "cons(1, 2)"
    assert c == cons(1, 2)
    assert c != cons(1, 3)
    assert c != ll(1, 2)
    assert hash(c) == hash(cons(1, 2))
    with pytest.raises(TypeError, match=r"Not a linked list: cons\(1, 2\)"):
        len(c)
    with pytest.raises(TypeError, match=r"Not a linked list: cons\(0, cons\(1, 2\)\)"):
        tuple(cons(0, c))
