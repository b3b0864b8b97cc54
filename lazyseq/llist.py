# -*- coding: utf-8 -*-
"""Cons lists: the eager ordered sequence used by the lazy sequence engine.

Immutable, hashable, pickleable. Prepending is O(1) (``cons(x, lst)``),
reversing is O(n). This is the collaborator the engine relies on whenever an
accumulated prefix must be reversed into stored order, e.g. ``to_llist``.

A cons list is also a valid source for ``from_eager_collection``; it is walked
cell by cell without copying.
"""

__all__ = ["cons", "nil", "car", "cdr",
           "ll", "llist", "lreverse", "lappend", "llength", "lsplit",
           "LinkedListIterator"]

from collections.abc import Iterable, Iterator
from itertools import zip_longest

from .singleton import Singleton

class Nil(Singleton):
    """The empty linked list. Singleton."""
    # support the iterator protocol so we can say tuple(nil) --> ()
    def __iter__(self):
        return self
    def __next__(self):
        raise StopIteration()
    def __len__(self):
        return 0
    def __bool__(self):
        return False
    def __repr__(self):
        return "nil"
nil = Nil()

class LinkedListIterator:
    """Iterator for linked lists built from cons cells."""
    def __init__(self, head, _fullerror=True):
        if not (isinstance(head, cons) or head is nil):
            raise TypeError("expected a cons or nil, got {} with value {}".format(type(head), head))
        self._head = head
        self._cell = head
        self._fullerror = _fullerror
    def __iter__(self):
        return self
    def __next__(self):
        cell = self._cell
        if cell is nil:
            raise StopIteration()
        if not (isinstance(cell.cdr, cons) or cell.cdr is nil):
            if self._fullerror:
                raise TypeError("Not a linked list: {}".format(self._head))
            raise TypeError("Not a linked list")  # avoid infinite loop in cons.__repr__
        self._cell = cell.cdr
        return cell.car
Iterable.register(LinkedListIterator)
Iterator.register(LinkedListIterator)

class cons:
    """Cons cell a.k.a. pair. Immutable, like in Racket.

    Iterable; iterates as a linked list.
    """
    def __init__(self, v1, v2):
        self.car = v1
        self.cdr = v2
        self._immutable = True
    def __setattr__(self, k, v):
        if hasattr(self, "_immutable"):
            raise TypeError("'cons' object does not support item assignment")
        super().__setattr__(k, v)
    def __iter__(self):
        return LinkedListIterator(self)
    def __len__(self):
        return llength(self)
    def __bool__(self):
        return True
    def __repr__(self):
        """Representation in pythonic notation.

        Suitable for ``eval`` if all elements are."""
        try:
            # listcomp, not genexpr, since we want to trigger any exceptions **now**.
            result = [repr(x) for x in LinkedListIterator(self, _fullerror=False)]
            return "ll({})".format(", ".join(result))
        except TypeError:
            return "cons({}, {})".format(repr(self.car), repr(self.cdr))
    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, cons):
            return False
        try:  # duck test linked lists
            fill = object()
            for a, b in zip_longest(LinkedListIterator(self, _fullerror=False),
                                    LinkedListIterator(other, _fullerror=False),
                                    fillvalue=fill):
                if a != b:
                    return False
            return True
        except TypeError:
            return self.car == other.car and self.cdr == other.cdr
    def __hash__(self):
        try:
            tpl = tuple(LinkedListIterator(self, _fullerror=False))
        except TypeError:
            tpl = (self.car, self.cdr)
        return hash(tpl)

def _typecheck(x):
    if not isinstance(x, cons):
        raise TypeError("expected a cons, got {} with value {}".format(type(x), x))
    return x

def car(x):
    """Return the first half of a cons cell."""
    return _typecheck(x).car
def cdr(x):
    """Return the second half of a cons cell."""
    return _typecheck(x).cdr

def ll(*elts):
    """Make a linked list with the given elements.

    ``ll(...)`` plays the same role as ``[...]`` or ``(...)`` for lists or tuples.
    """
    return llist(elts)

def llist(iterable):
    """Make a linked list from an iterable.

    Sequences are walked backwards, so one linear pass suffices. Anything else
    is walked forwards and then reversed.
    """
    try:
        backwards = reversed(iterable)
    except TypeError:
        return lreverse(lreverse(iterable))
    acc = nil
    for x in backwards:
        acc = cons(x, acc)
    return acc

def lreverse(iterable):
    """Reverse an iterable, loading the result into a linked list. O(n)."""
    acc = nil
    for x in iterable:
        acc = cons(x, acc)
    return acc

def lappend(*ls):
    """Append the given linked lists left-to-right.

    The last list is shared, not copied.
    """
    if not ls:
        return nil
    *init, result = ls
    for lst in reversed(init):
        for x in lreverse(lst):
            result = cons(x, result)
    return result

def llength(lst):
    """Return the number of elements in a linked list. O(n)."""
    n = 0
    for _ in LinkedListIterator(lst):
        n += 1
    return n

def lsplit(n, lst):
    """Split a linked list at position ``n``.

    Returns ``(prefix, suffix)``; the suffix shares structure with ``lst``.
    If ``lst`` is shorter than ``n``, the suffix is ``nil``. Negative ``n``
    is treated as zero.
    """
    acc = nil
    cell = lst
    while n > 0 and cell is not nil:
        acc = cons(_typecheck(cell).car, acc)
        cell = cell.cdr
        n -= 1
    return lreverse(acc), cell
