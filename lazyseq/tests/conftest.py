# -*- coding: utf-8 -*-

import pytest

from ..core import Next, done
from ..producers import unfold

class CountingSource:
    """Integer source 0, 1, 2, ... that counts how many times its step runs.

    With ``n=None`` the source is infinite. Every pull costs one step call;
    the final pull that ends a finite source costs one more.
    """
    def __init__(self, n=None):
        self.n = n
        self.calls = 0
    def step(self, k):
        self.calls += 1
        if self.n is not None and k >= self.n:
            return done
        return Next(k, k + 1)
    def seq(self):
        return unfold(0, self.step)

@pytest.fixture
def source():
    return CountingSource

def never(*args):
    raise AssertionError("user function called before any element was pulled")
