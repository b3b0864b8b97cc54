# -*- coding: utf-8 -*-
"""Run all tests for `lazyseq`.

Any extra command-line arguments are passed through to pytest, e.g.
``python3 runtests.py -k cycle -v``.
"""

import os
import sys

import pytest

def main(args):
    testdir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "lazyseq", "tests")
    return pytest.main([testdir] + list(args))

if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
