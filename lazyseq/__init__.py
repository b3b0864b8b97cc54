# -*- coding: utf-8 -*-
"""Lazy sequences: producers, combinators and consumers over suspension cells.

A ``Seq`` wraps a cell, a zero-argument callable that returns either ``stop``
or ``Continue(element, next_cell)``. Producers make sequences, combinators
wrap them in further lazy layers, and consumers pull the elements::

    from lazyseq import range, map, filter, take, to_list

    squares_of_odds = take(map(filter(range(0, 10**9), lambda n: n % 2),
                               lambda n: n * n), 3)
    assert to_list(squares_of_odds) == [1, 9, 25]

Note that several names here (``map``, ``filter``, ``zip``, ``range``,
``any``, ``all``) shadow builtins on a star import.

See ``dir(lazyseq)`` and submodule docstrings for more.
"""

__version__ = '0.1.0'

from .collections import *  # noqa: F401, F403
from .config import *  # noqa: F401, F403
from .control import *  # noqa: F401, F403
from .core import *  # noqa: F401, F403
from .fold import *  # noqa: F401, F403
from .llist import *  # noqa: F401, F403
from .producers import *  # noqa: F401, F403
from .structure import *  # noqa: F401, F403
from .transform import *  # noqa: F401, F403
