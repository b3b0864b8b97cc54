# -*- coding: utf-8 -*-
"""Global settings for the sequence engine."""

__all__ = ["SeqConfig"]

class SeqConfig:
    """Global settings for the sequence engine.

    This is just a bunch of constants.

    If you want to change the settings, just assign new values to the attributes
    at any point in your program; the new values take effect from that point
    forward. Settings are read when a cell is invoked, not when a combinator
    is constructed.

    `warn_on_empty_cycle`:        bool; whether ``cycle`` logs a warning when it
                                  is busy-looping over an empty source. Default
                                  is `True`.
    `empty_cycle_warning_passes`: int; how many consecutive empty passes ``cycle``
                                  makes before it logs that warning (once per
                                  traversal). Default is `1000`.
    """
    warn_on_empty_cycle = True
    empty_cycle_warning_passes = 1000
