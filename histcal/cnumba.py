#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 19:02:41 2025

@author: Marcel Hesselberth
"""

import numba

numba_acc = not numba.config.DISABLE_JIT


def cnjit(signature_or_function=None, **kwargs):
    """
    Compile a calendar kernel in nopython mode.

    With an explicit signature the kernel is compiled eagerly at import.
    Setting NUMBA_DISABLE_JIT=1 leaves the plain Python functions in place,
    which is convenient for debugging.
    """
    return numba.njit(signature_or_function, **kwargs)
