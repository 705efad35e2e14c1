#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 12 17:20:44 2025

@author: Marcel Hesselberth
"""

from operator import index as _index


def julian_easter(year):
    """
    Easter Sunday in the Julian calendar (Meeus, Astronomical Algorithms).

    Parameters
    ----------
    year : int
           Astronomical year.

    Returns
    -------
    (month, day)
        Julian month (3 or 4) and day of Easter Sunday.

    """
    year = _index(year)
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month = (d + e + 114) // 31
    day = (d + e + 114) % 31 + 1
    return month, day


def march_day(year):
    """Easter Sunday counted in days from the end of February (April 1 = 32)."""
    month, day = julian_easter(year)
    return day if month == 3 else day + 31
