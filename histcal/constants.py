#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 19:05:12 2025

@author: Marcel Hesselberth
"""

JD0     = 1721423              # julian day of julian 0-12-31 (ordinal 0)
GD0     = JD0 + 2              # julian day of gregorian 0-12-31
MJD0    = 2400001              # julian day of MJD 0 (1858-11-17)

MAXYEAR = 999999999            # gregorian year range of the day count
MINYEAR = -MAXYEAR
MAX_ANNO_DOMINI = 1000000000   # bound for astronomical years of any era

MJD_AD8 = -676021              # julian AD 8-01-01, end of the ancient period
COUNCIL_OF_TOURS = 567         # earliest end year of a New Year rule
