#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 11 14:02:19 2025

@author: Marcel Hesselberth
"""

from histcal.algorithm import *
from histcal.calmath import MJDg, MJDj
import pytest

JULIAN = CalendarAlgorithm.JULIAN
GREGORIAN = CalendarAlgorithm.GREGORIAN
SWEDISH = CalendarAlgorithm.SWEDISH
AD = HistoricEra.AD
BC = HistoricEra.BC


def test_is_leap_year():
    assert(JULIAN.is_leap_year(1900) is True)
    assert(GREGORIAN.is_leap_year(1900) is False)
    assert(GREGORIAN.is_leap_year(2000) is True)
    assert(JULIAN.is_leap_year(-44) is True)
    assert(JULIAN.is_leap_year(-41) is False)
    assert(SWEDISH.is_leap_year(1700) is False)
    assert(SWEDISH.is_leap_year(1704) is True)

def test_max_day_of_month():
    assert(JULIAN.max_day_of_month(1900, 2) == 29)
    assert(GREGORIAN.max_day_of_month(1900, 2) == 28)
    assert(GREGORIAN.max_day_of_month(2000, 2) == 29)
    assert(GREGORIAN.max_day_of_month(2000, 4) == 30)
    assert(SWEDISH.max_day_of_month(1712, 2) == 30)
    assert(SWEDISH.max_day_of_month(1700, 2) == 28)
    with pytest.raises(ValueError) as excinfo:
        JULIAN.max_day_of_month(2000, 13)

def test_day_count():
    assert(GREGORIAN.to_day_count(1858, 11, 17) == 0)
    assert(JULIAN.to_day_count(1582, 10, 5) == -100840)
    assert(GREGORIAN.from_day_count(-100840) == (1582, 10, 15))
    assert(JULIAN.from_day_count(-100840) == (1582, 10, 5))
    with pytest.raises(ValueError) as excinfo:
        GREGORIAN.to_day_count(2001, 2, 29)
    with pytest.raises(ValueError) as excinfo:
        JULIAN.to_day_count(2001, 4, 31)
    with pytest.raises(OverflowError) as excinfo:
        GREGORIAN.to_day_count(1000000000, 1, 1)

def test_swedish():
    assert(SWEDISH.to_day_count(1712, 2, 30) == MJDj(1712, 2, 29))
    assert(SWEDISH.to_day_count(1712, 2, 29) == MJDj(1712, 2, 28))
    assert(SWEDISH.to_day_count(1705, 6, 1) == MJDj(1705, 6, 1) - 1)
    assert(SWEDISH.to_day_count(1700, 3, 1) == MJDj(1700, 2, 29))
    assert(SWEDISH.from_day_count(MJDj(1712, 2, 29)) == (1712, 2, 30))
    assert(SWEDISH.from_day_count(MJDj(1712, 2, 28)) == (1712, 2, 29))
    assert(SWEDISH.from_day_count(MJDj(1705, 6, 1) - 1) == (1705, 6, 1))
    with pytest.raises(ValueError) as excinfo:
        SWEDISH.to_day_count(1700, 2, 29)

def test_dates():
    assert(GREGORIAN.to_mjd(HistoricDate(AD, 1582, 10, 15)) == -100840)
    assert(JULIAN.to_mjd(HistoricDate(BC, 45, 1, 1)) == MJDg(-45, 12, 30))
    assert(JULIAN.from_mjd(MJDj(0, 12, 31)) == HistoricDate(BC, 1, 12, 31))
    assert(JULIAN.from_mjd(MJDj(1, 1, 1)) == HistoricDate(AD, 1, 1, 1))
    assert(GREGORIAN.is_valid(HistoricDate(AD, 2000, 2, 29)) is True)
    assert(GREGORIAN.is_valid(HistoricDate(AD, 1900, 2, 29)) is False)
    assert(JULIAN.is_valid(HistoricDate(AD, 1900, 2, 29)) is True)
    assert(JULIAN.is_valid(HistoricDate(BC, 1, 2, 29)) is True)
    assert(JULIAN.is_valid(HistoricDate(BC, 2, 2, 29)) is False)
    assert(SWEDISH.max_day(HistoricDate(AD, 1712, 2, 1)) == 30)

def test_byzantine_date():
    date = HistoricDate(HistoricEra.BYZANTINE, 7208, 1, 1)
    assert(JULIAN.to_mjd(date) == MJDj(1700, 1, 1))

def test_roundtrip():
    for algorithm in (JULIAN, GREGORIAN):
        for mjd in range(-700000, 60000, 773):
            date = algorithm.from_mjd(mjd)
            assert(algorithm.to_mjd(date) == mjd)
    for mjd in range(MJDj(1700, 2, 29), MJDj(1712, 3, 1)):
        assert(SWEDISH.to_day_count(*SWEDISH.from_day_count(mjd)) == mjd)
