#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 15:11:08 2025

@author: Marcel Hesselberth
"""

from histcal.newyear import *
from histcal.computus import julian_easter, march_day
import pytest

AD = HistoricEra.AD
BC = HistoricEra.BC
BYZANTINE = HistoricEra.BYZANTINE
JANUARY = NewYearRule.BEGIN_OF_JANUARY
SEPTEMBER = NewYearRule.BEGIN_OF_SEPTEMBER

ENGLAND = NewYearRule.CHRISTMAS_STYLE.until(1087) \
    .and_(JANUARY.until(1155)) \
    .and_(NewYearRule.MARIA_ANUNCIATA.until(1752))
RUSSIA = JANUARY.until(988) \
    .and_(NewYearRule.BEGIN_OF_MARCH.until(1493)) \
    .and_(SEPTEMBER.until(1700))


def test_julian_easter():
    assert(julian_easter(1564) == (4, 2))
    assert(julian_easter(1565) == (4, 22))
    assert(julian_easter(1566) == (4, 14))
    assert(julian_easter(2024) == (4, 22))
    assert(march_day(1564) == 33)

def test_new_year():
    assert(JANUARY.new_year(AD, 1600) == HistoricDate(AD, 1600, 1, 1))
    assert(NewYearRule.BEGIN_OF_MARCH.new_year(AD, 1600)
           == HistoricDate(AD, 1600, 3, 1))
    assert(NewYearRule.CHRISTMAS_STYLE.new_year(AD, 1066)
           == HistoricDate(AD, 1065, 12, 25))
    assert(NewYearRule.CHRISTMAS_STYLE.new_year(AD, 1)
           == HistoricDate(BC, 1, 12, 25))
    assert(SEPTEMBER.new_year(BYZANTINE, 7208)
           == HistoricDate(BYZANTINE, 7207, 9, 1))
    assert(SEPTEMBER.new_year(BYZANTINE, 1)
           == HistoricDate(BYZANTINE, 0, 9, 1))
    assert(NewYearRule.EASTER_STYLE.new_year(AD, 1564)
           == HistoricDate(AD, 1564, 4, 1))
    assert(NewYearRule.GOOD_FRIDAY.new_year(AD, 1564)
           == HistoricDate(AD, 1564, 3, 31))
    assert(NewYearRule.MARIA_ANUNCIATA.new_year(AD, 1600)
           == HistoricDate(AD, 1600, 3, 25))
    assert(NewYearRule.CALCULUS_PISANUS.new_year(AD, 1600)
           == HistoricDate(AD, 1599, 3, 25))
    assert(NewYearRule.EPIPHANY.new_year(AD, 1600)
           == HistoricDate(AD, 1600, 1, 6))

def test_until():
    assert(JANUARY.until(568).segments == ((JANUARY, 568),))
    assert(NewYearRule.MARIA_ANUNCIATA.until(1752).segments
           == ((JANUARY, 567), (NewYearRule.MARIA_ANUNCIATA, 1752)))
    with pytest.raises(ConfigurationError) as excinfo:
        NewYearRule.MARIA_ANUNCIATA.until(567)
    with pytest.raises(ConfigurationError) as excinfo:
        JANUARY.until(100)

def test_and():
    a = NewYearRule.CHRISTMAS_STYLE.until(1087)
    b = JANUARY.until(1155)
    assert(a.and_(b) == b.and_(a))
    assert(a.and_(a) == a)
    assert(ENGLAND.segments == ((JANUARY, 567),
                                (NewYearRule.CHRISTMAS_STYLE, 1087),
                                (JANUARY, 1155),
                                (NewYearRule.MARIA_ANUNCIATA, 1752)))
    with pytest.raises(ConfigurationError) as excinfo:
        a.and_(NewYearRule.MARIA_ANUNCIATA.until(1087))
    with pytest.raises(TypeError) as excinfo:
        a.and_(JANUARY)

def test_rule():
    assert(ENGLAND.rule(AD, 1066) is NewYearRule.CHRISTMAS_STYLE)
    assert(ENGLAND.rule(AD, 1087) is JANUARY)
    assert(ENGLAND.rule(AD, 1751) is NewYearRule.MARIA_ANUNCIATA)
    assert(ENGLAND.rule(AD, 1752) is JANUARY)
    assert(ENGLAND.rule(BC, 100) is JANUARY)
    assert(RUSSIA.rule(AD, 1699) is SEPTEMBER)
    assert(RUSSIA.rule(AD, 1700) is JANUARY)
    assert(RUSSIA.rule(BYZANTINE, 7208) is SEPTEMBER)
    assert(RUSSIA.carries_over(BYZANTINE, 7208) is True)
    assert(RUSSIA.carries_over(AD, 1700) is False)
    assert(RUSSIA.rule(BYZANTINE, 7209) is JANUARY)

def test_displayed_year():
    assert(HistoricDate(AD, 1066, 12, 24).get_year_of_era(ENGLAND) == 1066)
    assert(HistoricDate(AD, 1066, 12, 25).get_year_of_era(ENGLAND) == 1067)
    assert(HistoricDate(AD, 1603, 3, 24).get_year_of_era(ENGLAND) == 1602)
    assert(HistoricDate(AD, 1603, 3, 25).get_year_of_era(ENGLAND) == 1603)
    assert(HistoricDate(AD, 1752, 3, 24).get_year_of_era(ENGLAND) == 1752)
    assert(HistoricDate(BYZANTINE, 7207, 9, 1).get_year_of_era(RUSSIA)
           == 7208)
    assert(HistoricDate(BYZANTINE, 7207, 8, 31).get_year_of_era(RUSSIA)
           == 7207)

def test_default():
    assert(NewYearStrategy.DEFAULT.rule(AD, 1200) is JANUARY)
    assert(NewYearStrategy.DEFAULT.new_year(BC, 45)
           == HistoricDate(BC, 45, 1, 1))
    byzantine = NewYearStrategy((), SEPTEMBER)
    assert(byzantine.new_year(BYZANTINE, 7208)
           == HistoricDate(BYZANTINE, 7207, 9, 1))
    assert(byzantine != NewYearStrategy.DEFAULT)

def test_str():
    assert(str(NewYearStrategy.DEFAULT) == "[|BEGIN_OF_JANUARY]")
    assert(str(NewYearRule.EASTER_STYLE.until(1567))
           == "[BEGIN_OF_JANUARY->567,EASTER_STYLE->1567|BEGIN_OF_JANUARY]")
    assert(NewYearStrategy.parse(str(ENGLAND)) == ENGLAND)
    assert(NewYearStrategy.parse(str(RUSSIA)) == RUSSIA)
    assert(NewYearStrategy.parse("[|BEGIN_OF_SEPTEMBER]").default is SEPTEMBER)

def test_parse_errors():
    with pytest.raises(VariantParseError) as excinfo:
        NewYearStrategy.parse("[FOO->1000|BEGIN_OF_JANUARY]")
    assert(excinfo.value.fragment == "FOO->1000")
    with pytest.raises(VariantParseError) as excinfo:
        NewYearStrategy.parse("BEGIN_OF_JANUARY->1000")
    with pytest.raises(VariantParseError) as excinfo:
        NewYearStrategy.parse("[BEGIN_OF_JANUARY->1000|FOO]")
    assert(excinfo.value.fragment == "FOO")
    with pytest.raises(VariantParseError) as excinfo:
        NewYearStrategy.parse("[BEGIN_OF_MARCH->1000,EPIPHANY->1000"
                              "|BEGIN_OF_JANUARY]")
