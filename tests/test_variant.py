#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 10:37:19 2025

@author: Marcel Hesselberth
"""

from histcal.history import *
from histcal.regions import regions
import pytest

FIRST = ChronoHistory.of_first_gregorian_reform()
PG = "historic-PROLEPTIC_GREGORIAN:cutover=none:ancient-julian-leap-years=[]"\
     ":new-year-strategy=[|BEGIN_OF_JANUARY]:era-preference=[default]"


def test_get_variant():
    assert(ChronoHistory.PROLEPTIC_GREGORIAN.get_variant() == PG)
    assert(str(ChronoHistory.PROLEPTIC_GREGORIAN) == PG)
    assert(FIRST.get_variant().startswith(
        "historic-INTRODUCTION_ON_1582_10_15:cutover=1582-10-15:"))
    history = ChronoHistory.of_gregorian_reform(MJDg(1752, 9, 14)) \
        .with_ancient_julian_leap_years(AncientJulianLeapYears.of(12, 9))
    assert(history.get_variant()
           == "historic-SINGLE_CUTOVER_DATE:cutover=1752-09-14"
              ":ancient-julian-leap-years=[12,9]"
              ":new-year-strategy=[|BEGIN_OF_JANUARY]"
              ":era-preference=[default]")
    assert(ChronoHistory.PROLEPTIC_BYZANTINE.get_variant().endswith(
        ":new-year-strategy=[|BEGIN_OF_SEPTEMBER]:era-preference="
        "[era->BYZANTINE,start->-999999999-01-01,end->999999999-12-31]"))

def test_named_instances():
    for history in (ChronoHistory.PROLEPTIC_GREGORIAN,
                    ChronoHistory.PROLEPTIC_JULIAN,
                    ChronoHistory.PROLEPTIC_BYZANTINE,
                    ChronoHistory.of_sweden(), FIRST):
        assert(ChronoHistory.from_variant(history.get_variant()) is history)

def test_roundtrip():
    histories = [
        ChronoHistory.of_gregorian_reform(MJDg(1752, 9, 14)),
        FIRST.with_ancient_julian_leap_years(AncientJulianLeapYears.SCALIGER),
        ChronoHistory.of_sweden().with_new_year_strategy(
            NewYearRule.MARIA_ANUNCIATA.until(1700)),
        FIRST.with_era_preference(
            EraPreference.hispanic_between(MJDj(1000, 1, 1),
                                           MJDj(1383, 12, 24))),
        FIRST.with_era_preference(
            EraPreference.ab_urbe_condita_until(MJDj(100, 1, 1))),
    ]
    for history in histories:
        assert(ChronoHistory.from_variant(history.get_variant()) == history)

def test_regions_roundtrip():
    for region in regions():
        history = ChronoHistory.of_locale(region)
        assert(ChronoHistory.from_variant(history.get_variant()) == history)

def test_parse_errors():
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(PG.replace("PROLEPTIC_GREGORIAN", "FOO"))
    assert(excinfo.value.fragment == "historic-FOO")
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(PG.replace("none", "1582-10-15"))
    assert(excinfo.value.fragment == "1582-10-15")
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(PG.replace("cutover=", "cut-over="))
    assert(excinfo.value.fragment == "cut-over=none")
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(PG.rsplit(":", 1)[0])
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(PG.replace("[|BEGIN_OF_JANUARY]",
                                              "[FOO->1000|BEGIN_OF_JANUARY]"))
    assert(excinfo.value.fragment == "FOO->1000")
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(PG.replace("[default]", "[AD]"))
    assert(excinfo.value.fragment == "[AD]")
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(PG.replace("=[]", "=[42,39]"))
    assert(excinfo.value.fragment == "[42,39]")
    with pytest.raises(ValueError) as excinfo:
        ChronoHistory.from_variant("historic")

def test_cutover_errors():
    single = "historic-SINGLE_CUTOVER_DATE:cutover={}" \
             ":ancient-julian-leap-years=[]" \
             ":new-year-strategy=[|BEGIN_OF_JANUARY]:era-preference=[default]"
    assert(ChronoHistory.from_variant(single.format("1752-09-14"))
           .get_gregorian_cutover_date() == MJDg(1752, 9, 14))
    for cutover in ("1582-10-15", "1500-01-01", "1752-02-30", "abc", "none"):
        with pytest.raises(VariantParseError) as excinfo:
            ChronoHistory.from_variant(single.format(cutover))
        assert(excinfo.value.fragment == cutover)

def test_canonical():
    # PROLEPTIC_BYZANTINE has a fixed New Year strategy
    text = ChronoHistory.PROLEPTIC_BYZANTINE.get_variant().replace(
        "BEGIN_OF_SEPTEMBER", "BEGIN_OF_JANUARY")
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(text)
    # leap years out of the chronological order
    text = FIRST.with_ancient_julian_leap_years(
        AncientJulianLeapYears.of(12, 9)).get_variant().replace("12,9", "9,12")
    with pytest.raises(VariantParseError) as excinfo:
        ChronoHistory.from_variant(text)
