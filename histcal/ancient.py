#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 12 14:48:09 2025

@author: Marcel Hesselberth
"""

import numpy as np
from operator import index as _index
from histcal.algorithm import CalendarAlgorithm
from histcal.calmath import month_length
from histcal.constants import MJD_AD8
from histcal.date import HistoricDate
from histcal.era import HistoricEra
from histcal.errors import ConfigurationError

"""
Irregular leap years of the early Julian calendar.

After the reform of Julius Caesar (45 BC) the pontifices inserted a leap
day every third year instead of every fourth. Augustus corrected the error
by suspending leap days until the calendar was back in line, from AD 8 on
the calendar runs as intended. Which years were leap years in between is
a matter of reconstruction. Scaliger's version is provided as SCALIGER,
others (Matzat, Bennett, ...) can be built with of().

Leap years are given as BC years. The AD years are given as 1 - year, so
AD 4 is written as -3.
"""

_FIRST_YEAR = -44   # BC 45, astronomical
_LAST_YEAR = 8      # AD 8, first regular year


class AncientJulianLeapYears:
    """
    An immutable table of ancient leap years.

    The years are kept in chronological order, two tables with the same
    years compare equal regardless of the order they were given in.
    """
    __slots__ = ("_leaps", "_calculus")

    def __init__(self, *bc_years):
        if not bc_years:
            raise ConfigurationError("Missing ancient julian leap years.")
        leaps = []
        for bc in bc_years:
            year = 1 - _index(bc)
            if not _FIRST_YEAR <= year < _LAST_YEAR:
                raise ConfigurationError(
                    f"Leap year out of range BC 45..AD 7: {bc}")
            if year in leaps:
                raise ConfigurationError(f"Duplicate leap year: {bc}")
            leaps.append(year)
        self._leaps = tuple(sorted(leaps))
        self._calculus = AncientCalculus(self._leaps)

    @classmethod
    def of(cls, *bc_years):
        """
        Table of ancient leap years, for example of(42, 39, 36, -3).

        Returns the predefined SCALIGER instance for Scaliger's years.
        """
        table = cls(*bc_years)
        if table == cls.SCALIGER:
            return cls.SCALIGER
        return table

    @property
    def pattern(self):
        """The leap years as BC numbers in chronological order."""
        return tuple(1 - year for year in self._leaps)

    @property
    def calculus(self):
        return self._calculus

    def __eq__(self, other):
        if isinstance(other, AncientJulianLeapYears):
            return self._leaps == other._leaps
        return NotImplemented

    def __hash__(self):
        return hash(self._leaps)

    def __repr__(self):
        return f"AncientJulianLeapYears.of{self.pattern}"

    def __str__(self):
        eras = [HistoricEra.christian(year) for year in self._leaps]
        return ", ".join(f"{era.abbreviation} {era.year_of_era(year)}"
                         for era, year in zip(eras, self._leaps))


class AncientCalculus:
    """
    Julian calendar with explicit leap years from BC 45 until AD 7.

    From AD 8 on the standard Julian calendar applies. Dates before
    BC 45-01-01 do not exist.
    """

    def __init__(self, leaps):
        years = np.arange(_FIRST_YEAR, _LAST_YEAR)
        self._leap = np.isin(years, leaps)
        lengths = np.where(self._leap, 366, 365)
        # MJD of January 1 of each year, counted back from AD 8
        self._starts = MJD_AD8 - np.cumsum(lengths[::-1])[::-1]

    def _check_year(self, year):
        year = _index(year)
        if year < _FIRST_YEAR:
            raise ValueError("Not valid before BC 45", year)
        return year

    def is_leap_year(self, year):
        year = self._check_year(year)
        if year >= _LAST_YEAR:
            return CalendarAlgorithm.JULIAN.is_leap_year(year)
        return bool(self._leap[year - _FIRST_YEAR])

    def max_day_of_month(self, year, month):
        month = _index(month)
        if not 1 <= month <= 12:
            raise ValueError('month must be in 1..12', month)
        return int(month_length(month, self.is_leap_year(year)))

    def to_day_count(self, year, month, day):
        year = self._check_year(year)
        if year >= _LAST_YEAR:
            return CalendarAlgorithm.JULIAN.to_day_count(year, month, day)
        if not 1 <= _index(day) <= self.max_day_of_month(year, month):
            raise ValueError(f'Invalid ancient julian date {year}-{month}-{day}')
        leap = self.is_leap_year(year)
        mjd = int(self._starts[year - _FIRST_YEAR]) + day - 1
        for m in range(1, month):
            mjd += int(month_length(m, leap))
        return mjd

    def from_day_count(self, mjd):
        mjd = _index(mjd)
        if mjd >= MJD_AD8:
            return CalendarAlgorithm.JULIAN.from_day_count(mjd)
        if mjd < self._starts[0]:
            raise ValueError("Not valid before BC 45", mjd)
        i = int(np.searchsorted(self._starts, mjd, side="right")) - 1
        year = _FIRST_YEAR + i
        leap = bool(self._leap[i])
        rest = mjd - int(self._starts[i])
        month = 1
        while rest >= month_length(month, leap):
            rest -= int(month_length(month, leap))
            month += 1
        return year, month, rest + 1

    def to_mjd(self, date):
        return self.to_day_count(date.anno_domini, date.month,
                                 date.day_of_month)

    def from_mjd(self, mjd):
        year, month, day = self.from_day_count(mjd)
        era = HistoricEra.christian(year)
        return HistoricDate(era, era.year_of_era(year), month, day)

    def max_day(self, date):
        return self.max_day_of_month(date.anno_domini, date.month)

    def is_valid(self, date):
        if date.anno_domini < _FIRST_YEAR:
            return False
        return date.day_of_month <= self.max_day(date)


AncientJulianLeapYears.SCALIGER = AncientJulianLeapYears(
    42, 39, 36, 33, 30, 27, 24, 21, 18, 15, 12, 9)
