#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 11 11:05:31 2025

@author: Marcel Hesselberth
"""

from enum import Enum
from operator import index as _index
from histcal.calmath import (MJDg, RMJDg, MJDj, RMJDj, month_length,
                             is_julian_leapyear, is_gregorian_leapyear)
from histcal.date import HistoricDate
from histcal.era import HistoricEra

"""
Calendar algorithms.

Each algorithm maps the MJD day count onto astronomical (year, month, day)
labels and back. The proleptic interface works with plain integers:

    to_day_count(year, month, day) -> mjd
    from_day_count(mjd)            -> (year, month, day)
    is_leap_year(year)             -> bool
    max_day_of_month(year, month)  -> int

The date interface is the same for HistoricDate values in any era:

    to_mjd(date), from_mjd(mjd), is_valid(date), max_day(date)

Dates returned by from_mjd are always in the era BC or AD.

Swedish calendar: in 1700 Sweden dropped the leap day in order to reach
the Gregorian calendar gradually. After that the plan was abandoned and in
1712 a february with 30 days brought the country back to the Julian
calendar. During the period the labels are one day ahead of Julian.
"""

_SWEDISH_SPECIAL = (1712, 2, 30)


class CalendarAlgorithm(Enum):
    JULIAN = 0
    GREGORIAN = 1
    SWEDISH = 2

    def is_leap_year(self, year):
        year = _index(year)
        if self is CalendarAlgorithm.GREGORIAN:
            return bool(is_gregorian_leapyear(year))
        if self is CalendarAlgorithm.SWEDISH and year == 1700:
            return False
        return bool(is_julian_leapyear(year))

    def max_day_of_month(self, year, month):
        """
        Length of a month.

        Parameters
        ----------
        year  : int
                Astronomical year
        month : int
                1-12

        Returns
        -------
        int

        """
        month = _index(month)
        if not 1 <= month <= 12:
            raise ValueError('month must be in 1..12', month)
        if self is CalendarAlgorithm.SWEDISH and (year, month) == (1712, 2):
            return 30
        return int(month_length(month, self.is_leap_year(year)))

    def to_day_count(self, year, month, day):
        """
        MJD of a proleptic date of this calendar.

        Raises ValueError for a day that does not exist and OverflowError
        outside the representable range.
        """
        if not 1 <= _index(day) <= self.max_day_of_month(year, month):
            raise ValueError(f'Invalid {self.name.lower()} date '
                             f'{year}-{month}-{day}')
        if self is CalendarAlgorithm.GREGORIAN:
            return MJDg(year, month, day)
        if self is CalendarAlgorithm.SWEDISH:
            if (year, month, day) == _SWEDISH_SPECIAL:
                return MJDj(1712, 2, 29)
            return MJDj(year, month, day) - 1
        return MJDj(year, month, day)

    def from_day_count(self, mjd):
        """Proleptic (year, month, day) of an MJD."""
        if self is CalendarAlgorithm.GREGORIAN:
            return RMJDg(mjd)
        if self is CalendarAlgorithm.SWEDISH:
            if mjd == MJDj(1712, 2, 29):
                return _SWEDISH_SPECIAL
            return RMJDj(mjd + 1)
        return RMJDj(mjd)

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
        return date.day_of_month <= self.max_day(date)
