#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 11 10:22:17 2025

@author: Marcel Hesselberth
"""

from functools import total_ordering
from operator import index as _index
from histcal.constants import MAX_ANNO_DOMINI
from histcal.era import HistoricEra, YearDefinition


def _check_date_fields(era, year_of_era, month, day):
    if not isinstance(era, HistoricEra):
        raise TypeError("era must be a HistoricEra", era)
    year_of_era = _index(year_of_era)
    month = _index(month)
    day = _index(day)
    if not 1 <= month <= 12:
        raise ValueError('month must be in 1..12', month)
    if not 1 <= day <= 31:
        raise ValueError('day must be in 1..31', day)
    if year_of_era < 1:
        # Byzantine year 0 begins with the creation, September 1
        if not (era is HistoricEra.BYZANTINE and year_of_era == 0
                and month >= 9):
            raise ValueError(f'year of era {era.name} must be positive',
                             year_of_era)
    if abs(era.anno_domini(year_of_era)) > MAX_ANNO_DOMINI:
        raise ValueError('year of era out of range', year_of_era)
    return year_of_era, month, day


@total_ordering
class HistoricDate:
    """
    A date of the historic calendar: era, year of era, month and day.

    The year of era is the standard year which starts on January 1. The
    year that was displayed in the documents of the time depends on the
    New Year strategy and is obtained with get_year_of_era(strategy).

    Whether a date exists depends on the ChronoHistory that interprets it,
    HistoricDate itself only checks the field ranges. Two dates are equal
    if all fields are equal. Ordering is chronological, so the same day
    expressed in different eras neither is less nor equal.
    """
    __slots__ = ("_era", "_year", "_month", "_day")

    def __init__(self, era, year_of_era, month, day):
        self._year, self._month, self._day = \
            _check_date_fields(era, year_of_era, month, day)
        self._era = era

    @classmethod
    def of(cls, era, year_of_era, month, day,
           definition=YearDefinition.DUAL_DATING, strategy=None):
        """
        Create a historic date.

        Without a strategy the year of era is the standard year. With a
        strategy it is read as a year counted from the historic New Year
        and resolved according to the year definition.

        Parameters
        ----------
        era         : HistoricEra
        year_of_era : int
        month       : int
                      1-12
        day         : int
                      1-31
        definition  : YearDefinition
                      How the year is to be read. The default is DUAL_DATING.
        strategy    : NewYearStrategy
                      None for the standard year.

        Returns
        -------
        HistoricDate

        """
        if strategy is None:
            return cls(era, year_of_era, month, day)
        _check_date_fields(era, max(year_of_era, 1), month, day)
        ad = era.anno_domini(year_of_era)
        candidates = []
        for standard in (ad - 1, ad, ad + 1):
            cera = HistoricEra.christian(standard) if era.is_christian() \
                else era
            try:
                date = cls(cera, cera.year_of_era(standard), month, day)
            except ValueError:
                continue
            displayed = strategy.displayed_anno_domini(date)
            if definition.resolve(standard, displayed) == ad:
                candidates.append(date)
        if not candidates:
            raise ValueError(f"No {month}-{day} in year {year_of_era} "
                             f"{era.name} ({definition.name})")
        if definition is YearDefinition.BEFORE_NEW_YEAR:
            return candidates[-1]
        if definition is YearDefinition.DUAL_DATING:
            for date in candidates:
                if date.anno_domini == ad:
                    return date
        return candidates[0]

    @property
    def era(self):
        return self._era

    @property
    def year_of_era(self):
        return self._year

    @property
    def month(self):
        return self._month

    @property
    def day_of_month(self):
        return self._day

    @property
    def anno_domini(self):
        """Standard astronomical year."""
        return self._era.anno_domini(self._year)

    def get_year_of_era(self, strategy=None,
                        definition=YearDefinition.DUAL_DATING):
        """
        Year of era as counted from the historic New Year.

        Without a strategy this is the standard year.
        """
        if strategy is None:
            return self._year
        ad = definition.resolve(self.anno_domini,
                                strategy.displayed_anno_domini(self))
        return self._era.year_of_era(ad)

    def with_era(self, era):
        """The same calendar date counted in another era."""
        ad = self.anno_domini
        if era.is_christian():
            era = HistoricEra.christian(ad)
        return HistoricDate(era, era.year_of_era(ad), self._month, self._day)

    def replace(self, year_of_era=None, month=None, day=None):
        if year_of_era is None:
            year_of_era = self._year
        if month is None:
            month = self._month
        if day is None:
            day = self._day
        return HistoricDate(self._era, year_of_era, month, day)

    def key(self):
        """Chronological sort key (astronomical year, month, day)."""
        return self.anno_domini, self._month, self._day

    def __eq__(self, other):
        if isinstance(other, HistoricDate):
            return (self._era, self._year, self._month, self._day) == \
                (other._era, other._year, other._month, other._day)
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, HistoricDate):
            return self.key() < other.key()
        return NotImplemented

    def __hash__(self):
        return hash((self._era, self._year, self._month, self._day))

    def __repr__(self):
        return (f"{self.__class__.__name__}(HistoricEra.{self._era.name}, "
                f"{self._year}, {self._month}, {self._day})")

    def __str__(self):
        return (f"{self._era.name}-{self._year:04d}-{self._month:02d}-"
                f"{self._day:02d}")
