#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 15:54:20 2025

@author: Marcel Hesselberth
"""

from operator import index as _index
from histcal.date import HistoricDate
from histcal.era import HistoricEra, YearDefinition

"""
Elements of a historic date.

An element is a view of one field of the historic date of an MJD under a
given history. It can read the field, check a new value and produce the
MJD of the date with the field replaced. Elements do no date arithmetic
of their own, every check goes through the history.

    >>> year = history.year_of_era(YearDefinition.AFTER_NEW_YEAR)
    >>> mjd = year.with_value(mjd, 1564)
"""


class HistoricElement:
    name = None

    def __init__(self, history):
        self._history = history

    @property
    def history(self):
        return self._history

    def get(self, mjd):
        return self._value(self._history.from_mjd(mjd))

    def with_value(self, mjd, value):
        """MJD of the date with this field set to value."""
        date = self._replace(self._history.from_mjd(mjd), value)
        return self._history.to_mjd(date)

    def is_valid(self, mjd, value):
        try:
            self.with_value(mjd, value)
        except (ValueError, OverflowError, TypeError):
            return False
        return True

    def _key(self):
        return (self.__class__, self._history)

    def __eq__(self, other):
        if isinstance(other, HistoricElement):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name})"

    def _value(self, date):
        raise NotImplementedError

    def _replace(self, date, value):
        raise NotImplementedError

    def _adjusted(self, date):
        # keeps the day within the month, e.g. February 29 -> 28
        last = self._history.get_maximum_day_of_month(date)
        return date.replace(day=min(date.day_of_month, last))


class DateElement(HistoricElement):
    name = "HISTORIC_DATE"

    def _value(self, date):
        return date

    def _replace(self, date, value):
        if not isinstance(value, HistoricDate):
            raise TypeError("expected HistoricDate", value)
        return value


class EraElement(HistoricElement):
    """
    The era. Setting the era only changes how the same day is counted,
    BC cannot be set on a date after Christ.
    """
    name = "ERA"

    def _value(self, date):
        return date.era

    def _replace(self, date, value):
        if not isinstance(value, HistoricEra):
            raise TypeError("expected HistoricEra", value)
        if value is date.era:
            return date
        ad = date.anno_domini
        if value.is_christian() and HistoricEra.christian(ad) is not value:
            raise ValueError(f"Era change not possible: {date} -> "
                             f"{value.name}")
        return HistoricDate(value, value.year_of_era(ad), date.month,
                            date.day_of_month)


class YearOfEraElement(HistoricElement):
    """
    The year of era, counted from the historic New Year of the history
    and read according to a YearDefinition.
    """
    name = "YEAR_OF_ERA"

    def __init__(self, history, definition=YearDefinition.DUAL_DATING):
        super().__init__(history)
        self._definition = definition

    @property
    def definition(self):
        return self._definition

    def _key(self):
        return super()._key() + (self._definition,)

    def _value(self, date):
        return date.get_year_of_era(self._history.new_year_strategy,
                                    self._definition)

    def _replace(self, date, value):
        return self._adjusted(HistoricDate.of(
            date.era, _index(value), date.month, date.day_of_month,
            self._definition, self._history.new_year_strategy))


class CenturyOfEraElement(HistoricElement):
    """Century of the standard year, 1 for the years 1-100."""
    name = "CENTURY_OF_ERA"

    def _value(self, date):
        return (date.year_of_era - 1) // 100 + 1

    def _replace(self, date, value):
        value = _index(value)
        if value < 1:
            raise ValueError("century must be positive", value)
        year = (value - 1) * 100 + (date.year_of_era - 1) % 100 + 1
        return self._adjusted(date.replace(year_of_era=year))


class MonthElement(HistoricElement):
    name = "MONTH_OF_YEAR"

    def _value(self, date):
        return date.month

    def _replace(self, date, value):
        value = _index(value)
        if not 1 <= value <= 12:
            raise ValueError('month must be in 1..12', value)
        return self._adjusted(date.replace(month=value))


class DayOfMonthElement(HistoricElement):
    name = "DAY_OF_MONTH"

    def _value(self, date):
        return date.day_of_month

    def _replace(self, date, value):
        return date.replace(day=value)
