#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 11 09:40:55 2025

@author: Marcel Hesselberth
"""

from enum import Enum
from operator import index as _index
from histcal.calmath import MJDj


class HistoricEra(Enum):
    """
    Eras of the historic calendar.

    Years of all eras are mapped onto the astronomical year numbering
    (anno domini, the year before AD 1 is 0). BC counts backward from
    AD 1, the other eras count forward from their own epoch:

        BC               ad = 1 - year
        AD               ad = year
        BYZANTINE        ad = year - 5508  (creation of the world)
        AB_URBE_CONDITA  ad = year - 753   (founding of Rome)
        HISPANIC         ad = year - 38    (Spanish era)

    The Byzantine year starts on September 1, so Byzantine year 0 exists
    from September 1 on.
    """
    BC = 0
    AD = 1
    BYZANTINE = 2
    AB_URBE_CONDITA = 3
    HISPANIC = 4

    def anno_domini(self, year_of_era):
        """Astronomical year of a year of this era."""
        year_of_era = _index(year_of_era)
        if self is HistoricEra.BC:
            return 1 - year_of_era
        return year_of_era - _offsets[self]

    def year_of_era(self, anno_domini):
        """
        Year of this era of an astronomical year.

        The result may be zero or negative if the year precedes the era.
        """
        anno_domini = _index(anno_domini)
        if self is HistoricEra.BC:
            return 1 - anno_domini
        return anno_domini + _offsets[self]

    def is_christian(self):
        return self in (HistoricEra.BC, HistoricEra.AD)

    @property
    def abbreviation(self):
        return _abbreviations[self]

    @property
    def epoch(self):
        """MJD of the first day of year 1 of the era (Julian calendar)."""
        if self is HistoricEra.BYZANTINE:
            return MJDj(-5508, 9, 1)
        return MJDj(self.anno_domini(1), 1, 1)

    @classmethod
    def christian(cls, anno_domini):
        """AD for years from 1 on, BC for earlier years."""
        return cls.AD if anno_domini >= 1 else cls.BC


_offsets = {HistoricEra.AD: 0, HistoricEra.BYZANTINE: 5508,
            HistoricEra.AB_URBE_CONDITA: 753, HistoricEra.HISPANIC: 38}

_abbreviations = {HistoricEra.BC: "BC", HistoricEra.AD: "AD",
                  HistoricEra.BYZANTINE: "BYZ",
                  HistoricEra.AB_URBE_CONDITA: "AUC",
                  HistoricEra.HISPANIC: "HISP"}


class YearDefinition(Enum):
    """
    Which year a date belongs to when the displayed year (counted from the
    historic New Year) differs from the standard year (counted from
    January 1).

    DUAL_DATING      the displayed year
    AFTER_NEW_YEAR   the later of both years
    BEFORE_NEW_YEAR  the earlier of both years
    """
    DUAL_DATING = 0
    AFTER_NEW_YEAR = 1
    BEFORE_NEW_YEAR = 2

    def resolve(self, standard, displayed):
        """Select between two astronomical years."""
        if self is YearDefinition.AFTER_NEW_YEAR:
            return max(standard, displayed)
        if self is YearDefinition.BEFORE_NEW_YEAR:
            return min(standard, displayed)
        return displayed
