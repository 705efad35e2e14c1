#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 16:37:52 2025

@author: Marcel Hesselberth
"""

import re
from operator import index as _index
from histcal.calmath import MIN_MJD, MAX_MJD, iso_string, parse_iso
from histcal.era import HistoricEra
from histcal.errors import ConfigurationError, VariantParseError

_preference_re = re.compile(r"^\[era->([A-Z_]+),start->([-+]?[\d-]+),"
                            r"end->([-+]?[\d-]+)\]$")


class EraPreference:
    """
    Era in which dates of a period are preferably expressed.

    Russia counted years from the creation of the world until 1700, Spain
    used the Hispanic era until the 14th century. Periods are inclusive
    MJD intervals.
    """
    __slots__ = ("_era", "_start", "_end")

    def __init__(self, era=None, start=MIN_MJD, end=MAX_MJD):
        if era is not None and era not in (HistoricEra.BYZANTINE,
                                           HistoricEra.HISPANIC,
                                           HistoricEra.AB_URBE_CONDITA):
            raise ConfigurationError(f"No era preference for {era.name}")
        start = _index(start)
        end = _index(end)
        if start > end:
            raise ConfigurationError("Era preference ends before it starts")
        self._era = era
        self._start = start
        self._end = end

    @classmethod
    def byzantine_until(cls, end):
        return cls(HistoricEra.BYZANTINE, MIN_MJD, end)

    @classmethod
    def byzantine_between(cls, start, end):
        return cls(HistoricEra.BYZANTINE, start, end)

    @classmethod
    def hispanic_until(cls, end):
        return cls(HistoricEra.HISPANIC, MIN_MJD, end)

    @classmethod
    def hispanic_between(cls, start, end):
        return cls(HistoricEra.HISPANIC, start, end)

    @classmethod
    def ab_urbe_condita_until(cls, end):
        return cls(HistoricEra.AB_URBE_CONDITA, MIN_MJD, end)

    @classmethod
    def ab_urbe_condita_between(cls, start, end):
        return cls(HistoricEra.AB_URBE_CONDITA, start, end)

    @property
    def era(self):
        return self._era

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    def preferred_era(self, date, mjd):
        """Era for a date with the given MJD, BC or AD if not preferred."""
        if self._era is not None and self._start <= mjd <= self._end:
            return self._era
        return HistoricEra.christian(date.anno_domini)

    def __eq__(self, other):
        if isinstance(other, EraPreference):
            return (self._era, self._start, self._end) == \
                (other._era, other._start, other._end)
        return NotImplemented

    def __hash__(self):
        return hash((self._era, self._start, self._end))

    def __repr__(self):
        return f"EraPreference({self})"

    def __str__(self):
        if self._era is None:
            return "[default]"
        return (f"[era->{self._era.name},start->{iso_string(self._start)},"
                f"end->{iso_string(self._end)}]")

    @classmethod
    def parse(cls, text):
        """Inverse of str(). Raises VariantParseError."""
        if text == "[default]":
            return cls.DEFAULT
        match = _preference_re.match(text)
        if match is None or match.group(1) not in HistoricEra.__members__:
            raise VariantParseError("Invalid era preference", text)
        try:
            return cls(HistoricEra[match.group(1)], parse_iso(match.group(2)),
                       parse_iso(match.group(3)))
        except (ValueError, OverflowError) as e:
            raise VariantParseError(str(e), text) from e


EraPreference.DEFAULT = EraPreference()
