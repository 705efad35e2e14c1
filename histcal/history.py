#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Mar 14 11:26:03 2025

@author: Marcel Hesselberth
"""

import logging
from collections import namedtuple
from enum import Enum
from histcal.algorithm import CalendarAlgorithm
from histcal.ancient import AncientJulianLeapYears
from histcal.calmath import (MIN_MJD, MAX_MJD, MJDg, MJDj, RMJDj, check_mjd,
                             iso_string, parse_iso)
from histcal.date import HistoricDate
from histcal.elements import (DateElement, EraElement, YearOfEraElement,
                              CenturyOfEraElement, MonthElement,
                              DayOfMonthElement)
from histcal.era import HistoricEra, YearDefinition
from histcal.errors import HistoryError, VariantParseError
from histcal.newyear import NewYearRule, NewYearStrategy
from histcal.preference import EraPreference

logger = logging.getLogger(__name__)

"""
Chronological history of a region.

A ChronoHistory maps the MJD day count onto historic dates. Up to the
Gregorian cutover the Julian calendar applies, from the cutover on the
Gregorian calendar. The days between the last Julian and the first
Gregorian date did elapse, only their labels never existed: under the
first Gregorian reform October 4, 1582 is followed by October 15, 1582.

Optional parts of a history:

  - ancient julian leap years (the irregular leap years before AD 8),
  - a New Year strategy (begin of the displayed year),
  - an era preference (Byzantine years in Russia, Hispanic era in Spain).

The supported range of non-proleptic histories is BC 45 until AD 9999.
Proleptic histories cover the whole day count.
"""

_MIN_YEAR = -44     # BC 45
_MAX_YEAR = 9999
_BYZANTINE_CREATION = RMJDj(HistoricEra.BYZANTINE.epoch)

CutOverEvent = namedtuple("CutOverEvent", ["start", "algorithm"])


class HistoricVariant(Enum):
    PROLEPTIC_GREGORIAN = 0
    PROLEPTIC_JULIAN = 1
    PROLEPTIC_BYZANTINE = 2
    SWEDEN = 3
    INTRODUCTION_ON_1582_10_15 = 4
    SINGLE_CUTOVER_DATE = 5

    def is_proleptic(self):
        return self in (HistoricVariant.PROLEPTIC_GREGORIAN,
                        HistoricVariant.PROLEPTIC_JULIAN,
                        HistoricVariant.PROLEPTIC_BYZANTINE)


class ChronoHistory:
    """
    Immutable calendar history.

    Instances are obtained from the factories and the named constants
    PROLEPTIC_GREGORIAN, PROLEPTIC_JULIAN and PROLEPTIC_BYZANTINE, and
    modified with the with_... methods, which return new instances.
    """
    __slots__ = ("_variant", "_events", "_labels", "_ajly", "_nys", "_eras")

    def __init__(self, variant, events, ajly=None, nys=None, eras=None):
        if not events or events[0].start != MIN_MJD:
            raise HistoryError("Missing initial calendar algorithm.")
        self._variant = variant
        self._events = tuple(events)
        self._ajly = ajly
        self._nys = NewYearStrategy.DEFAULT if nys is None else nys
        self._eras = EraPreference.DEFAULT if eras is None else eras
        # labels of the first day with and the last day before each cutover
        labels = [None]
        for previous, event in zip(self._events, self._events[1:]):
            at = self._calculus(event.algorithm).from_mjd(event.start)
            before = self._calculus(previous.algorithm).from_mjd(
                event.start - 1)
            labels.append((at.key(), before.key()))
        self._labels = tuple(labels)

    # factories

    @staticmethod
    def of_first_gregorian_reform():
        """Julian until 1582-10-04, Gregorian from 1582-10-15."""
        return _FIRST_GREGORIAN_REFORM

    @staticmethod
    def of_gregorian_reform(start):
        """
        History with a single Gregorian cutover.

        Parameters
        ----------
        start : int
                MJD of the first Gregorian day. MIN_MJD yields the
                PROLEPTIC_GREGORIAN instance and MAX_MJD PROLEPTIC_JULIAN.

        Returns
        -------
        ChronoHistory

        """
        start = check_mjd(start)
        if start == MIN_MJD:
            return ChronoHistory.PROLEPTIC_GREGORIAN
        if start == MAX_MJD:
            return ChronoHistory.PROLEPTIC_JULIAN
        if start < _FIRST_CUTOVER:
            raise ValueError("Gregorian calendar did not exist before "
                             "1582-10-15", iso_string(start))
        if start == _FIRST_CUTOVER:
            return _FIRST_GREGORIAN_REFORM
        return ChronoHistory(HistoricVariant.SINGLE_CUTOVER_DATE,
                             [CutOverEvent(MIN_MJD, CalendarAlgorithm.JULIAN),
                              CutOverEvent(start, CalendarAlgorithm.GREGORIAN)])

    @staticmethod
    def of_sweden():
        """
        Sweden: Julian until 1700-02-28, Swedish calendar until 1712-02-30,
        Julian again until 1753-02-17, Gregorian from 1753-03-01.
        """
        return _SWEDEN

    @staticmethod
    def of_locale(locale):
        """
        History of a region, for example "en_GB", "ru-RU" or "it-IT-PISA".

        Unknown regions fall back to the configured default, see regions.ini.
        """
        from histcal.regions import history_of
        return history_of(locale)

    # components

    @property
    def variant(self):
        return self._variant

    @property
    def ancient_julian_leap_years(self):
        """The ancient leap years or None."""
        return self._ajly

    @property
    def new_year_strategy(self):
        return self._nys

    @property
    def era_preference(self):
        return self._eras

    @property
    def events(self):
        return self._events

    def has_gregorian_cutover_date(self):
        return not self._variant.is_proleptic()

    def get_gregorian_cutover_date(self):
        """MJD of the first Gregorian day."""
        if self._variant.is_proleptic():
            raise HistoryError(f"{self._variant.name} has no cutover date.")
        return self._events[-1].start

    def with_ancient_julian_leap_years(self, ajly):
        """Copy with the ancient leap years replaced."""
        if not isinstance(ajly, AncientJulianLeapYears):
            raise TypeError("expected AncientJulianLeapYears", ajly)
        if self._variant.is_proleptic():
            raise HistoryError("Ancient julian leap years require a "
                               "history with cutover.")
        if ajly == self._ajly:
            return self
        return ChronoHistory(self._variant, self._events, ajly, self._nys,
                             self._eras)

    def with_new_year_strategy(self, nys):
        """
        Copy with another New Year strategy.

        PROLEPTIC_BYZANTINE is defined by its September New Year and is
        returned unchanged.
        """
        if not isinstance(nys, NewYearStrategy):
            raise TypeError("expected NewYearStrategy", nys)
        if self._variant is HistoricVariant.PROLEPTIC_BYZANTINE \
                or nys == self._nys:
            return self
        return ChronoHistory(self._variant, self._events, self._ajly, nys,
                             self._eras)

    def with_era_preference(self, eras):
        """Copy with another era preference, see with_new_year_strategy."""
        if not isinstance(eras, EraPreference):
            raise TypeError("expected EraPreference", eras)
        if self._variant is HistoricVariant.PROLEPTIC_BYZANTINE \
                or eras == self._eras:
            return self
        return ChronoHistory(self._variant, self._events, self._ajly,
                             self._nys, eras)

    # conversion

    def _calculus(self, algorithm):
        if algorithm is CalendarAlgorithm.JULIAN and self._ajly is not None:
            return self._ajly.calculus
        return algorithm

    def _algorithm(self, date):
        # None for labels that fall into a cutover gap
        key = date.key()
        for event, labels in zip(reversed(self._events),
                                 reversed(self._labels)):
            if labels is None or key >= labels[0]:
                return event.algorithm
            if key > labels[1]:
                return None
        raise AssertionError("unreachable")

    def _event(self, mjd):
        for event in reversed(self._events):
            if mjd >= event.start:
                return event
        raise AssertionError("unreachable")

    def _out_of_range(self, date):
        if self._variant is HistoricVariant.PROLEPTIC_BYZANTINE:
            return date.key() < _BYZANTINE_CREATION
        if self._variant.is_proleptic():
            return False
        return not _MIN_YEAR <= date.anno_domini <= _MAX_YEAR

    def _preferred(self, date, mjd):
        era = self._eras.preferred_era(date, mjd)
        if era is date.era:
            return date
        try:
            return date.with_era(era)
        except ValueError:
            return date

    def to_mjd(self, date):
        """
        MJD of a historic date.

        Raises ValueError if the date does not exist in this history, for
        example October 10, 1582 under the first Gregorian reform.
        """
        if not isinstance(date, HistoricDate):
            raise TypeError("expected HistoricDate", date)
        if self._out_of_range(date):
            raise ValueError(f"Out of supported range: {date}")
        algorithm = self._algorithm(date)
        if algorithm is None:
            raise ValueError(f"Historic date in cutover gap: {date}")
        calculus = self._calculus(algorithm)
        if not calculus.is_valid(date):
            raise ValueError(f"Invalid historic date: {date}")
        return calculus.to_mjd(date)

    def from_mjd(self, mjd):
        """
        Historic date of an MJD, in the preferred era.

        Raises OverflowError outside the day count and ValueError outside
        the range of this history.
        """
        mjd = check_mjd(mjd)
        date = self._calculus(self._event(mjd).algorithm).from_mjd(mjd)
        if self._out_of_range(date):
            raise ValueError(f"Out of supported range: {date}")
        return self._preferred(date, mjd)

    def convert(self, value):
        """MJD -> HistoricDate or HistoricDate -> MJD."""
        if isinstance(value, HistoricDate):
            return self.to_mjd(value)
        # any integer type (numpy included), but not bool
        if isinstance(value, bool) or not hasattr(value, "__index__"):
            raise TypeError("expected MJD or HistoricDate", value)
        return self.from_mjd(value)

    def is_valid(self, date):
        """True if the historic date exists in this history."""
        if date is None:
            return False
        try:
            self.to_mjd(date)
        except (ValueError, OverflowError):
            return False
        return True

    def get_maximum_day_of_month(self, date):
        """Last valid day of the month of a historic date."""
        for day in range(31, 0, -1):
            if self.is_valid(date.replace(day=day)):
                return day
        raise ValueError(f"No valid day in month of {date}")

    def get_begin_of_year(self, era, year_of_era):
        """
        First day of a displayed year according to the New Year strategy,
        in the preferred era.
        """
        date = self._nys.new_year(era, year_of_era)
        return self._preferred(date, self.to_mjd(date))

    def get_length_of_year(self, era, year_of_era):
        """
        Number of days of a displayed year, -1 if it cannot be computed.

        Reform years are shorter and years that change the New Year rule
        can be much longer or shorter than usual.
        """
        try:
            begin = self.to_mjd(self._nys.new_year(era, year_of_era))
            if self._nys.carries_over(era, year_of_era):
                end = self._nys.default.new_year(era, year_of_era)
            else:
                ad = era.anno_domini(year_of_era) + 1
                if era.is_christian():
                    era = HistoricEra.christian(ad)
                end = self._nys.new_year(era, era.year_of_era(ad))
            return self.to_mjd(end) - begin
        except (ValueError, OverflowError):
            return -1

    # elements

    def date(self):
        return DateElement(self)

    def era(self):
        return EraElement(self)

    def year_of_era(self, definition=YearDefinition.DUAL_DATING):
        return YearOfEraElement(self, definition)

    def century_of_era(self):
        return CenturyOfEraElement(self)

    def month(self):
        return MonthElement(self)

    def day_of_month(self):
        return DayOfMonthElement(self)

    # variant strings

    def get_variant(self):
        """
        Text form of this history, for example

            historic-SINGLE_CUTOVER_DATE:cutover=1752-09-14:
            ancient-julian-leap-years=[]:new-year-strategy=[...|...]:
            era-preference=[default]

        (on one line). ChronoHistory.from_variant reads it back.
        """
        cutover = "none"
        if self.has_gregorian_cutover_date():
            cutover = iso_string(self.get_gregorian_cutover_date())
        leaps = ""
        if self._ajly is not None:
            leaps = ",".join(str(year) for year in self._ajly.pattern)
        return (f"historic-{self._variant.name}:cutover={cutover}"
                f":ancient-julian-leap-years=[{leaps}]"
                f":new-year-strategy={self._nys}"
                f":era-preference={self._eras}")

    @staticmethod
    def from_variant(text):
        """
        History of a variant string made by get_variant.

        Named instances are returned as such. Raises VariantParseError with
        the offending fragment.
        """
        logger.debug("Parsing history variant %s", text)
        fragments = text.split(":")
        if len(fragments) != 5:
            raise VariantParseError("Invalid history variant", text)
        kind, cutover, leaps, nys, eras = fragments
        name = _strip(kind, "historic-")
        if name not in HistoricVariant.__members__:
            raise VariantParseError("Unknown history variant", kind)
        variant = HistoricVariant[name]
        history = _base_history(variant, _strip(cutover, "cutover="))
        leaps = _strip(leaps, "ancient-julian-leap-years=")
        if not (leaps.startswith("[") and leaps.endswith("]")):
            raise VariantParseError("Invalid ancient julian leap years", leaps)
        if leaps != "[]":
            try:
                years = [int(year) for year in leaps[1:-1].split(",")]
                history = history.with_ancient_julian_leap_years(
                    AncientJulianLeapYears.of(*years))
            except ValueError as e:
                raise VariantParseError(str(e), leaps) from e
        history = history.with_new_year_strategy(
            NewYearStrategy.parse(_strip(nys, "new-year-strategy=")))
        history = history.with_era_preference(
            EraPreference.parse(_strip(eras, "era-preference=")))
        if history.get_variant() != text:
            raise VariantParseError("Inconsistent history variant", text)
        return history

    def __eq__(self, other):
        if isinstance(other, ChronoHistory):
            return (self._variant, self._events, self._ajly, self._nys,
                    self._eras) == (other._variant, other._events,
                                    other._ajly, other._nys, other._eras)
        return NotImplemented

    def __hash__(self):
        return hash((self._variant, self._events, self._ajly, self._nys,
                     self._eras))

    def __repr__(self):
        return f"ChronoHistory({self.get_variant()!r})"

    def __str__(self):
        return self.get_variant()


def _strip(fragment, prefix):
    if not fragment.startswith(prefix):
        raise VariantParseError(f"Expected {prefix}", fragment)
    return fragment[len(prefix):]


def _base_history(variant, cutover):
    if variant.is_proleptic():
        if cutover != "none":
            raise VariantParseError("Proleptic history with cutover", cutover)
        return getattr(ChronoHistory, variant.name)
    try:
        start = parse_iso(cutover)
    except (ValueError, OverflowError) as e:
        raise VariantParseError("Invalid cutover date", cutover) from e
    if variant is HistoricVariant.SWEDEN:
        history = _SWEDEN
    else:
        try:
            history = ChronoHistory.of_gregorian_reform(start)
        except ValueError as e:
            raise VariantParseError(str(e), cutover) from e
    if history.variant is not variant \
            or history.get_gregorian_cutover_date() != start:
        raise VariantParseError("Cutover does not match variant", cutover)
    return history


_FIRST_CUTOVER = MJDg(1582, 10, 15)

ChronoHistory.PROLEPTIC_GREGORIAN = ChronoHistory(
    HistoricVariant.PROLEPTIC_GREGORIAN,
    [CutOverEvent(MIN_MJD, CalendarAlgorithm.GREGORIAN)])

ChronoHistory.PROLEPTIC_JULIAN = ChronoHistory(
    HistoricVariant.PROLEPTIC_JULIAN,
    [CutOverEvent(MIN_MJD, CalendarAlgorithm.JULIAN)])

ChronoHistory.PROLEPTIC_BYZANTINE = ChronoHistory(
    HistoricVariant.PROLEPTIC_BYZANTINE,
    [CutOverEvent(MIN_MJD, CalendarAlgorithm.JULIAN)],
    nys=NewYearStrategy((), NewYearRule.BEGIN_OF_SEPTEMBER),
    eras=EraPreference.byzantine_until(MAX_MJD))

_FIRST_GREGORIAN_REFORM = ChronoHistory(
    HistoricVariant.INTRODUCTION_ON_1582_10_15,
    [CutOverEvent(MIN_MJD, CalendarAlgorithm.JULIAN),
     CutOverEvent(_FIRST_CUTOVER, CalendarAlgorithm.GREGORIAN)])

_SWEDEN = ChronoHistory(
    HistoricVariant.SWEDEN,
    [CutOverEvent(MIN_MJD, CalendarAlgorithm.JULIAN),
     CutOverEvent(MJDj(1700, 3, 1) - 1, CalendarAlgorithm.SWEDISH),
     CutOverEvent(MJDj(1712, 3, 1), CalendarAlgorithm.JULIAN),
     CutOverEvent(MJDg(1753, 3, 1), CalendarAlgorithm.GREGORIAN)])
