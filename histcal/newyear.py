#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 10:02:36 2025

@author: Marcel Hesselberth
"""

import re
from enum import Enum
from operator import index as _index
from histcal.computus import march_day
from histcal.constants import COUNCIL_OF_TOURS
from histcal.date import HistoricDate
from histcal.era import HistoricEra
from histcal.errors import ConfigurationError, VariantParseError

"""
New Year rules.

Before the 18th century the year did not necessarily begin on January 1.
A rule either starts the year within the standard year of the same number
(March 25 of 1155 begins the year 1155 in England) or in the standard year
before it (Christmas 1065 begins the year 1066). The Easter rules move
with the Julian Easter date.

A NewYearStrategy is a chain of rules, each valid until (exclusive) a
given astronomical year, followed by a default rule.
"""


# (years back, month, day); month None: days relative to Easter Sunday
_anchors = {}


class NewYearRule(Enum):
    BEGIN_OF_JANUARY = 0
    BEGIN_OF_MARCH = 1
    BEGIN_OF_SEPTEMBER = 2
    CHRISTMAS_STYLE = 3
    EASTER_STYLE = 4
    GOOD_FRIDAY = 5
    MARIA_ANUNCIATA = 6
    CALCULUS_PISANUS = 7
    EPIPHANY = 8

    @property
    def previous_year_anchored(self):
        """True if the year begins in the standard year before it."""
        return _anchors[self][0] == 1

    def new_year(self, era, year_of_era):
        """
        First day of a year under this rule.

        Parameters
        ----------
        era         : HistoricEra
        year_of_era : int
                      The year as displayed (counted from its New Year).

        Returns
        -------
        HistoricDate
            In the given era, or in BC/AD for the christian eras.
        """
        ad = era.anno_domini(year_of_era)
        back, month, day = _anchors[self]
        if month is None:
            md = march_day(ad) + day
            month, day = (3, md) if md <= 31 else (4, md - 31)
        return _historic(era, ad - back, month, day)

    def until(self, anno_domini):
        """
        Strategy with this rule valid until (exclusive) the given year.

        Raises ConfigurationError for years up to the Council of Tours (567),
        before which the year started on January 1. A rule other than
        BEGIN_OF_JANUARY is preceded by January 1 until 567.
        """
        anno_domini = _index(anno_domini)
        if anno_domini <= COUNCIL_OF_TOURS:
            raise ConfigurationError(
                f"Council of Tours (567) is the earliest end year: "
                f"{self.name}->{anno_domini}")
        if self is NewYearRule.BEGIN_OF_JANUARY:
            return NewYearStrategy(((self, anno_domini),))
        return NewYearStrategy(((NewYearRule.BEGIN_OF_JANUARY,
                                 COUNCIL_OF_TOURS), (self, anno_domini)))

    def displayed_anno_domini(self, strategy, date):
        """Astronomical year of a date counted from the New Year."""
        ad = date.anno_domini
        if self.previous_year_anchored:
            era = date.era
            if era.is_christian():
                era = HistoricEra.christian(ad + 1)
            start = strategy.new_year(era, era.year_of_era(ad + 1))
            return ad + 1 if date.key() >= start.key() else ad
        start = self.new_year(HistoricEra.christian(ad),
                              HistoricEra.christian(ad).year_of_era(ad))
        return ad if date.key() >= start.key() else ad - 1


_anchors.update({
    NewYearRule.BEGIN_OF_JANUARY: (0, 1, 1),
    NewYearRule.BEGIN_OF_MARCH: (0, 3, 1),
    NewYearRule.BEGIN_OF_SEPTEMBER: (1, 9, 1),
    NewYearRule.CHRISTMAS_STYLE: (1, 12, 25),
    NewYearRule.EASTER_STYLE: (0, None, -1),     # Holy Saturday
    NewYearRule.GOOD_FRIDAY: (0, None, -2),
    NewYearRule.MARIA_ANUNCIATA: (0, 3, 25),
    NewYearRule.CALCULUS_PISANUS: (1, 3, 25),
    NewYearRule.EPIPHANY: (0, 1, 6),
})


def _historic(era, ad, month, day):
    if era.is_christian():
        era = HistoricEra.christian(ad)
    return HistoricDate(era, era.year_of_era(ad), month, day)


_segment_re = re.compile(r"^([A-Z_]+)->(-?\d+)$")


class NewYearStrategy:
    """
    Chain of New Year rules.

    Segments (rule, end) are sorted by their exclusive end year, the
    default rule applies from the last end year on. Chains are built with
    NewYearRule.until and combined with and_:

        CHRISTMAS_STYLE.until(1087).and_(BEGIN_OF_JANUARY.until(1155))

    """
    __slots__ = ("_segments", "_default")

    def __init__(self, segments=(), default=None):
        if default is None:
            default = NewYearRule.BEGIN_OF_JANUARY
        if not isinstance(default, NewYearRule):
            raise TypeError("default must be a NewYearRule", default)
        ordered = []
        for rule, end in sorted(segments, key=lambda s: s[1]):
            if not isinstance(rule, NewYearRule):
                raise TypeError("rule must be a NewYearRule", rule)
            if ordered and ordered[-1][1] == end:
                if ordered[-1][0] is rule:
                    continue
                raise ConfigurationError(
                    f"Conflicting New Year rules for {end}: "
                    f"{ordered[-1][0].name}, {rule.name}")
            ordered.append((rule, _index(end)))
        self._segments = tuple(ordered)
        self._default = default

    @property
    def segments(self):
        return self._segments

    @property
    def default(self):
        return self._default

    def and_(self, other):
        """Merge two strategies. The default rules must agree."""
        if not isinstance(other, NewYearStrategy):
            raise TypeError("expected a NewYearStrategy", other)
        if other._default is not self._default:
            raise ConfigurationError("Strategies with different default rules.")
        return NewYearStrategy(self._segments + other._segments, self._default)

    def rule(self, era, year_of_era):
        """The rule that determines the begin of a displayed year."""
        ad = era.anno_domini(year_of_era)
        for rule, end in self._segments:
            if ad < end:
                return rule
        if self._carries_over(era, ad):
            return NewYearRule.BEGIN_OF_SEPTEMBER
        return self._default

    def carries_over(self, era, year_of_era):
        """
        True for the Byzantine year that started under the September rule
        but ended with the switch to the default rule.

        In Russia the Byzantine year 7208 began on September 1, 1699 and
        was the last Byzantine year, 1700 started on January 1.
        """
        return self._carries_over(era, era.anno_domini(year_of_era))

    def _carries_over(self, era, ad):
        return (era is HistoricEra.BYZANTINE and bool(self._segments)
                and ad == self._segments[-1][1]
                and self._segments[-1][0] is NewYearRule.BEGIN_OF_SEPTEMBER)

    def new_year(self, era, year_of_era):
        """First day of a displayed year, see NewYearRule.new_year."""
        return self.rule(era, year_of_era).new_year(era, year_of_era)

    def displayed_anno_domini(self, date):
        """Astronomical year of a date counted from its New Year."""
        ad = date.anno_domini
        era = date.era
        return self.rule(era, era.year_of_era(ad)).displayed_anno_domini(
            self, date)

    def __eq__(self, other):
        if isinstance(other, NewYearStrategy):
            return (self._segments, self._default) == \
                (other._segments, other._default)
        return NotImplemented

    def __hash__(self):
        return hash((self._segments, self._default))

    def __repr__(self):
        return f"NewYearStrategy({self})"

    def __str__(self):
        segments = ",".join(f"{rule.name}->{end}"
                            for rule, end in self._segments)
        return f"[{segments}|{self._default.name}]"

    @classmethod
    def parse(cls, text):
        """
        Read the string form [RULE->YEAR,...|DEFAULT].

        Raises VariantParseError with the offending fragment.
        """
        if not (text.startswith("[") and text.endswith("]")) \
                or text.count("|") != 1:
            raise VariantParseError("Invalid New Year strategy", text)
        body, default = text[1:-1].split("|")
        segments = []
        for fragment in filter(None, body.split(",")):
            match = _segment_re.match(fragment.strip())
            if match is None or match.group(1) not in NewYearRule.__members__:
                raise VariantParseError("Invalid New Year segment", fragment)
            segments.append((NewYearRule[match.group(1)],
                             int(match.group(2))))
        if default not in NewYearRule.__members__:
            raise VariantParseError("Invalid default New Year rule", default)
        try:
            return cls(segments, NewYearRule[default])
        except ConfigurationError as e:
            raise VariantParseError(str(e), text) from e


NewYearStrategy.DEFAULT = NewYearStrategy()
