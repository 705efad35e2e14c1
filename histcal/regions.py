#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 12:08:47 2025

@author: Marcel Hesselberth
"""

import os
import re
import logging
from configparser import ConfigParser
from functools import lru_cache
from histcal.ancient import AncientJulianLeapYears
from histcal.calmath import parse_iso
from histcal.era import HistoricEra
from histcal.errors import ConfigurationError, UnsupportedLocaleError
from histcal.history import ChronoHistory
from histcal.newyear import NewYearRule
from histcal.preference import EraPreference

logger = logging.getLogger(__name__)

path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"
config = ConfigParser()
config.read(config_filename)

settings = config["Settings"]

_fallbacks = {
    "proleptic-gregorian": lambda: ChronoHistory.PROLEPTIC_GREGORIAN,
    "proleptic-julian": lambda: ChronoHistory.PROLEPTIC_JULIAN,
    "first-gregorian-reform": ChronoHistory.of_first_gregorian_reform,
}

_until_re = re.compile(r"^([A-Z_]+)\s+until\s+(\S+)$")
_between_re = re.compile(r"^([A-Z_]+)\s+between\s+(\S+)\s+and\s+(\S+)$")


def region_key(locale):
    """
    Region of a locale string, None if it names a language only.

        "en_GB" -> "GB", "it-IT-PISA" -> "IT-PISA", "GB" -> "GB", "fr" -> None
        "EN_GB" -> "GB", "sr_Latn_RS" -> "RS"

    A leading 2-3 letter token is the language if it is lower case or if
    a region or script follows it. A 4 letter title case token after the
    language is the script.
    """
    locale = re.split(r"[.@]", locale.strip())[0]    # en_GB.UTF-8
    tokens = [t for t in re.split(r"[-_]", locale) if t]
    if tokens and tokens[0].isalpha() and 2 <= len(tokens[0]) <= 3:
        if tokens[0].islower() or (len(tokens) > 1
                                   and (_is_region(tokens[1])
                                        or _is_script(tokens[1]))):
            tokens = tokens[1:]     # language
    if tokens and _is_script(tokens[0]):
        tokens = tokens[1:]
    if not tokens:
        return None
    return "-".join(tokens).upper()


def _is_region(token):
    # ISO 3166 alpha-2 or UN M.49
    return (len(token) == 2 and token.isalpha()) or \
        (len(token) == 3 and token.isdigit())


def _is_script(token):
    # ISO 15924, e.g. Latn
    return len(token) == 4 and token.isalpha() and token.istitle()


def _strategy(value):
    strategy = None
    for fragment in value.split(","):
        rule, _, end = fragment.strip().partition("->")
        if rule not in NewYearRule.__members__ or not end.strip().isdigit():
            raise ConfigurationError(f"Invalid New Year segment {fragment!r}")
        segment = NewYearRule[rule].until(int(end))
        strategy = segment if strategy is None else strategy.and_(segment)
    return strategy


def _preference(value):
    value = " ".join(value.split())
    match = _until_re.match(value)
    if match is not None and match.group(1) in HistoricEra.__members__:
        return EraPreference(HistoricEra[match.group(1)],
                             end=parse_iso(match.group(2)))
    match = _between_re.match(value)
    if match is not None and match.group(1) in HistoricEra.__members__:
        return EraPreference(HistoricEra[match.group(1)],
                             parse_iso(match.group(2)),
                             parse_iso(match.group(3)))
    raise ConfigurationError(f"Invalid era preference {value!r}")


def build_history(section):
    """ChronoHistory of a section of regions.ini."""
    kind = section.get("kind", "cutover")
    try:
        if kind == "sweden":
            history = ChronoHistory.of_sweden()
        elif kind == "first-gregorian-reform":
            history = ChronoHistory.of_first_gregorian_reform()
        elif kind == "cutover":
            history = ChronoHistory.of_gregorian_reform(
                parse_iso(section["cutover"]))
        else:
            raise ConfigurationError(f"Unknown kind {kind!r}")
        if "ancient-julian-leap-years" in section:
            years = [int(y) for y in
                     section["ancient-julian-leap-years"].split(",")]
            history = history.with_ancient_julian_leap_years(
                AncientJulianLeapYears.of(*years))
        if "new-year-strategy" in section:
            history = history.with_new_year_strategy(
                _strategy(section["new-year-strategy"]))
        if "era-preference" in section:
            history = history.with_era_preference(
                _preference(section["era-preference"]))
    except (KeyError, ValueError, OverflowError) as e:
        raise ConfigurationError(
            f"Invalid region [{section.name}] in {config_filename}: {e}") from e
    return history


def regions():
    """Region keys of the table."""
    return tuple(name for name in config.sections() if name != "Settings")


def fallback_history():
    name = settings.get("fallback", "proleptic-gregorian")
    if name not in _fallbacks:
        raise ConfigurationError(f"Unknown fallback history {name!r}")
    return _fallbacks[name]()


@lru_cache(maxsize=None)
def history_of(locale):
    """
    Calendar history of a locale.

    A locale without region gets the first Gregorian reform. A region with
    an unknown variant gets the history of its country. Unknown regions
    get the fallback history of the settings, or raise
    UnsupportedLocaleError in strict mode.
    """
    key = region_key(locale)
    if key is None:
        return ChronoHistory.of_first_gregorian_reform()
    for name in (key, key.split("-")[0]):
        if name in regions():
            return build_history(config[name])
    if settings.getboolean("strict", fallback=False):
        raise UnsupportedLocaleError(f"No calendar history for {locale!r}")
    history = fallback_history()
    logger.warning("No calendar history for %s, using %s", locale,
                   history.variant.name)
    return history
