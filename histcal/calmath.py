#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 19:31:08 2025

@author: Marcel Hesselberth
"""

from operator import index as _index
from histcal.cnumba import cnjit
from histcal.constants import JD0, GD0, MJD0, MINYEAR, MAXYEAR

"""
Integer calendar math on the Modified Julian Day (MJD) timeline.

The ordinal day numbers of both calendars count from their own 0-12-31
(ordinal 1 is 1-1-1). Years are astronomical: the year before +1 is 0.
All kernels work on 64 bit integers and are exact for every year that
can be represented by the day count, roughly a billion years each side.

Naming follows the julian day functions: MJDg/RMJDg convert gregorian
dates, MJDj/RMJDj julian dates.
"""


@cnjit(signature_or_function='boolean(i8)')
def is_julian_leapyear(year):
    return year % 4 == 0


@cnjit(signature_or_function='boolean(i8)')
def is_gregorian_leapyear(year):
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@cnjit(signature_or_function='i8(i8, boolean)')
def month_length(month, leap):
    """
    Number of days in a month.

    Parameters
    ----------
    month : int
            Month (1-12)
    leap  : bool
            True if february has 29 days

    Returns
    -------
    int
        28, 29, 30 or 31.

    """
    if month == 2:
        return 29 if leap else 28
    return 31 - ((month - 1) % 7) % 2


@cnjit(signature_or_function='i8(i8, i8, i8)')
def GD(year, month, day):
    """
    Given a Gregorian date, compute the ordinal day number.
    Handles positive and negative years.
    Day 0 is at 0-12-31.

    Parameters
    ----------
    year  : int
    month : int
    day   : int

    Returns
    -------
    int
        The ordinal day number of the Gregorian date.
    """
    y = year - 1
    ord = 365 * y + y // 4 - y // 100 + y // 400
    ord += (367 * month - 362) // 12
    if month > 2:
        if is_gregorian_leapyear(year):
            ord -= 1
        else:
            ord -= 2
    return ord + day


@cnjit(signature_or_function='UniTuple(i8, 3)(i8)')
def RGD(n):
    """
    Given an ordinal day number, compute the Gregorian date.

    RGD(GD(y, m, d)) is an invariant.

    Parameters
    ----------
    n : int
        Ordinal day number.

    Returns
    -------
    (year, month, day)
    """
    d = n - 1
    n400 = d // 146097
    d1 = d % 146097
    n100 = d1 // 36524
    d2 = d1 % 36524
    n4 = d2 // 1461
    d3 = d2 % 1461
    n1 = d3 // 365
    y = 400 * n400 + 100 * n100 + 4 * n4 + n1
    if n1 == 4 or n100 == 4:
        return y, 12, 31
    y += 1
    p = d3 % 365
    if is_gregorian_leapyear(y):
        c = 0 if p < 60 else 1
    else:
        c = 0 if p < 59 else 2
    m = (12 * (p + c) + 373) // 367
    return y, m, n - GD(y, m, 0)


@cnjit(signature_or_function='i8(i8, i8, i8)')
def JJD(year, month, day):
    """
    Given a Julian date, compute the ordinal day number.
    Handles negative years. Day 0 is at 0-12-31.
    """
    y = year - 1
    ord = 365 * y + y // 4
    ord += (367 * month - 362) // 12
    if month > 2:
        if is_julian_leapyear(year):
            ord -= 1
        else:
            ord -= 2
    return ord + day


@cnjit(signature_or_function='UniTuple(i8, 3)(i8)')
def RJJD(n):
    """
    Given an ordinal day number, compute the Julian date.

    RJJD(JJD(y, m, d)) is an invariant.
    """
    d = n - 1
    year = (4 * d + 1464) // 1461
    p = d - JJD(year, 1, 0)
    if is_julian_leapyear(year):
        c = 0 if p < 60 else 1
    else:
        c = 0 if p < 59 else 2
    m = (12 * (p + c) + 373) // 367
    return year, m, n - JJD(year, m, 0)


GDALIGN = GD0 - MJD0   # MJD = ordinal + GDALIGN
JDALIGN = JD0 - MJD0

MIN_MJD = int(GD(MINYEAR, 1, 1)) + GDALIGN
MAX_MJD = int(GD(MAXYEAR, 12, 31)) + GDALIGN


def check_mjd(mjd):
    mjd = _index(mjd)
    if not MIN_MJD <= mjd <= MAX_MJD:
        raise OverflowError(f"MJD out of range [{MIN_MJD}, {MAX_MJD}]", mjd)
    return mjd


def _check_fields(year, month, day):
    year = _index(year)
    month = _index(month)
    day = _index(day)
    # keeps the kernels inside 64 bit arithmetic
    if not MINYEAR - 1 <= year <= MAXYEAR + 1:
        raise OverflowError(f"year must be in {MINYEAR}..{MAXYEAR}", year)
    if not 1 <= month <= 12:
        raise ValueError("month must be in 1..12", month)
    if not 1 <= day <= 31:
        raise ValueError("day must be in 1..31", day)
    return year, month, day


def MJDg(year, month, day):
    """
    Modified julian day of a proleptic Gregorian date.

    Raises OverflowError if the result is not representable.
    """
    return check_mjd(int(GD(*_check_fields(year, month, day))) + GDALIGN)


def RMJDg(mjd):
    """Proleptic Gregorian (year, month, day) of a modified julian day."""
    y, m, d = RGD(check_mjd(mjd) - GDALIGN)
    return int(y), int(m), int(d)


def MJDj(year, month, day):
    """
    Modified julian day of a proleptic Julian date.

    Raises OverflowError if the result is not representable.
    """
    return check_mjd(int(JJD(*_check_fields(year, month, day))) + JDALIGN)


def RMJDj(mjd):
    """Proleptic Julian (year, month, day) of a modified julian day."""
    y, m, d = RJJD(check_mjd(mjd) - JDALIGN)
    return int(y), int(m), int(d)


def iso_string(mjd):
    """ISO-8601 text of the proleptic Gregorian date, e.g. -0045-12-30."""
    y, m, d = RMJDg(mjd)
    sign = "-" if y < 0 else ""
    return f"{sign}{abs(y):04d}-{m:02d}-{d:02d}"


def parse_iso(text):
    """
    Inverse of iso_string.

    Raises ValueError on malformed text or a day that does not exist in the
    proleptic Gregorian calendar.
    """
    body = text.strip()
    sign = -1 if body.startswith("-") else 1
    if body[:1] in ("-", "+"):
        body = body[1:]
    parts = body.split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid ISO date: {text!r}")
    y, m, d = sign * int(parts[0]), int(parts[1]), int(parts[2])
    if not 1 <= m <= 12 or not 1 <= d <= month_length(m, is_gregorian_leapyear(y)):
        raise ValueError(f"Invalid ISO date: {text!r}")
    return MJDg(y, m, d)
