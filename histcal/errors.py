#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 11 09:12:40 2025

@author: Marcel Hesselberth

Exceptions of the historic calendar.

All of them derive from ValueError so that callers can keep catching the
builtin exception for any invalid input.
"""


class HistoryError(ValueError):
    """Base class of the histcal exceptions."""


class ConfigurationError(HistoryError):
    """
    A calendar component was built from inconsistent parts.

    Examples: a New Year rule that ends before the Council of Tours, an
    empty table of ancient leap years, a region entry with a bad option.
    """


class VariantParseError(HistoryError):
    """
    A variant string could not be read.

    The message contains the offending fragment.
    """

    def __init__(self, message, fragment=None):
        if fragment is not None:
            message = f"{message}: {fragment!r}"
        super().__init__(message)
        self.fragment = fragment


class UnsupportedLocaleError(HistoryError):
    """No calendar history is known for a locale and fallback is disabled."""
