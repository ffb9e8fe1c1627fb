# -*- coding: utf-8 -*-

"""Top-level package for the single value ini reader."""

__version__ = '0.1.0'

__all__ = ["lookup", "lookup_file", "read_value", "Found", "NotFound", "NOT_FOUND",
           "SourceError", "LookupSettings", "DEFAULT_SETTINGS", "Validator", "NOT_DEFINED",
           "Error", "UsageError", "LineSourceError", "KeyNotFoundError", "ValueConversionError"]

# core lookup
from .lookup import lookup, Found, NotFound, NOT_FOUND, SourceError
from .settings import LookupSettings, DEFAULT_SETTINGS
# files and typed values
from .reader import lookup_file, read_value
from .validator import Validator, NOT_DEFINED
from .exceptions import (Error, UsageError, LineSourceError, KeyNotFoundError,
                         ValueConversionError)
