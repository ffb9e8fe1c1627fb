"""Convenience functions to look up values directly in files"""
from .exceptions import KeyNotFoundError, LineSourceError, ValueConversionError
from .lookup import lookup, Found, SourceError
from .settings import DEFAULT_SETTINGS
from .source import FileLineSource
from .validator import Validator, NOT_DEFINED


__all__ = ["lookup_file", "read_value", "convert"]


def lookup_file(filename, section, key, settings=None):
    """Look up `key` in `section` of the file `filename`

    Never raises for a missing or unreadable file, this is
    reported as `SourceError(filename, msg)`.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    return lookup(FileLineSource(filename, settings.encoding), section, key, settings=settings)


def convert(value, typ):
    """convert a found value, raise ValueConversionError on failure"""
    func = Validator(typ)
    try:
        return func(value)
    except ValueError as err:
        raise ValueConversionError(value, typ, str(err)) from None


def read_value(filename, section, key, typ='str', default=NOT_DEFINED, settings=None):
    """Read a single value from a file and convert it to `typ`

    Parameters
    ----------
    filename: str
        path of the ini file
    section: str
        name of the section
    key: str
        name of the key
    typ: str, optional
        name of a known `Validator` type
    default: optional
        returned as is, if the key cannot be found

    Raises
    ------
    KeyNotFoundError
        If the key is not found and no default is given
    LineSourceError
        If the file cannot be opened or read
    ValueConversionError
        If the value cannot be converted to `typ`
    ValueError
        If `typ` is unknown
    """
    # fail on unknown types before the file is read
    Validator(typ)
    outcome = lookup_file(filename, section, key, settings=settings)
    if isinstance(outcome, Found):
        return convert(outcome.value, typ)
    if isinstance(outcome, SourceError):
        raise LineSourceError(outcome.filename, outcome.msg)
    if default is NOT_DEFINED:
        raise KeyNotFoundError(section, key)
    return default
