"""Dialect settings for a lookup

The defaults accept both comment markers and treat `key=` as
a valid entry with an empty value.
"""
from collections import namedtuple


__all__ = ["LookupSettings", "DEFAULT_SETTINGS"]


_LookupSettingsBase = namedtuple("LookupSettings", ("comment_markers", "allow_empty_value",
                                                    "quote_char", "encoding"))


class LookupSettings(_LookupSettingsBase):
    """Immutable settings, pass them explicitly to `lookup`"""

    __slots__ = ()

    def __new__(cls, comment_markers=(';', '#'), allow_empty_value=True,
                quote_char='"', encoding='utf-8-sig'):
        comment_markers = cls._check_markers(comment_markers)
        if len(quote_char) != 1:
            raise ValueError(f"quote_char needs to be a single character, not '{quote_char}'")
        return super().__new__(cls, comment_markers, bool(allow_empty_value),
                               quote_char, encoding)

    def replace(self, **kwargs):
        """return a copy with the given fields replaced

        Raises
        ------
        ValueError
            In case an unknown field name is given
        """
        unknown = [name for name in kwargs if name not in self._fields]
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")
        dct = self._asdict()
        dct.update(kwargs)
        return LookupSettings(**dct)

    def _replace(self, **kwargs):
        return self.replace(**kwargs)

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    @staticmethod
    def _check_markers(markers):
        # a string like ';#' is read as a set of single character markers
        markers = tuple(markers)
        for marker in markers:
            if len(marker) != 1 or marker in (' ', '\t'):
                raise ValueError(f"Comment marker '{marker}' is not a single visible character")
        return markers


DEFAULT_SETTINGS = LookupSettings()
