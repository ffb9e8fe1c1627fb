"""Classify raw lines of an ini-like document and parse its entries"""
from collections import namedtuple
#
from .settings import DEFAULT_SETTINGS
from .source import text_lines


__all__ = ["Entry", "SectionHeader", "Candidate", "BLANK", "COMMENT",
           "classify", "parse", "parse_entry_line", "unquote", "names_equal", "trim"]


Entry = namedtuple("Entry", ("key", "value"))
SectionHeader = namedtuple("SectionHeader", ("name",))
Candidate = namedtuple("Candidate", ("line",))


class LineKind:
    __slots__ = ('_name',)

    def __init__(self, name):
        self._name = name

    def __str__(self):
        return self._name

    def __repr__(self):
        return self._name


BLANK = LineKind("BLANK")
COMMENT = LineKind("COMMENT")

# only ascii space and tab, line terminators are left to the line source
WHITESPACE = ' \t'

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def trim(string):
    """strip spaces and tabs from both ends"""
    return string.strip(WHITESPACE)


def classify(line, comment_markers=DEFAULT_SETTINGS.comment_markers):
    """Classify a single line

    Returns
    -------
    BLANK, COMMENT, SectionHeader(name) or Candidate(line)
        the candidate holds the trimmed line
    """
    line = trim(line)
    if line == "":
        return BLANK
    if line[0] in comment_markers:
        return COMMENT
    if len(line) >= 3 and line[0] == '[' and line[-1] == ']':
        return SectionHeader(trim(line[1:-1]))
    return Candidate(line)


def parse(iterator, settings=DEFAULT_SETTINGS):
    """Lazily classify lines, skipping blank and comment lines"""
    if isinstance(iterator, str):
        iterator = text_lines(iterator)
    #
    for line in iterator:
        kind = classify(line, settings.comment_markers)
        if kind is BLANK or kind is COMMENT:
            continue
        yield kind


def unquote(value, quote_char='"'):
    """remove exactly one pair of surrounding quotes"""
    if len(value) >= 2 and value[0] == quote_char and value[-1] == quote_char:
        return value[1:-1]
    return value


def parse_entry_line(line, settings=DEFAULT_SETTINGS):
    """Split a candidate line on the first '='

    Returns
    -------
    Entry or None
        None if the line is not an entry: no separator, empty key,
        or an empty value while `settings.allow_empty_value` is False
    """
    key, delim, value = line.partition('=')
    if delim != '=':
        return None
    key = trim(key)
    if key == "":
        return None
    value = trim(value)
    if value == "" and not settings.allow_empty_value:
        return None
    return Entry(key, unquote(value, settings.quote_char))


def names_equal(name1, name2):
    """compare two names ignoring ascii case"""
    if len(name1) != len(name2):
        return False
    return name1.translate(_ASCII_LOWER) == name2.translate(_ASCII_LOWER)
