"""Single pass lookup of one value in an ini-like document

The lookup never holds more than the current line. It stops at the
first matching entry, or as soon as the requested section is closed
by the next header, the section is expected to appear only once.
"""
from collections import namedtuple
#
from .configast import SectionHeader, parse, parse_entry_line, names_equal, trim
from .exceptions import UsageError, LineSourceError
from .settings import DEFAULT_SETTINGS
from .source import text_lines


__all__ = ["lookup", "Found", "NotFound", "NOT_FOUND", "SourceError", "SectionTracker",
           "SEEKING", "IN_TARGET_SECTION", "DONE"]


Found = namedtuple("Found", ("value",))
SourceError = namedtuple("SourceError", ("filename", "msg"))


class NotFound:
    """Outcome of a lookup that did not find the key"""

    __slots__ = ()

    def __str__(self):
        return "NOT_FOUND"

    def __repr__(self):
        return "NOT_FOUND"


NOT_FOUND = NotFound()


class LookupState:
    __slots__ = ('_name',)

    def __init__(self, name):
        self._name = name

    def __str__(self):
        return self._name

    def __repr__(self):
        return self._name


SEEKING = LookupState("Seeking")
IN_TARGET_SECTION = LookupState("InTargetSection")
DONE = LookupState("Done")


class SectionTracker:
    """Track whether the line stream is inside the requested section

    Seeking -> InTargetSection on the matching header,
    InTargetSection -> Done on any further header or on a match,
    Done is terminal.
    """

    __slots__ = ('section', 'state', 'outcome')

    def __init__(self, section):
        self.section = section
        self.state = SEEKING
        self.outcome = None

    @property
    def is_done(self):
        return self.state is DONE

    @property
    def in_section(self):
        return self.state is IN_TARGET_SECTION

    def on_header(self, name):
        """handle a section header, return the new state"""
        if self.state is SEEKING:
            if names_equal(name, self.section):
                self.state = IN_TARGET_SECTION
        elif self.state is IN_TARGET_SECTION:
            self._finish(NOT_FOUND)
        return self.state

    def on_match(self, value):
        """the requested key was found in the current section"""
        if self.state is not IN_TARGET_SECTION:
            raise RuntimeError(f"Cannot match an entry in state {self.state}")
        self._finish(Found(value))
        return self.state

    def on_end(self):
        """the line stream is exhausted"""
        if self.state is not DONE:
            self._finish(NOT_FOUND)
        return self.state

    def _finish(self, outcome):
        self.state = DONE
        self.outcome = outcome


def _check_name(name, what):
    if not isinstance(name, str):
        raise UsageError(f"{what} name needs to be a string, not '{type(name).__name__}'")
    name = trim(name)
    if name == "":
        raise UsageError(f"{what} name must not be empty")
    return name


def _close(iterator):
    close = getattr(iterator, 'close', None)
    if close is not None:
        close()


def lookup(lines, section, key, settings=None):
    """Find the value of `key` in `section`

    Parameters
    ----------
    lines: iterable of str
        lines without line terminators, or a whole document as a string
    section: str
        name of the section, compared ignoring case
    key: str
        name of the key, compared ignoring case
    settings: LookupSettings, optional
        dialect settings, defaults to `DEFAULT_SETTINGS`

    Returns
    -------
    Found(value), NOT_FOUND or SourceError(filename, msg)
        SourceError in case the line source raised a `LineSourceError`

    Raises
    ------
    UsageError
        If section or key are empty, before any line is requested
    """
    section = _check_name(section, "Section")
    key = _check_name(key, "Key")
    if settings is None:
        settings = DEFAULT_SETTINGS
    if isinstance(lines, str):
        lines = text_lines(lines)
    #
    tracker = SectionTracker(section)
    iterator = iter(lines)
    significant = parse(iterator, settings)
    try:
        for kind in significant:
            if isinstance(kind, SectionHeader):
                tracker.on_header(kind.name)
            elif tracker.in_section:
                entry = parse_entry_line(kind.line, settings)
                if entry is not None and names_equal(entry.key, key):
                    tracker.on_match(entry.value)
            if tracker.is_done:
                break
        else:
            tracker.on_end()
    except LineSourceError as err:
        return SourceError(err.filename, err.msg)
    finally:
        significant.close()
        _close(iterator)
    return tracker.outcome
