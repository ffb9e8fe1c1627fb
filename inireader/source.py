"""Line sources feeding the lookup one line at a time"""
import io
#
from .exceptions import LineSourceError


__all__ = ["FileLineSource", "text_lines", "strip_line_terminator"]


def strip_line_terminator(line):
    """remove a trailing newline or carriage return"""
    return line.rstrip('\r\n')


def text_lines(text):
    """Lazily split a string into lines without line terminators

    Only newline characters end a line, like for a file read with
    universal newlines.
    """
    for line in io.StringIO(text, newline=None):
        yield strip_line_terminator(line)


class FileLineSource:
    """Iterate lazily over the lines of a file

    The file is opened only once iteration starts and closed as soon as
    iteration stops, also if the consumer stops early. Failures to open or
    read the file are raised as `LineSourceError`.
    """

    __slots__ = ('filename', 'encoding')

    def __init__(self, filename, encoding='utf-8-sig'):
        self.filename = filename
        self.encoding = encoding

    def __repr__(self):
        return f"FileLineSource({self.filename!r}, encoding={self.encoding!r})"

    def __iter__(self):
        try:
            fh = open(self.filename, 'r', encoding=self.encoding)
        except OSError as err:
            raise LineSourceError(self.filename, err.strerror or str(err)) from None
        #
        with fh:
            while True:
                try:
                    line = fh.readline()
                except (OSError, UnicodeDecodeError) as err:
                    raise LineSourceError(self.filename, str(err)) from err
                if line == '':
                    return
                yield strip_line_terminator(line)
