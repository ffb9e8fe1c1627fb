"""Command line access to a single value of an ini file"""
import argparse
import codecs
import sys
#
from .context_utils import ConsoleLogger, ExitOnException
from .exceptions import UsageError, ValueConversionError
from .lookup import Found, SourceError
from .reader import lookup_file, convert
from .settings import LookupSettings
from .validator import Validator


__all__ = ["main", "run", "get_parser"]


EXIT_FOUND = 0
EXIT_USAGE = 1
EXIT_NOT_FOUND = 2
EXIT_SOURCE_ERROR = 3
EXIT_CONVERSION_ERROR = 4

USAGE_MESSAGE = "Invalid usage. You must supply three parameters: <path> <section> <name>."


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting"""

    def error(self, message):
        raise UsageError(f"{USAGE_MESSAGE}\n{self.format_usage()}{self.prog}: error: {message}")


def get_parser():
    parser = UsageArgumentParser(prog='inireader',
                                 description="Print the value of a key in a section of an ini file",
                                 formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("path", help="path of the ini file")
    parser.add_argument("section", help="name of the section, case insensitive")
    parser.add_argument("name", help="name of the key, case insensitive")
    parser.add_argument("-t", "--type", default='str', dest='typ', metavar='TYPE',
                        help=f"convert the value, one of:\n{', '.join(Validator.known_types())}")
    parser.add_argument("-d", "--default", default=None,
                        help="printed if the key is not found")
    parser.add_argument("--comment-markers", default=';#',
                        help="characters starting a comment line (default: ';#')")
    parser.add_argument("--strict-empty", action='store_true',
                        help="ignore entries with an empty value")
    parser.add_argument("--encoding", default='utf-8-sig',
                        help="encoding of the file (default: utf-8-sig)")
    parser.add_argument("-v", "--verbose", action='store_true',
                        help="report what is looked up")
    return parser


def settings_from_args(args):
    """Create LookupSettings from parsed arguments, raise UsageError on bad input"""
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        raise UsageError(f"Unknown encoding '{args.encoding}'") from None
    try:
        return LookupSettings(comment_markers=args.comment_markers,
                              allow_empty_value=not args.strict_empty,
                              encoding=args.encoding)
    except ValueError as err:
        raise UsageError(str(err)) from None


def run(argv=None, logger=None, out=None):
    """Look up the value requested on the command line

    Returns
    -------
    int
        exit status, EXIT_FOUND, EXIT_NOT_FOUND or EXIT_SOURCE_ERROR

    Raises
    ------
    UsageError
        If the arguments are invalid
    ValueConversionError
        If the value cannot be converted to the requested type
    """
    if logger is None:
        logger = ConsoleLogger()
    if out is None:
        out = sys.stdout
    #
    args = get_parser().parse_args(argv)
    settings = settings_from_args(args)
    try:
        Validator(args.typ)
    except ValueError as err:
        raise UsageError(str(err)) from None
    #
    if args.verbose:
        logger.write(f"Looking up '{args.name}' in section '{args.section}' of '{args.path}'\n")
    outcome = lookup_file(args.path, args.section, args.name, settings=settings)
    #
    if isinstance(outcome, Found):
        print(convert(outcome.value, args.typ), file=out)
        return EXIT_FOUND
    if isinstance(outcome, SourceError):
        logger.write(f"Couldn't open file {outcome.filename} for reading: {outcome.msg}\n")
        return EXIT_SOURCE_ERROR
    if args.default is not None:
        if args.verbose:
            logger.write(f"Key '{args.name}' not found, using default\n")
        print(args.default, file=out)
        return EXIT_FOUND
    logger.write(f"Key '{args.name}' not found in section '{args.section}' of '{args.path}'\n")
    return EXIT_NOT_FOUND


def main(argv=None):
    logger = ConsoleLogger()
    with ExitOnException({UsageError: EXIT_USAGE, ValueConversionError: EXIT_CONVERSION_ERROR},
                         logger=logger):
        status = run(argv, logger=logger)
    sys.exit(status)
