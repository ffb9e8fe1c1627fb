import sys
from functools import wraps, partial


class _BaseContextDecorator:

    def __enter__(self):
        pass

    def __exit__(self, exception_type, exception_value, traceback):
        pass

    def __call__(self, func):

        @wraps(func)
        def _wrapper(*args, **kwargs):
            with self:
                return func(*args, **kwargs)

        return _wrapper


class ConsoleLogger:

    __slots__ = ('write', )

    def __init__(self, stream=None):
        if stream is None:
            stream = sys.stderr
        self.write = partial(print, end='', file=stream)


class ExitOnException(_BaseContextDecorator):
    """Print the error and exit with the status registered for its type"""

    __slots__ = ('logger', 'exit_codes')

    def __init__(self, exit_codes, logger=None):
        if logger is None:
            logger = ConsoleLogger()
        self.logger = logger
        self.exit_codes = exit_codes

    def __exit__(self, exception_type, exception_value, tb):
        if exception_type is None:
            return None
        for error, code in self.exit_codes.items():
            if issubclass(exception_type, error):
                self.logger.write(f"{exception_value}\n")
                sys.exit(code)
        return None
