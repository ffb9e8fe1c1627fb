class Error(Exception):
    pass


class UsageError(Error):

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return f"UsageError: {self.msg}"

    def __str__(self):
        return self.msg


class LineSourceError(Error):

    def __init__(self, filename, msg):
        super().__init__(filename, msg)
        self.filename = filename
        self.msg = msg

    def __repr__(self):
        return f"LineSourceError: file = '{self.filename}'\n{self.msg}"

    def __str__(self):
        return f"Couldn't open file {self.filename} for reading: {self.msg}"


class KeyNotFoundError(Error, KeyError):

    def __init__(self, section, key):
        super().__init__(section, key)
        self.section = section
        self.key = key

    def __repr__(self):
        return f"KeyNotFoundError: section = '{self.section}', key = '{self.key}'"

    def __str__(self):
        return f"Key '{self.key}' not found in section '{self.section}'"


class ValueConversionError(Error, ValueError):

    def __init__(self, value, typ, msg):
        super().__init__(value, typ, msg)
        self.value = value
        self.typ = typ
        self.msg = msg

    def __repr__(self):
        return f"ValueConversionError: value = '{self.value}', typ = '{self.typ}'\n{self.msg}"

    def __str__(self):
        return f"Could not convert value '{self.value}' to {self.typ}: {self.msg}"
