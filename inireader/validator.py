"""Convert values found in a document into python objects"""
import os


__all__ = ["NOT_DEFINED", "Validator"]


def expand_path(value):
    """absolute path, `~` is expanded"""
    return os.path.abspath(os.path.expanduser(value))


def existing_path(value, check, what):
    path = expand_path(value)
    if not check(path):
        raise ValueError(f"{what} '{value}' does not exist")
    return path


def existing_file(value):
    return existing_path(value, os.path.isfile, "File")


def existing_folder(value):
    return existing_path(value, os.path.isdir, "Folder")


_TRUE = ('1', 'y', 'yes', 'on', 'true')
_FALSE = ('0', 'n', 'no', 'off', 'false')


def to_bool(value):
    """convert an ini style flag into a bool, ignoring case"""
    flag = value.lower()
    if flag in _TRUE:
        return True
    if flag in _FALSE:
        return False
    raise ValueError(f"'{value}' is not one of [{', '.join(_TRUE)}] or [{', '.join(_FALSE)}]")


class NotDefined:
    """Sentinel for 'no default given', None is a valid default"""
    __slots__ = ()

    def __repr__(self):
        return "<NOT_DEFINED>"

    __str__ = __repr__


NOT_DEFINED = NotDefined()


class Validator:

    """Select the converter for a type name

    The registry is shared by the whole process: converters added with
    `add_validator` are visible to every lookup until they are removed.
    The lookup itself never touches it, only `read_value` and the
    command line convert values.
    """

    validators = {
        'str': str,
        'int': int,
        'float': float,
        'bool': to_bool,
        'file': expand_path,
        'folder': expand_path,
        'existing_file': existing_file,
        'existing_folder': existing_folder,
    }

    def __new__(cls, typ):
        func = cls.validators.get(typ)
        if func is None:
            raise ValueError(f"Typ '{typ}' is unknown, use one of [{' '.join(cls.validators)}]")
        return func

    @classmethod
    def validate(cls, typ, value):
        """Convert value to `typ`, raises ValueError on failure"""
        return cls(typ)(value)

    @classmethod
    def add_validator(cls, name, func):
        """Add a new custom validator.

        Parameters
        ----------
        name: str
            name of the validator typ
        func: function
            validation function, should raise ValueError on fail

        Raises
        ------
        ValueError
            In case the name is already used
        """
        if name in cls.validators:
            raise ValueError(f"Validator type '{name}' already known")
        cls.validators[name] = func

    @classmethod
    def remove_validator(cls, name):
        """Remove validator """
        del cls.validators[name]

    @classmethod
    def overwrite_validator(cls, name, func):
        """Replace an existing validator"""
        cls.remove_validator(name)
        cls.add_validator(name, func)

    @classmethod
    def known_types(cls):
        return list(cls.validators)
