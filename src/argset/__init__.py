"""argset: declare options and commands, parse argv, render help."""

from .errors import (
    ArgsetError,
    ConfigError,
    ConversionError,
    HelpRequested,
    MissingValueError,
    NoCommandError,
    ParamCountError,
    SchemaError,
    TokenError,
    UnknownCommandError,
    UnknownOptionError,
)
from .models import Option, ParseOutcome
from .option_set import CommandHandler, OptionSet
from .parser import parse
from .schema_file import load_schema
from .validation import find_schema_violations

__version__ = "0.1.0"

__all__ = [
    "ArgsetError",
    "CommandHandler",
    "ConfigError",
    "ConversionError",
    "HelpRequested",
    "MissingValueError",
    "NoCommandError",
    "Option",
    "OptionSet",
    "ParamCountError",
    "ParseOutcome",
    "SchemaError",
    "TokenError",
    "UnknownCommandError",
    "UnknownOptionError",
    "find_schema_violations",
    "load_schema",
    "parse",
]
