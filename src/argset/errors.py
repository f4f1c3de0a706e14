"""Typed exceptions for argset."""

from __future__ import annotations


class ArgsetError(Exception):
    """Base exception for argset failures."""


class SchemaError(ArgsetError):
    """Raised when an OptionSet schema fails sanity validation."""


class TokenError(ArgsetError):
    """Raised when a token cannot be classified against the schema."""


class UnknownOptionError(TokenError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown option '{token}'")


class UnknownCommandError(TokenError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown command '{token}'")


class MissingValueError(TokenError):
    def __init__(self, token: str, long_name: str) -> None:
        super().__init__(
            f"Option {token} expects a value, eg --{long_name} <something>"
        )


class ParamCountError(TokenError):
    def __init__(self, command: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Command '{command}' expects {expected} parameter(s), but {actual} given"
        )


class NoCommandError(TokenError):
    def __init__(self) -> None:
        super().__init__("No command specified")


class HelpRequested(ArgsetError):
    """Raised when a help token was seen; carries the rendered help text."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(text)


class ConversionError(ValueError, ArgsetError):
    """Raised when an option value cannot be converted to an integer."""


class ConfigError(ValueError, ArgsetError):
    """Raised when a schema file cannot be loaded."""
