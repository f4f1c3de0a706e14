"""Data models for argset."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import SWITCH_DEFAULT


@dataclass
class Option:
    """One declared flag plus its state from the latest parse."""

    short: str
    long: str
    summary: str
    expects_value: bool = False
    default: str = SWITCH_DEFAULT
    toggled: bool = False
    value: str = ""

    @property
    def has_short(self) -> bool:
        return self.short != ""

    def matches(self, name: str) -> bool:
        """Return True if name is this option's short or long name."""
        return (self.has_short and self.short == name) or self.long == name

    def reset(self) -> None:
        self.toggled = False
        self.value = ""


@dataclass(frozen=True)
class ParseOutcome:
    """Result of one parse call.

    Help requests are failures too; callers that want a different exit
    code for them check help_shown.
    """

    success: bool
    end_index: int
    help_shown: bool = False
    message: str = ""

    def __bool__(self) -> bool:
        return self.success
