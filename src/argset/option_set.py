"""OptionSet: declared schema, sub-commands and the latest parse result."""

from __future__ import annotations

import logging
import re
import sys
from typing import Callable

from . import formatters, parser
from .constants import (
    EXEC_FAILURE_CODE,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
)
from .errors import ConversionError
from .logging_utils import log_event
from .models import Option, ParseOutcome

_PLACEHOLDER_RE = re.compile(r"<[^<>]*>")
# ASCII digits only; int() alone would accept "1_000" and other scripts' digits
_INTEGER_RE = re.compile(r"[+-]?\d+\Z", re.ASCII)

CommandHandler = Callable[["OptionSet"], int]


class OptionSet:
    """A collection of options, optionally with one level of commands.

    The schema (options, commands) is assembled once before parsing. Result
    fields (option state, params, chosen, parse_end_index) are reset at the
    start of every parse and filled in during it.

    Example:
        args = OptionSet("Usage: myprogram [options...] param1")
        args.add_switch("f", "force", "Force a certain thing")
        args.add_value("o", "outfile", "Write output to file")
        args.add_value("t", "timeout", "Timeout in seconds", "60")
        if not args.parse(sys.argv):
            return 1
        if args.has("force"):
            ...
        timeout = args.get_int("timeout")
    """

    def __init__(self, usage: str = "") -> None:
        self.usage = usage
        self.options: list[Option] = []
        self.params: list[str] = []
        self.commands: list[OptionSet] = []
        self.parse_end_index = 0

        # Only meaningful when this set is a command of another set
        self.name = ""
        self.params_text = ""
        self.param_count = 0
        self.ignore_after = False
        self.check_params = True
        self.chosen = False
        self.handler: CommandHandler | None = None

    def __repr__(self) -> str:
        label = self.name or self.banner
        return f"OptionSet({label!r}, options={len(self.options)}, commands={len(self.commands)})"

    @property
    def banner(self) -> str:
        """First line of the usage text."""
        return self.usage.split("\n", 1)[0]

    @property
    def detail(self) -> str:
        """Usage text after the banner line."""
        parts = self.usage.split("\n", 1)
        return parts[1].strip() if len(parts) > 1 else ""

    @property
    def display_name(self) -> str:
        if self.params_text:
            return f"{self.name} {self.params_text}"
        return self.name

    # Setup

    def add_switch(self, short: str, long: str, summary: str) -> None:
        """Add a binary on/off option that has no value (eg -nocache)."""
        self.options.append(Option(short=short, long=long, summary=summary))

    def add_value(self, short: str, long: str, summary: str, default: str = "") -> None:
        """Add an option that has an associated value (eg -f outfile)."""
        self.options.append(
            Option(
                short=short,
                long=long,
                summary=summary,
                expects_value=True,
                default=default,
            )
        )

    def add_command(
        self,
        name: str,
        description: str,
        handler: CommandHandler | None = None,
    ) -> OptionSet:
        """Add a command and return its OptionSet for further setup.

        name is "selector <param1> <param2> ..."; the number of <...>
        placeholders is the parameter count checked after parsing.
        """
        selector, _, params_text = name.strip().partition(" ")
        command = OptionSet(description)
        command.name = selector
        command.params_text = params_text.strip()
        command.param_count = len(_PLACEHOLDER_RE.findall(command.params_text))
        command.handler = handler
        self.commands.append(command)
        return command

    # Lookup

    def find_option(self, name: str) -> Option | None:
        for opt in self.options:
            if opt.matches(name):
                return opt
        return None

    def find_command(self, name: str) -> OptionSet | None:
        for command in self.commands:
            if command.name == name:
                return command
        return None

    # Parse

    def reset(self) -> None:
        """Clear all result state, including that of every command."""
        for opt in self.options:
            opt.reset()
        self.params.clear()
        self.chosen = False
        self.parse_end_index = 0
        for command in self.commands:
            command.reset()

    def parse(self, tokens: list[str] | None = None, start_index: int = 1) -> ParseOutcome:
        """Parse tokens (sys.argv by default), skipping the program name."""
        if tokens is None:
            tokens = sys.argv
        return parser.parse(self, tokens, start_index)

    # Results

    def has(self, name: str) -> bool:
        """Return True if the option was specified in the latest parse."""
        opt = self.find_option(name)
        if opt is None:
            print(f"Option {name} does not exist")
            return False
        return opt.toggled

    def get(self, name: str) -> str:
        """Return an option's value, or its default if not specified."""
        opt = self.find_option(name)
        if opt is None:
            print(f"Option {name} does not exist")
            return ""
        if not opt.expects_value:
            print("Cannot use get() on a switch option. Use has() instead.")
            return "1" if opt.toggled else "0"
        if opt.toggled:
            return opt.value
        return opt.default

    def get_int(self, name: str) -> int:
        """Return an option's value as a signed 32-bit integer."""
        return self._get_integer(name, INT32_MIN, INT32_MAX)

    def get_int64(self, name: str) -> int:
        """Return an option's value as a signed 64-bit integer."""
        return self._get_integer(name, INT64_MIN, INT64_MAX)

    def _get_integer(self, name: str, low: int, high: int) -> int:
        text = self.get(name)
        if _INTEGER_RE.match(text.strip()) is None:
            raise ConversionError(f"Option {name} value '{text}' is not an integer")
        number = int(text.strip(), 10)
        if not low <= number <= high:
            raise ConversionError(f"Option {name} value '{text}' is out of range")
        return number

    def which_command(self) -> OptionSet | None:
        """Return the command chosen by the latest parse, if any."""
        for command in self.commands:
            if command.chosen:
                return command
        return None

    def exec_command(self) -> int:
        """Run the chosen command's handler and return its result code."""
        command = self.which_command()
        if command is None:
            print("No command was chosen")
            return EXEC_FAILURE_CODE
        if command.handler is None:
            print(f"Command '{command.name}' has no handler")
            return EXEC_FAILURE_CODE

        log_event("command_exec", level=logging.DEBUG, command=command.name)
        return command.handler(command)

    # Help

    def help_text(self, command: str | None = None) -> str:
        """Render help for this set, or for one of its commands."""
        if command is None:
            return formatters.render_help(self)
        target = self.find_command(command)
        if target is None:
            return f"Unknown command '{command}'"
        return formatters.render_command_help(target)

    def show_help(self, command: str | None = None) -> None:
        print(self.help_text(command))
