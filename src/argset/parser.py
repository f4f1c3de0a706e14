"""Token classification for OptionSet schemas."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, NoReturn

from . import formatters
from .constants import HELP_COMMAND, HELP_SPELLINGS, LONG_PREFIX, SHORT_PREFIX
from .errors import (
    ArgsetError,
    HelpRequested,
    MissingValueError,
    NoCommandError,
    ParamCountError,
    SchemaError,
    UnknownCommandError,
    UnknownOptionError,
)
from .logging_utils import log_event
from .models import Option, ParseOutcome
from .validation import find_schema_violations

if TYPE_CHECKING:
    from .option_set import OptionSet

logger = logging.getLogger(__name__)

# Negative numbers such as -5, -.5 or -1.5e3 are positionals, not options
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def parse(option_set: OptionSet, tokens: list[str], start_index: int = 1) -> ParseOutcome:
    """Parse tokens[start_index:] against option_set.

    Result state on option_set (and its commands) is reset first, then
    filled in. Every failure is printed and returned as an unsuccessful
    outcome; help requests set help_shown.
    """
    walk = _TokenWalk(option_set, tokens, start_index)
    try:
        _check_schema(option_set)
        option_set.reset()
        logger.debug("Parsing %d token(s) from index %d", len(tokens) - start_index, start_index)
        walk.run()
        _check_command_choice(option_set)
    except HelpRequested as exc:
        option_set.parse_end_index = walk.index
        print(exc.text)
        log_event("help_shown", level=logging.DEBUG, index=walk.index)
        return ParseOutcome(
            success=False,
            end_index=walk.index,
            help_shown=True,
            message=exc.text,
        )
    except ArgsetError as exc:
        option_set.parse_end_index = walk.index
        print(exc)
        log_event(
            "parse_fail",
            level=logging.DEBUG,
            reason=type(exc).__name__,
            error=str(exc),
            index=walk.index,
        )
        return ParseOutcome(success=False, end_index=walk.index, message=str(exc))

    option_set.parse_end_index = walk.index
    log_event("parse_ok", level=logging.DEBUG, end_index=walk.index, params=option_set.params)
    return ParseOutcome(success=True, end_index=walk.index)


def find_option_for_token(option_set: OptionSet, token: str) -> Option | None:
    """Match "-x" against short names and "--name" against long names."""
    short_name = token[len(SHORT_PREFIX):]
    is_long = token.startswith(LONG_PREFIX)
    for opt in option_set.options:
        if opt.has_short and opt.short == short_name:
            return opt
        if is_long and opt.long == token[len(LONG_PREFIX):]:
            return opt
    return None


def is_number(token: str) -> bool:
    return _NUMBER_RE.match(token) is not None


class _TokenWalk:
    """One left-to-right pass over the tokens."""

    def __init__(self, root: OptionSet, tokens: list[str], start_index: int) -> None:
        self.root = root
        self.tokens = tokens
        self.index = start_index
        self.active = root

    @property
    def at_end(self) -> bool:
        return self.index == len(self.tokens) - 1

    def run(self) -> None:
        while self.index < len(self.tokens):
            token = self.tokens[self.index]
            if self.active is not self.root and self.active.ignore_after:
                # Only a help request may follow; the rest belongs to the caller
                if token in HELP_SPELLINGS:
                    self._request_help()
                logger.debug(
                    "Command '%s' ignores tokens from index %d", self.active.name, self.index
                )
                return
            self._step(token)

    def _step(self, token: str) -> None:
        if token.startswith(SHORT_PREFIX):
            opt = find_option_for_token(self.active, token)
            if opt is not None:
                self._consume_option(opt, token)
                return
            if token in HELP_SPELLINGS:
                self._request_help()
            if not is_number(token):
                raise UnknownOptionError(token)
        elif token in HELP_SPELLINGS:
            self._request_help()

        if self.root.commands and self.active is self.root:
            self._select_command(token)
        else:
            self.active.params.append(token)
        self.index += 1

    def _consume_option(self, opt: Option, token: str) -> None:
        if opt.expects_value:
            if self.at_end:
                raise MissingValueError(token, opt.long)
            opt.value = self.tokens[self.index + 1]
            opt.toggled = True
            self.index += 2
        else:
            opt.toggled = True
            self.index += 1

    def _select_command(self, token: str) -> None:
        if token == HELP_COMMAND:
            self._request_help()
        command = self.root.find_command(token)
        if command is None:
            raise UnknownCommandError(token)
        command.chosen = True
        self.active = command
        log_event("command_selected", level=logging.DEBUG, command=command.name, index=self.index)

    def _request_help(self) -> NoReturn:
        if self.at_end:
            if self.active is self.root:
                raise HelpRequested(formatters.render_help(self.root))
            raise HelpRequested(formatters.render_command_help(self.active))

        name = self.tokens[self.index + 1]
        command = self.root.find_command(name)
        if command is None:
            raise HelpRequested(str(UnknownCommandError(name)))
        raise HelpRequested(formatters.render_command_help(command))


def _check_schema(option_set: OptionSet) -> None:
    violations = find_schema_violations(option_set)
    for violation in violations:
        logger.debug("Schema violation: %s", violation)
    if violations:
        raise SchemaError(violations[0])


def _check_command_choice(root: OptionSet) -> None:
    if not root.commands:
        return
    command = root.which_command()
    if command is None:
        raise NoCommandError()
    if command.ignore_after or not command.check_params:
        return
    if len(command.params) != command.param_count:
        raise ParamCountError(command.name, command.param_count, len(command.params))
