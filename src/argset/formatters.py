"""Help text and result rendering for OptionSets."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING, Any

from .constants import HELP_WRAP_WIDTH
from .models import Option

if TYPE_CHECKING:
    from .option_set import OptionSet


def render_help(option_set: OptionSet) -> str:
    """Render full help: banner, detail, commands, then sorted options."""
    lines = [option_set.banner]
    if option_set.detail:
        lines.append("")
        lines.extend(wrap_text(option_set.detail))
    if option_set.commands:
        lines.append("")
        lines.extend(format_command_lines(option_set.commands))
    if option_set.options:
        lines.append("")
        lines.extend(format_option_lines(option_set.options))
    return "\n".join(lines)


def render_command_help(command: OptionSet) -> str:
    """Render help for one command: its invocation, description and options."""
    lines = [command.display_name]
    if command.usage:
        lines.append("")
        lines.extend(wrap_text(command.usage))
    if command.options:
        lines.append("")
        lines.extend(format_option_lines(command.options))
    return "\n".join(lines)


def format_command_lines(commands: list[OptionSet]) -> list[str]:
    width = max(len(command.display_name) for command in commands)
    return [
        f"  {command.display_name.ljust(width)}  {command.banner}".rstrip()
        for command in commands
    ]


def format_option_lines(options: list[Option]) -> list[str]:
    """One line per option, sorted by long name, long names padded to align."""
    width = max(len(opt.long) for opt in options)
    lines = []
    for opt in sorted(options, key=lambda o: o.long):
        if opt.has_short:
            line = f" -{opt.short} --{opt.long.ljust(width)} {opt.summary}"
        else:
            line = f"    --{opt.long.ljust(width)} {opt.summary}"
        if opt.expects_value and opt.default:
            line += f" ({opt.default})"
        lines.append(line.rstrip())
    return lines


def wrap_text(text: str, width: int = HELP_WRAP_WIDTH) -> list[str]:
    """Wrap each line of text, keeping blank lines and leading indentation."""
    lines: list[str] = []
    for raw_line in text.splitlines():
        if not raw_line.strip():
            lines.append("")
            continue
        stripped = raw_line.lstrip()
        indent = raw_line[: len(raw_line) - len(stripped)]
        lines.extend(
            textwrap.wrap(
                stripped,
                width=width,
                initial_indent=indent,
                subsequent_indent=indent,
                break_on_hyphens=False,
            )
        )
    return lines


def _option_values(option_set: OptionSet) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for opt in option_set.options:
        if not opt.expects_value:
            values[opt.long] = opt.toggled
        elif opt.toggled:
            values[opt.long] = opt.value
        else:
            values[opt.long] = opt.default
    return values


def result_payload(option_set: OptionSet) -> dict[str, Any]:
    """Return a JSON-ready snapshot of option_set after a parse."""
    payload: dict[str, Any] = {
        "options": _option_values(option_set),
        "params": list(option_set.params),
    }
    if option_set.commands:
        command = option_set.which_command()
        payload["command"] = (
            {
                "name": command.name,
                "options": _option_values(command),
                "params": list(command.params),
            }
            if command is not None
            else None
        )
    payload["parse_end_index"] = option_set.parse_end_index
    return payload
