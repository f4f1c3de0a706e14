"""Schema sanity checks run before every parse."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .option_set import OptionSet


def find_schema_violations(option_set: OptionSet, *, is_command: bool = False) -> list[str]:
    """Return every sanity violation in option_set and its commands.

    An empty list means the schema can be trusted for parsing. Short and
    long names are checked as separate pools, so a short name may equal
    another option's long name.
    """
    violations: list[str] = []
    seen_short: set[str] = set()
    seen_long: set[str] = set()

    for opt in option_set.options:
        if opt.has_short and len(opt.short) != 1:
            violations.append(
                f"Short options must be one character exactly (not {opt.short})"
            )
        if opt.has_short and opt.short in seen_short:
            violations.append(f"Option {opt.short} appears twice")
        if not opt.long:
            violations.append("Options must have a long name")
        elif opt.long in seen_long:
            violations.append(f"Option {opt.long} appears twice")
        if opt.has_short:
            seen_short.add(opt.short)
        seen_long.add(opt.long)

    if option_set.commands:
        if is_command:
            violations.append(
                f"Command '{option_set.name}' cannot have commands of its own"
            )
        if option_set.params:
            violations.append("Commands and positional parameters cannot be mixed")

    seen_commands: set[str] = set()
    for command in option_set.commands:
        if not command.name:
            violations.append("Commands must have a name")
        elif command.name in seen_commands:
            violations.append(f"Command {command.name} appears twice")
        seen_commands.add(command.name)
        violations.extend(find_schema_violations(command, is_command=True))

    return violations
