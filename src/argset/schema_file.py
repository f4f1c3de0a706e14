"""Load OptionSet schemas from JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError
from .option_set import OptionSet


class OptionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    short: str = ""
    long: str
    summary: str = ""
    value: bool = False
    default: str = ""  # ignored for switches


class CommandSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str  # "selector <param1> <param2>"
    description: str = ""
    ignore_after: bool = False
    check_params: bool = True
    options: list[OptionSpec] = []


class SchemaSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    usage: str = ""
    options: list[OptionSpec] = []
    commands: list[CommandSpec] = []


def _add_options(option_set: OptionSet, specs: list[OptionSpec]) -> None:
    for spec in specs:
        if spec.value:
            option_set.add_value(spec.short, spec.long, spec.summary, spec.default)
        else:
            option_set.add_switch(spec.short, spec.long, spec.summary)


def build_option_set(spec: SchemaSpec) -> OptionSet:
    """Build an OptionSet (and its commands) from a validated schema model."""
    option_set = OptionSet(spec.usage)
    _add_options(option_set, spec.options)
    for command_spec in spec.commands:
        command = option_set.add_command(command_spec.name, command_spec.description)
        command.ignore_after = command_spec.ignore_after
        command.check_params = command_spec.check_params
        _add_options(command, command_spec.options)
    return option_set


def load_schema(path: Path) -> OptionSet:
    """Load a JSON schema file into a fresh OptionSet.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or does
            not match the schema model.

    Duplicate or malformed option names are not rejected here; the parser
    reports them before the first parse.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read schema file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in schema file {path}: {e}") from e

    try:
        spec = SchemaSpec.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise ConfigError(
            f"Invalid schema file {path}: {location}: {first['msg']}"
        ) from e

    return build_option_set(spec)
