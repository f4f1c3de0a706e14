"""Command-line tool: render and exercise JSON schema files."""

from __future__ import annotations

import json
import os
import sys
import traceback
from pathlib import Path

from .constants import DEBUG_ENV_VAR
from .errors import ArgsetError
from .formatters import result_payload
from .logging_utils import log_event, setup_logging
from .option_set import OptionSet
from .schema_file import load_schema

PROG_NAME = "argset"
CLI_USAGE = """\
Usage: argset [options...] <command> <schema> [args...]
Schema files are JSON documents that declare options and commands. Use 'show'
to print the help a schema renders and 'check' to parse arguments against it;
the parse result is printed as JSON.
"""


def build_parser(tokens: list[str]) -> OptionSet:
    """Declare the tool's own options and commands.

    The check handler re-parses tokens from the point where this parser
    stopped, using the schema named by the first remaining token.
    """
    args = OptionSet(CLI_USAGE)
    args.add_switch("v", "verbose", "Log parser events to stderr")
    args.add_value("", "log-file", "Also write log events to this file")

    show = args.add_command(
        "show <schema>",
        "Print the help text that a schema file renders",
        handler=_run_show,
    )
    show.add_value("c", "command", "Show help for one of the schema's commands")

    check = args.add_command(
        "check <schema> [args...]",
        "Parse the remaining arguments with a schema file and print the result as JSON",
        handler=lambda _command: _run_check(tokens, args.parse_end_index),
    )
    check.ignore_after = True
    return args


def _run_show(command: OptionSet) -> int:
    schema = load_schema(Path(command.params[0]).expanduser())
    print(schema.help_text(command.get("command") or None))
    return 0


def _run_check(tokens: list[str], schema_index: int) -> int:
    if schema_index >= len(tokens):
        print("ERROR: check expects a schema path")
        return 1

    schema = load_schema(Path(tokens[schema_index]).expanduser())
    # The schema path takes the program-name slot of the delegated parse
    outcome = schema.parse(tokens, schema_index + 1)
    if not outcome:
        return 0 if outcome.help_shown else 1

    print(json.dumps(result_payload(schema), indent=2, ensure_ascii=False))
    return 0


def _report_unexpected_error(error: Exception) -> None:
    """Print an unexpected exception with optional debug traceback."""
    print(f"ERROR: {error}")
    if os.getenv(DEBUG_ENV_VAR):
        print("Debug traceback:")
        traceback.print_exc()


def main(argv: list[str] | None = None) -> int:
    tokens = [PROG_NAME, *(sys.argv[1:] if argv is None else argv)]
    args = build_parser(tokens)

    outcome = args.parse(tokens)
    if not outcome:
        return 0 if outcome.help_shown else 1

    setup_logging(args.has("verbose"), args.get("log-file") or None)
    command = args.which_command()
    log_event("app_start", command=command.name if command else None)

    try:
        return args.exec_command()
    except ArgsetError as e:
        print(f"ERROR: {e}")
        return 1
    except Exception as e:
        _report_unexpected_error(e)
        return 1
