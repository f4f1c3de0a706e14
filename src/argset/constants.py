"""Centralized constants for argset."""

from __future__ import annotations

# Tokens that always request help, whether or not such options are declared
HELP_SPELLINGS = frozenset(("-h", "-help", "--help", "-?", "/?", "/h", "/help"))
HELP_COMMAND = "help"

SHORT_PREFIX = "-"
LONG_PREFIX = "--"

# Switches report this default through get()
SWITCH_DEFAULT = "0"

# Failure code returned by exec_command() when nothing can run
EXEC_FAILURE_CODE = 1

HELP_WRAP_WIDTH = 80

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DEBUG_ENV_VAR = "ARGSET_DEBUG"
