"""Pytest configuration and fixtures for argset tests."""

import logging

import pytest

from argset import OptionSet


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging() side effects between tests."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def sample_args() -> OptionSet:
    """Options-only schema with switches, value options and a long-only option."""
    args = OptionSet("Usage: something [options...] param1 param2")
    args.add_switch("f", "force", "Force a thing")
    args.add_switch("p", "preserve", "Preserve goodness")
    args.add_value("o", "outfile", "File to write to")
    args.add_value("c", "count", "Max count", "7")
    args.add_value("", "justlong", "This has no short form")
    return args


@pytest.fixture
def command_args() -> OptionSet:
    """Schema with a root switch and three commands."""
    args = OptionSet("Usage: tool [options...] <command>")
    args.add_switch("v", "verbose", "Talk more")

    foo = args.add_command("foo", "Do foo things", handler=lambda command: 42)
    foo.add_switch("", "foo1", "First foo switch")

    bar = args.add_command("bar <src> <dst>", "Copy bar\nLonger description")
    bar.add_value("m", "mode", "Copy mode", "fast")

    end = args.add_command("end", "Hand the rest to another parser")
    end.add_switch("q", "quiet", "Say nothing")
    end.ignore_after = True
    return args
