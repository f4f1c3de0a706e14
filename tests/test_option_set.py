"""Tests for OptionSet declaration and result accessors."""

import pytest

from argset import ConversionError, OptionSet


class TestDeclaration:
    """Test building schemas."""

    def test_add_switch(self):
        """Test that switches default to "0" and expect no value."""
        args = OptionSet("Usage: x")
        args.add_switch("f", "force", "Force it")

        opt = args.options[0]
        assert opt.short == "f"
        assert opt.long == "force"
        assert opt.expects_value is False
        assert opt.default == "0"

    def test_add_value(self):
        """Test that value options keep their default."""
        args = OptionSet("Usage: x")
        args.add_value("t", "timeout", "Timeout in seconds", "60")
        args.add_value("", "name", "A name")

        assert args.options[0].expects_value is True
        assert args.options[0].default == "60"
        assert args.options[1].default == ""
        assert args.options[1].has_short is False

    def test_add_performs_no_validation(self):
        """Test that malformed options are accepted until parse time."""
        args = OptionSet("Usage: x")
        args.add_switch("toolong", "a", "Bad")
        args.add_switch("b", "a", "Duplicate")

        assert len(args.options) == 2

    def test_add_command_splits_name(self):
        """Test selector, parameter text and placeholder count."""
        args = OptionSet("Usage: x")
        copy = args.add_command("copy <src> <dst>", "Copy a file")

        assert copy.name == "copy"
        assert copy.params_text == "<src> <dst>"
        assert copy.param_count == 2
        assert copy.display_name == "copy <src> <dst>"
        assert copy.usage == "Copy a file"
        assert args.commands == [copy]

    def test_add_command_without_params(self):
        """Test a command name without placeholders."""
        args = OptionSet("Usage: x")
        end = args.add_command("end", "Stop")

        assert end.name == "end"
        assert end.params_text == ""
        assert end.param_count == 0
        assert end.display_name == "end"
        assert end.ignore_after is False
        assert end.check_params is True

    def test_optional_brackets_are_not_counted(self):
        """Test that only <...> placeholders count."""
        args = OptionSet("Usage: x")
        run = args.add_command("run <file> [args...]", "Run")

        assert run.param_count == 1

    def test_add_command_stores_handler(self):
        """Test that the handler is kept on the command."""
        args = OptionSet("Usage: x")

        def handler(command: OptionSet) -> int:
            return 3

        go = args.add_command("go", "Go", handler=handler)
        assert go.handler is handler

    def test_banner_and_detail(self):
        """Test splitting usage text into banner and detail."""
        args = OptionSet("Usage: x [options]\nLonger text\nacross lines\n")

        assert args.banner == "Usage: x [options]"
        assert args.detail == "Longer text\nacross lines"
        assert OptionSet("Usage: y").detail == ""

    def test_find_command(self):
        """Test command lookup by selector."""
        args = OptionSet("Usage: x")
        go = args.add_command("go <where>", "Go")

        assert args.find_command("go") is go
        assert args.find_command("go <where>") is None
        assert args.find_command("stop") is None


class TestAccessors:
    """Test has/get/get_int and command accessors."""

    def test_has_by_short_and_long(self, sample_args):
        """Test that both names refer to the same option."""
        assert sample_args.parse(["prog", "--force"])

        assert sample_args.has("f")
        assert sample_args.has("force")

    def test_has_unknown_option(self, sample_args, capsys):
        """Test that unknown names are reported and return False."""
        assert sample_args.has("nope") is False
        assert "Option nope does not exist" in capsys.readouterr().out

    def test_get_unknown_option(self, sample_args, capsys):
        """Test that unknown names return an empty string."""
        assert sample_args.get("nope") == ""
        assert "Option nope does not exist" in capsys.readouterr().out

    def test_get_on_switch(self, sample_args, capsys):
        """Test that get() on a switch reports misuse and falls back to 1/0."""
        assert sample_args.parse(["prog"])
        assert sample_args.get("force") == "0"

        assert sample_args.parse(["prog", "-f"])
        assert sample_args.get("force") == "1"
        assert "Use has() instead" in capsys.readouterr().out

    def test_get_default_when_not_given(self, sample_args):
        """Test that defaults apply before any parse too."""
        assert sample_args.get("count") == "7"
        assert sample_args.get_int("count") == 7
        assert sample_args.get("justlong") == ""

    def test_get_int_not_a_number(self, sample_args):
        """Test that non-numeric values raise ConversionError."""
        assert sample_args.parse(["prog", "-c", "many"])

        with pytest.raises(ConversionError, match="not an integer"):
            sample_args.get_int("count")

    @pytest.mark.parametrize("text", ["1_000", "١٢", "0x10", "1.5", "+"])
    def test_get_int_rejects_non_decimal_text(self, text):
        """Test that only plain ASCII decimal digits convert."""
        args = OptionSet("Usage: x")
        args.add_value("n", "number", "A number", text)

        with pytest.raises(ConversionError, match="not an integer"):
            args.get_int("number")

    def test_get_int_allows_sign_and_padding(self):
        """Test that a leading sign and surrounding spaces are accepted."""
        args = OptionSet("Usage: x")
        args.add_value("n", "number", "A number", " +42 ")

        assert args.get_int("number") == 42

    def test_get_int_empty_value(self, sample_args):
        """Test that an empty default is not a number."""
        with pytest.raises(ValueError):
            sample_args.get_int("justlong")

    def test_get_int_negative(self, sample_args):
        """Test that signed values convert."""
        assert sample_args.parse(["prog", "-c", "-12"])
        assert sample_args.get_int("c") == -12

    def test_get_int_range(self):
        """Test the 32-bit and 64-bit limits."""
        args = OptionSet("Usage: x")
        args.add_value("n", "big", "Big number", str(2**31))
        args.add_value("", "huge", "Huge number", str(2**63))

        with pytest.raises(ConversionError, match="out of range"):
            args.get_int("big")
        assert args.get_int64("big") == 2**31
        with pytest.raises(ConversionError, match="out of range"):
            args.get_int64("huge")

    def test_which_command_before_parse(self, command_args):
        """Test that no command is chosen initially."""
        assert command_args.which_command() is None

    def test_exec_command_without_choice(self, command_args, capsys):
        """Test that exec_command() fails when nothing was chosen."""
        assert command_args.exec_command() == 1
        assert "No command was chosen" in capsys.readouterr().out

    def test_exec_command_passes_chosen_set(self):
        """Test that the handler receives the chosen command's OptionSet."""
        received = []
        args = OptionSet("Usage: x")
        go = args.add_command("go <where>", "Go", handler=lambda command: received.append(command) or 5)

        assert args.parse(["prog", "go", "home"])
        assert args.exec_command() == 5
        assert received == [go]
        assert received[0].params == ["home"]

    def test_show_help_prints(self, sample_args, capsys):
        """Test that show_help() prints the rendered help."""
        sample_args.show_help()

        out = capsys.readouterr().out
        assert out.startswith("Usage: something [options...] param1 param2\n")

    def test_help_text_for_command(self, command_args):
        """Test rendering help for one command, or an unknown one."""
        assert command_args.help_text("foo").startswith("foo\n")
        assert command_args.help_text("nope") == "Unknown command 'nope'"

    def test_repr(self, command_args):
        """Test repr shows the label and sizes."""
        assert repr(command_args) == "OptionSet('Usage: tool [options...] <command>', options=1, commands=3)"
        assert repr(command_args.find_command("bar")) == "OptionSet('bar', options=1, commands=0)"
