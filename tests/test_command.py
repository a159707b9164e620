r"""
Tests for vajra.command module.
"""

import pytest

from vajra.command import build_command, parse_command
from vajra.errors import ConfigurationError, ParseError
from vajra.types import ExecutionMode


class TestParseCommand:
    def test_simple_command(self):
        assert parse_command("ls -la") == ["ls", "-la"]

    def test_double_quoted_argument(self):
        assert parse_command('echo "hello world"') == ["echo", "hello world"]

    def test_single_quoted_argument(self):
        assert parse_command("echo 'hello world'") == ["echo", "hello world"]

    def test_empty_string(self):
        assert parse_command("") == []

    def test_only_whitespace(self):
        assert parse_command("   ") == []

    def test_repeated_separators(self):
        assert parse_command("  sleep    0.1 ") == ["sleep", "0.1"]

    def test_tabs_separate(self):
        assert parse_command("sleep\t0.1") == ["sleep", "0.1"]

    def test_quote_characters_not_distinguished(self):
        # The apostrophe closes the region opened by the double quote
        assert parse_command("echo \"it's here'") == ["echo", "its", "here"]

    def test_unterminated_quote_takes_rest(self):
        assert parse_command('echo "a b c') == ["echo", "a b c"]

    def test_quotes_inside_token_are_dropped(self):
        assert parse_command('--name="a b"') == ["--name=a b"]

    def test_empty_quotes_yield_nothing(self):
        assert parse_command('echo ""') == ["echo"]

    def test_no_escape_mechanism(self):
        assert parse_command('echo \\"a b\\"') == ["echo", "\\a b\\"]

    def test_deterministic(self):
        command = "python -c 'print(1)'"
        assert parse_command(command) == parse_command(command)


class TestBuildCommand:
    def test_direct_mode(self):
        spec = build_command("ls -la")
        assert spec.raw == "ls -la"
        assert spec.tokens == ("ls", "-la")
        assert spec.mode == ExecutionMode.DIRECT
        assert spec.argv == ["ls", "-la"]
        assert spec.shell is False

    def test_shell_mode_keeps_raw(self):
        spec = build_command("ls | wc -l", ExecutionMode.SHELL)
        assert spec.shell is True
        assert spec.argv == ["ls | wc -l"]

    def test_empty_command(self):
        with pytest.raises(ConfigurationError, match="No command"):
            build_command("")

    def test_blank_command(self):
        with pytest.raises(ConfigurationError):
            build_command("   ")

    def test_quotes_only_is_parse_error(self):
        with pytest.raises(ParseError):
            build_command('""')

    def test_quotes_only_allowed_in_shell_mode(self):
        spec = build_command('""', ExecutionMode.SHELL)
        assert spec.tokens == ()
