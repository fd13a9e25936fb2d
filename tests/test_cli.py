"""Tests for the command-line interface."""

import argparse
import io
import json

import pytest

from argsplit.cli import decode_separators, format_tokens, main, parse_args


class TestParseArgs:
    """Tests for parse_args function."""

    def test_defaults(self):
        """Test default options."""
        parsed = parse_args(["a", "b"])

        assert parsed.text == ["a", "b"]
        assert parsed.separators is None
        assert parsed.profile is None
        assert parsed.format is None
        assert not parsed.join
        assert not parsed.interactive

    def test_separators_are_decoded(self):
        """Test escapes in separators."""
        parsed = parse_args(["-s", "\\t,"])

        assert parsed.separators == "\t,"

    def test_separators_and_profile_exclusive(self, capsys):
        """Test that -s and -P cannot be combined."""
        with pytest.raises(SystemExit):
            parse_args(["-s", ",", "-P", "csv"])


class TestDecodeSeparators:
    """Tests for decode_separators function."""

    def test_plain(self):
        """Test plain characters."""
        assert decode_separators(",;") == ",;"

    def test_space_is_kept(self):
        """Test that a space is a separator, not a split point."""
        assert decode_separators(" ,") == " ,"

    def test_escapes(self):
        """Test escaped characters."""
        assert decode_separators("\\t\\x00") == "\t\x00"

    def test_empty(self):
        """Test empty means no separators."""
        assert decode_separators("") == ""

    def test_malformed(self):
        """Test malformed escapes are rejected."""
        with pytest.raises(argparse.ArgumentTypeError):
            decode_separators("\\")


class TestFormatTokens:
    """Tests for format_tokens function."""

    def test_lines(self):
        """Test one token per line."""
        assert format_tokens(["a", "b c"], "lines") == "a\nb c\n"

    def test_lines_empty(self):
        """Test no output for no tokens."""
        assert format_tokens([], "lines") == ""

    def test_json(self):
        """Test a JSON array."""
        assert json.loads(format_tokens(["a", "\x00"], "json")) == ["a", "\x00"]

    def test_null(self):
        """Test NUL terminated tokens."""
        assert format_tokens(["a", "b"], "null") == "a\0b\0"


class TestMain:
    """Tests for main function."""

    def test_split_arguments(self, isolated_args, capsys):
        """Test splitting text given as arguments."""
        assert main([*isolated_args, "--", 'a "b c" d']) == 0

        assert capsys.readouterr().out == "a\nb c\nd\n"

    def test_words_are_joined(self, isolated_args, capsys):
        """Test several text arguments are joined with spaces."""
        assert main([*isolated_args, "--", "a", "b"]) == 0

        assert capsys.readouterr().out == "a\nb\n"

    def test_json_output(self, isolated_args, capsys):
        """Test JSON output with custom separators."""
        assert main([*isolated_args, "-f", "json", "-s", ",", "--", "a,b,c"]) == 0

        assert json.loads(capsys.readouterr().out) == ["a", "b", "c"]

    def test_profile(self, isolated_args, capsys):
        """Test separators from a built-in profile."""
        assert main([*isolated_args, "-P", "colon", "--", "/usr/bin:/bin"]) == 0

        assert capsys.readouterr().out == "/usr/bin\n/bin\n"

    def test_unknown_profile(self, isolated_args, capsys):
        """Test an unknown profile is a configuration error."""
        assert main([*isolated_args, "-P", "nope", "--", "x"]) == 1

        assert "Unknown profile" in capsys.readouterr().err

    def test_config_file(self, isolated_args, tmp_path, capsys):
        """Test defaults come from the configuration file."""
        (tmp_path / "config.yaml").write_text("config:\n  separators: ';'\n  format: json\n")

        assert main([*isolated_args, "--", "a b;c"]) == 0

        assert json.loads(capsys.readouterr().out) == ["a b", "c"]

    def test_malformed_input(self, isolated_args, capsys):
        """Test malformed input exits with status 2."""
        assert main([*isolated_args, "--", '"open']) == 2

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unterminated double quote" in captured.err

    def test_stdin(self, isolated_args, monkeypatch, capsys):
        """Test text is read from stdin without arguments."""
        monkeypatch.setattr("sys.stdin", io.StringIO("x 'y z'\n"))

        assert main(isolated_args) == 0

        assert capsys.readouterr().out == "x\ny z\n"

    def test_join(self, isolated_args, capsys):
        """Test re-quoting the tokens."""
        assert main([*isolated_args, "-j", "--", "a\\ b", "c\\td"]) == 0

        assert capsys.readouterr().out == '"a b" "c\\td"\n'

    def test_join_custom_separator(self, isolated_args, capsys):
        """Test re-quoting with the first separator."""
        assert main([*isolated_args, "-j", "-s", ",", "--", "'a,b',c"]) == 0

        assert capsys.readouterr().out == '"a,b",c\n'

    def test_interactive(self, isolated_args, monkeypatch):
        """Test interactive mode starts the prompt."""
        calls = []

        def fake_run(config, separators, theme):
            calls.append((separators, theme))
            return 0

        monkeypatch.setattr("argsplit.cli.run_interactive", fake_run)

        assert main([*isolated_args, "-i", "-s", ",", "-t", "mono"]) == 0
        assert calls == [(",", "mono")]
