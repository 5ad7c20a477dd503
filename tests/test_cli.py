"""
Tests for workflow command output and the CLI entry point.

Run with:
    pytest tests/test_cli.py -v
"""

import io

import pytest

from congratsbot import DEFAULT_EMOJIS, OUTPUT_NAME
from congratsbot.cli.args import parse_args
from congratsbot.cli.main import main
from congratsbot.output import escape_data, set_output

MARKER = f"::set-output name={OUTPUT_NAME}::"


@pytest.fixture
def commit_env(monkeypatch):
    """A complete set of inputs in the process environment."""
    monkeypatch.setenv("COMMIT_AUTHOR", "Jane")
    monkeypatch.setenv("COMMIT_ID", "abc123")
    monkeypatch.setenv("COMMIT_MESSAGE", "Fix thing\n\nCo-authored-by: Bob Smith <bob@x.com>")
    monkeypatch.setenv("GITHUB_REPO", "org/repo")
    monkeypatch.delenv("EMOJIS", raising=False)
    monkeypatch.delenv("COAUTHOR_TEMPLATES", raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------

class TestEscapeData:

    def test_escapes_percent_cr_lf(self):
        assert escape_data("100%\r\n") == "100%25%0D%0A"

    def test_no_double_escaping(self):
        assert escape_data("50%\n") == "50%25%0A"

    def test_literal_escape_sequence_escaped_once(self):
        assert escape_data("%0A") == "%250A"

    def test_plain_text_untouched(self):
        assert escape_data("🎉 **Merged!**") == "🎉 **Merged!**"


# ---------------------------------------------------------------------------
# set_output
# ---------------------------------------------------------------------------

class TestSetOutput:

    def test_blank_line_then_command(self):
        stream = io.StringIO()
        set_output("NAME", "a\nb", stream)
        assert stream.getvalue() == "\n::set-output name=NAME::a%0Ab\n"

    def test_defaults_to_stdout(self, capsys):
        set_output("NAME", "value")
        assert capsys.readouterr().out == "\n::set-output name=NAME::value\n"

    def test_write_failure_propagates(self):
        stream = io.StringIO()
        stream.close()
        with pytest.raises(ValueError):
            set_output("NAME", "value", stream)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.output_name == OUTPUT_NAME
        assert args.seed is None
        assert args.preview is False

    def test_options(self):
        args = parse_args(["--output-name", "MSG", "--seed", "7", "--preview"])
        assert args.output_name == "MSG"
        assert args.seed == 7
        assert args.preview is True


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:

    def test_emits_exactly_one_output_line(self, commit_env, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.count(MARKER) == 1
        assert out.startswith("\n" + MARKER)
        assert out.endswith("\n")
        assert len(out.strip("\n").split("\n")) == 1

    def test_end_to_end_message(self, commit_env, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "**Merged!** Jane: [`Fix thing`](<https://github.com/org/repo/commit/abc123>)%0A_" in out
        assert "Bob Smith" in out

    def test_emoji_from_default_bank(self, commit_env, capsys):
        main([])
        value = capsys.readouterr().out.strip("\n")[len(MARKER):]
        assert value.split(" ", 1)[0] in DEFAULT_EMOJIS

    def test_custom_emoji_and_template(self, commit_env, capsys):
        commit_env.setenv("EMOJIS", "🦄")
        commit_env.setenv("COAUTHOR_TEMPLATES", '["100% thanks to <names>"]')
        assert main([]) == 0
        out = capsys.readouterr().out
        assert f"{MARKER}🦄 **Merged!**" in out
        assert out.endswith("%0A_100%25 thanks to Bob Smith_\n")

    def test_malformed_templates_still_emit(self, commit_env, capsys):
        commit_env.setenv("COAUTHOR_TEMPLATES", "{not json")
        assert main([]) == 0
        captured = capsys.readouterr()
        assert captured.out.count(MARKER) == 1
        assert "COAUTHOR_TEMPLATES" in captured.err

    def test_seed_makes_output_reproducible(self, commit_env, capsys):
        main(["--seed", "3"])
        first = capsys.readouterr().out
        main(["--seed", "3"])
        second = capsys.readouterr().out
        assert first == second

    def test_custom_output_name(self, commit_env, capsys):
        assert main(["--output-name", "CHAT_MESSAGE"]) == 0
        assert "::set-output name=CHAT_MESSAGE::" in capsys.readouterr().out

    def test_preview_prints_plain_message(self, commit_env, capsys):
        assert main(["--preview"]) == 0
        out = capsys.readouterr().out
        assert "::set-output" not in out
        assert "(<https://github.com/org/repo/commit/abc123>)\n_" in out

    def test_missing_author_fails_before_output(self, commit_env, capsys):
        commit_env.delenv("COMMIT_AUTHOR")
        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Missing input." in captured.err
        assert "COMMIT_AUTHOR" in captured.err

    def test_empty_repo_fails_before_output(self, commit_env, capsys):
        commit_env.setenv("GITHUB_REPO", "")
        assert main([]) == 1
        assert MARKER not in capsys.readouterr().out
