"""Tests for the command-line surface: commands, aliases, and exit codes."""

import os

import pytest
import typer
from typer.testing import CliRunner

from codemate.cli import USAGE_ERROR, USAGE_TEXT, app
from codemate.registry import SUPPORTED_FRAMEWORKS

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every command from an empty directory with no codemate settings."""
    for var in ("CODEMATE_OUTPUT_DIR", "CODEMATE_VERBOSE", "CODEMATE_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


# --- generate ---

def test_generate_react_creates_default_directory_and_file(tmp_path):
    result = runner.invoke(app, ["generate", "react", "UserCard"])
    target = tmp_path / "src" / "components" / "react" / "UserCard.tsx"
    assert result.exit_code == 0
    assert target.exists()
    assert "export const UserCard" in target.read_text(encoding="utf-8")
    assert "Created" in result.output


def test_generate_short_alias(tmp_path):
    result = runner.invoke(app, ["g", "angular", "user card"])
    assert result.exit_code == 0
    assert (tmp_path / "src" / "components" / "angular" / "user-card.component.ts").exists()


def test_generate_with_output_dir(tmp_path):
    result = runner.invoke(app, ["generate", "python", "UserCard", "models"])
    assert result.exit_code == 0
    assert (tmp_path / "models" / "user_card.py").exists()
    assert not (tmp_path / "src").exists()


def test_generate_uses_output_root_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("CODEMATE_OUTPUT_DIR", "generated")
    result = runner.invoke(app, ["generate", "java", "UserCard"])
    assert result.exit_code == 0
    assert (tmp_path / "generated" / "java" / "UserCard.java").exists()


def test_generate_twice_overwrites(tmp_path):
    first = runner.invoke(app, ["generate", "node", "UserCard"])
    target = tmp_path / "src" / "components" / "node" / "userCard.js"
    content = target.read_text(encoding="utf-8")
    second = runner.invoke(app, ["generate", "node", "UserCard"])
    assert first.exit_code == 0
    assert second.exit_code == 0
    assert target.read_text(encoding="utf-8") == content


def test_generate_unsupported_framework_exits_one(tmp_path):
    result = runner.invoke(app, ["generate", "bogus", "Foo"])
    assert result.exit_code == 1
    assert "Unsupported framework 'bogus'" in result.output
    assert list(tmp_path.iterdir()) == []


def test_generate_missing_name_exits_one(tmp_path):
    result = runner.invoke(app, ["generate", "react"])
    assert result.exit_code == 1
    assert "Missing argument" in result.output
    assert list(tmp_path.iterdir()) == []


def test_generate_empty_name_exits_one(tmp_path):
    result = runner.invoke(app, ["generate", "react", ""])
    assert result.exit_code == 1
    assert "must not be empty" in result.output
    assert "codemate help" in result.output


def test_generate_filesystem_failure_exits_one(tmp_path):
    (tmp_path / "blocker").write_text("", encoding="utf-8")
    result = runner.invoke(app, ["generate", "react", "UserCard", "blocker"])
    assert result.exit_code == 1
    assert "blocker" in result.output


def test_generate_dry_run_prints_without_writing(tmp_path):
    result = runner.invoke(app, ["generate", "react", "UserCard", "--dry-run"])
    assert result.exit_code == 0
    assert "Would write" in result.output
    assert "export default UserCard;" in result.output
    assert not (tmp_path / "src").exists()


def test_verbose_prints_debug_output():
    result = runner.invoke(app, ["--verbose", "generate", "react", "UserCard"])
    assert result.exit_code == 0
    assert "React template for 'UserCard'" in result.output


def test_log_file_mirrors_output(tmp_path, monkeypatch):
    monkeypatch.setenv("CODEMATE_LOG_FILE", str(tmp_path / "codemate.log"))
    result = runner.invoke(app, ["generate", "react", "UserCard"])
    assert result.exit_code == 0
    assert "Created" in (tmp_path / "codemate.log").read_text(encoding="utf-8")


# --- list ---

@pytest.mark.parametrize("command", ["list", "l"])
def test_list_prints_exactly_the_supported_ids(command):
    result = runner.invoke(app, [command])
    assert result.exit_code == 0
    assert result.output.split() == list(SUPPORTED_FRAMEWORKS)


def test_list_details_shows_filename_examples():
    result = runner.invoke(app, ["list", "--details"])
    assert result.exit_code == 0
    assert "user-card.component.ts" in result.output
    assert "UserCard.java" in result.output


# --- help and usage ---

@pytest.mark.parametrize("command", ["help", "h"])
def test_help_prints_usage(command):
    result = runner.invoke(app, [command])
    assert result.exit_code == 0
    assert "Usage: codemate <command>" in result.output
    assert "generate, g <framework> <name> [outputDir]" in result.output


def test_no_command_prints_usage():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Usage: codemate <command>" in result.output


def test_usage_text_names_every_framework():
    for framework in SUPPORTED_FRAMEWORKS:
        assert framework in USAGE_TEXT


def test_unknown_command_exits_one():
    result = runner.invoke(app, ["frobnicate"])
    assert result.exit_code == 1
    assert "No such command" in result.output


def test_unknown_option_exits_one():
    result = runner.invoke(app, ["generate", "react", "UserCard", "--frobnicate"])
    assert result.exit_code == 1


def test_unknown_list_option_exits_one():
    result = runner.invoke(app, ["list", "--nope"])
    assert result.exit_code == 1


def test_usage_error_class_is_the_one_the_group_raises():
    """The group must catch the UsageError of the click build typer runs on."""
    group = typer.main.get_command(app)
    with pytest.raises(USAGE_ERROR) as exc_info:
        group.make_context("codemate", ["--nope"])
    assert exc_info.value.exit_code == 1


def test_missing_argument_error_is_caught_by_group():
    group = typer.main.get_command(app)
    ctx = group.make_context("codemate", ["generate", "react"])
    with pytest.raises(USAGE_ERROR) as exc_info:
        group.invoke(ctx)
    assert exc_info.value.exit_code == 1


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip()


# --- interactive ---

@pytest.mark.parametrize("command", ["interactive", "i"])
def test_interactive_generates_until_exit(command, tmp_path):
    result = runner.invoke(app, [command], input="UserCard\nreact\nexit\n")
    assert result.exit_code == 0
    assert (tmp_path / "src" / "components" / "react" / "UserCard.tsx").exists()
    assert "Goodbye! Generated 1 file(s)." in result.output


def test_interactive_end_of_input_exits_zero():
    result = runner.invoke(app, ["interactive"], input="")
    assert result.exit_code == 0
    assert "Generated 0 file(s)" in result.output


def test_generate_keeps_accented_letters_in_filename(tmp_path):
    result = runner.invoke(app, ["generate", "react", "Über Card"])
    assert result.exit_code == 0
    assert os.listdir(tmp_path / "src" / "components" / "react") == ["ÜberCard.tsx"]
