"""Tests for custom_commands.manager."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from custom_commands.errors import (
    AliasNotFoundError,
    ConfigWriteError,
    EmptyCommandError,
    ExecutionError,
    InvalidAliasError,
)
from custom_commands.manager import ADD_PROMPT, EDIT_PROMPT, AliasManager
from custom_commands.store import save_table


@pytest.fixture
def path(tmp_path: Path) -> Path:
    return tmp_path / "commands.json"


@pytest.fixture
def prompter() -> MagicMock:
    return MagicMock()


@pytest.fixture
def executor() -> MagicMock:
    mock = MagicMock()
    mock.execute.return_value = 0
    return mock


@pytest.fixture
def manager(path, prompter, executor) -> AliasManager:
    return AliasManager(path, prompter=prompter, executor=executor)


def _stored(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


class TestAdd:
    def test_add_creates_file(self, manager, path):
        assert manager.add("greet", "echo hello") is False
        assert _stored(path) == {"greet": "echo hello"}

    def test_add_prompts_when_command_missing(self, manager, prompter, path):
        prompter.text.return_value = "ls -la"

        manager.add("ll")

        prompter.text.assert_called_once_with(ADD_PROMPT)
        assert _stored(path) == {"ll": "ls -la"}

    def test_overwrite_warns_exactly_once(self, manager, capsys):
        manager.add("x", "echo 1")
        first = capsys.readouterr().out

        assert manager.add("x", "echo 2") is True
        second = capsys.readouterr().out

        assert "Overwriting" not in first
        assert second.count('Overwriting existing command for alias "x"') == 1
        assert manager.load()["x"] == "echo 2"

    def test_overwrite_warning_precedes_prompt(self, manager, prompter, capsys):
        manager.add("x", "echo 1")
        capsys.readouterr()

        def _answer(message, **kwargs):
            assert "Overwriting" in capsys.readouterr().out
            return "echo 2"

        prompter.text.side_effect = _answer
        manager.add("x")

        assert manager.load()["x"] == "echo 2"

    def test_add_keeps_other_entries(self, manager, path):
        manager.add("a", "echo a")
        manager.add("b", "echo b")

        assert _stored(path) == {"a": "echo a", "b": "echo b"}

    @pytest.mark.parametrize(
        "alias", ["", "   ", "add", "list", "edit", "delete", "run", "-x", "--all"]
    )
    def test_add_rejects_unusable_alias(self, manager, path, alias):
        with pytest.raises(InvalidAliasError):
            manager.add(alias, "echo hello")
        assert not path.exists()

    def test_add_rejects_blank_command(self, manager, prompter, path):
        prompter.text.return_value = "  "

        with pytest.raises(EmptyCommandError):
            manager.add("greet")
        assert not path.exists()

    def test_write_failure_propagates(self, tmp_path, prompter, executor):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        manager = AliasManager(
            blocker / "commands.json", prompter=prompter, executor=executor
        )

        with pytest.raises(ConfigWriteError):
            manager.add("greet", "echo hello")


class TestEntries:
    def test_entries_follow_table_order(self, manager, path):
        save_table({"b": "echo b", "a": "echo a"}, path)

        assert manager.entries() == [("b", "echo b"), ("a", "echo a")]

    def test_entries_are_stable_without_mutation(self, manager, path):
        save_table({"greet": "echo hello"}, path)

        assert manager.entries() == manager.entries()

    def test_entries_empty_without_file(self, manager):
        assert manager.entries() == []


class TestEdit:
    def test_edit_missing_alias_does_not_write(self, manager, prompter, path):
        with pytest.raises(AliasNotFoundError) as excinfo:
            manager.edit("nope")

        assert str(excinfo.value) == 'Command "nope" not found.'
        prompter.text.assert_not_called()
        assert not path.exists()

    def test_edit_prompts_with_current_value_as_default(self, manager, prompter, path):
        save_table({"greet": "echo hello"}, path)
        prompter.text.return_value = "echo bye"

        assert manager.edit("greet") == "echo bye"

        prompter.text.assert_called_once_with(EDIT_PROMPT, default="echo hello")
        assert _stored(path) == {"greet": "echo bye"}

    def test_edit_with_inline_command_skips_prompt(self, manager, prompter, path):
        save_table({"greet": "echo hello"}, path)

        manager.edit("greet", "echo hi")

        prompter.text.assert_not_called()
        assert _stored(path) == {"greet": "echo hi"}

    def test_edit_rejects_blank_command(self, manager, path):
        save_table({"greet": "echo hello"}, path)

        with pytest.raises(EmptyCommandError):
            manager.edit("greet", "")
        assert _stored(path) == {"greet": "echo hello"}


class TestDelete:
    def test_delete_missing_alias_does_not_write(self, manager, prompter, path):
        with pytest.raises(AliasNotFoundError):
            manager.delete("nope")

        prompter.confirm.assert_not_called()
        assert not path.exists()

    def test_delete_declined_keeps_entry(self, manager, prompter, path):
        save_table({"x": "echo x"}, path)
        prompter.confirm.return_value = False

        assert manager.delete("x") is False

        prompter.confirm.assert_called_once_with(
            'Are you sure you want to delete the command "x"?', default=False
        )
        assert _stored(path) == {"x": "echo x"}

    def test_delete_confirmed_removes_entry(self, manager, prompter, path):
        save_table({"x": "echo x", "y": "echo y"}, path)
        prompter.confirm.return_value = True

        assert manager.delete("x") is True
        assert _stored(path) == {"y": "echo y"}

    def test_delete_assume_yes_skips_confirmation(self, manager, prompter, path):
        save_table({"x": "echo x"}, path)

        assert manager.delete("x", assume_yes=True) is True

        prompter.confirm.assert_not_called()
        assert _stored(path) == {}


class TestRun:
    def test_run_executes_stored_command(self, manager, executor, path, capsys):
        save_table({"greet": "echo hello"}, path)

        assert manager.run("greet") == 0

        executor.execute.assert_called_once_with("echo hello")
        assert "Executing command: echo hello" in capsys.readouterr().out

    def test_run_missing_alias(self, manager, executor):
        with pytest.raises(AliasNotFoundError):
            manager.run("nope")
        executor.execute.assert_not_called()

    def test_run_non_zero_exit_raises(self, manager, executor, path):
        save_table({"fail": "exit 3"}, path)
        executor.execute.return_value = 3

        with pytest.raises(ExecutionError) as excinfo:
            manager.run("fail")

        assert excinfo.value.returncode == 3
        assert excinfo.value.exit_code == 3
        assert "status 3" in str(excinfo.value)

    def test_run_signal_reports_generic_failure(self, manager, executor, path):
        save_table({"killed": "sleep 100"}, path)
        executor.execute.return_value = -9

        with pytest.raises(ExecutionError, match="signal 9") as excinfo:
            manager.run("killed")

        assert excinfo.value.exit_code == 1

    def test_resolve_returns_command(self, manager, path):
        save_table({"greet": "echo hello"}, path)

        assert manager.resolve("greet") == "echo hello"
