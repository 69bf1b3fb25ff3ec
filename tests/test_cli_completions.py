from __future__ import annotations

from custom_commands.cli.completions import alias_name_completion
from custom_commands.store import save_table


def test_alias_completion_filters_by_prefix(command_file):
    save_table({"greet": "echo hello", "grep-todo": "grep -rn TODO", "ll": "ls -la"}, command_file)

    items = alias_name_completion(None, None, "gr")

    assert [item.value for item in items] == ["greet", "grep-todo"]
    assert items[0].help == "echo hello"


def test_alias_completion_without_file():
    assert alias_name_completion(None, None, "") == []


def test_alias_completion_is_case_insensitive(command_file):
    save_table({"Deploy": "make deploy"}, command_file)

    assert [item.value for item in alias_name_completion(None, None, "dep")] == ["Deploy"]
