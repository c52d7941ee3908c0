"""Tests for CommandSpec."""
from __future__ import annotations

import pytest

from gsd.gsd_modules.commands.types import CommandSpec


def _make() -> CommandSpec:
    return CommandSpec(
        name="quick",
        description="Ad-hoc task",
        category="Quick Tasks",
        command_path="commands/gsd/quick.md",
        workflow_path="workflows/quick.md",
    )


def test_command_spec_defaults_usage_empty() -> None:
    """Usage hint defaults to empty."""
    assert _make().usage == ""


def test_command_spec_candidate_order() -> None:
    """Command path is always checked before workflow path."""
    assert _make().candidate_paths() == (
        "commands/gsd/quick.md",
        "workflows/quick.md",
    )


def test_command_spec_is_frozen() -> None:
    """CommandSpec is immutable."""
    spec = _make()
    with pytest.raises(AttributeError):
        spec.command_path = "elsewhere.md"  # type: ignore[misc]
