"""Tests for document display."""
from __future__ import annotations

from typing import TYPE_CHECKING

from returns.io import IOSuccess

from gsd.gsd_modules.commands.display import (
    FOLLOW_INSTRUCTIONS,
    SEPARATOR,
    display_document,
    render_banner,
)

if TYPE_CHECKING:
    import pytest
    from pytest_mock import MockerFixture


def test_separator_is_67_double_bars() -> None:
    """Separator is a fixed-width run of box-drawing characters."""
    assert len(SEPARATOR) == 67
    assert set(SEPARATOR) == {"═"}


def test_render_banner_without_args() -> None:
    """No Arguments line when args are empty."""
    text = render_banner("progress", (), "Show status.")
    assert text.splitlines() == [
        SEPARATOR,
        "GSD Command: progress",
        SEPARATOR,
        "",
        "Show status.",
        "",
        SEPARATOR,
        FOLLOW_INSTRUCTIONS,
        SEPARATOR,
    ]
    assert text.endswith(SEPARATOR + "\n")


def test_render_banner_with_args() -> None:
    """Arguments are space-joined on their own line."""
    text = render_banner(
        "insert-phase", ("3", "Fix", "login bug"), "body",
    )
    lines = text.splitlines()
    assert lines[1] == "GSD Command: insert-phase"
    assert lines[2] == "Arguments: 3 Fix login bug"
    assert lines[3] == SEPARATOR


def test_render_banner_content_verbatim() -> None:
    """Content is embedded untouched between blank lines."""
    content = "# Title\n\n  - item ═\n\ttabbed\n\n"
    text = render_banner("quick", (), content)
    head = f"{SEPARATOR}\nGSD Command: quick\n{SEPARATOR}\n\n"
    tail = f"\n\n{SEPARATOR}\n{FOLLOW_INSTRUCTIONS}\n{SEPARATOR}\n"
    assert text == head + content + tail


def test_follow_instructions_text() -> None:
    """Closing instruction line is fixed."""
    assert FOLLOW_INSTRUCTIONS == (
        "Follow the instructions above to execute this GSD workflow."
    )


def test_display_document_writes_via_io_ops(
    mocker: MockerFixture,
) -> None:
    """display_document hands the rendered banner to io_ops."""
    mock_write = mocker.patch(
        "gsd.gsd_modules.commands.display.io_ops.write_stdout",
        return_value=IOSuccess(None),
    )
    result = display_document("execute-phase", ("3",), "Run wave N.")
    assert isinstance(result, IOSuccess)
    mock_write.assert_called_once_with(
        render_banner("execute-phase", ("3",), "Run wave N."),
    )


def test_display_document_real_stdout(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """display_document prints the banner to stdout."""
    display_document("progress", (), "Show status.")
    out = capsys.readouterr().out
    assert "GSD Command: progress" in out
    assert "\nShow status.\n" in out
