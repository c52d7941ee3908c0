"""Help text, generated from the command table.

Every registered command is listed under its category, so
help and dispatch can never disagree about what exists.
"""
from __future__ import annotations

import os
from typing import TYPE_CHECKING

from gsd.gsd_modules import io_ops
from gsd.gsd_modules.commands.registry import commands_by_category

if TYPE_CHECKING:
    from pathlib import Path

    from returns.io import IOResult

    from gsd.gsd_modules.errors import CommandError

TITLE = "GSD CLI — Get Shit Done command dispatcher"
NAME_COLUMN_WIDTH = 28

EXAMPLES: tuple[str, ...] = (
    "new-project",
    "plan-phase 1",
    "execute-phase 1",
    "progress",
    "quick",
)


def _relative_to_cwd(path: Path, cwd: str) -> str:
    try:
        return os.path.relpath(path, cwd)
    except ValueError:
        # different drive on Windows
        return str(path)


def render_help(
    program: Path,
    root: Path,
    cwd: str | None = None,
) -> str:
    """Return the full help text.

    program: Absolute path of the CLI script, shown relative
    to cwd in usage lines. root: GSD root directory.
    """
    cwd = cwd if cwd is not None else os.getcwd()
    prog = _relative_to_cwd(program, cwd)
    tools = _relative_to_cwd(root / "bin" / "gsd-tools.cjs", cwd)

    lines = [
        "",
        TITLE,
        "",
        f"Usage: python {prog} <command> [arguments]",
    ]
    for category, specs in commands_by_category():
        lines.append("")
        lines.append(f"{category}:")
        for spec in specs:
            label = f"{spec.name} {spec.usage}".rstrip()
            lines.append(
                f"  {label.ljust(NAME_COLUMN_WIDTH)} {spec.description}",
            )

    lines.extend([
        "",
        "Low-Level Tools:",
        "  For advanced operations, use:",
        f"  node {tools} <command> [args]",
        "",
        "Examples:",
    ])
    lines.extend(f"  python {prog} {example}" for example in EXAMPLES)
    lines.extend([
        "",
        "For detailed documentation, see:",
        f"  {root}/references/",
        f"  {root}/workflows/",
        "",
    ])
    return "\n".join(lines) + "\n"


def show_help(
    program: Path,
    root: Path,
) -> IOResult[None, CommandError]:
    """Write help text to stdout via io_ops."""
    return io_ops.write_stdout(render_help(program, root))
