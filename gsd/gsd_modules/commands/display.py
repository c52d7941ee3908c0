"""Document display -- frame resolved content in banner lines."""
from __future__ import annotations

from typing import TYPE_CHECKING

from gsd.gsd_modules import io_ops

if TYPE_CHECKING:
    from collections.abc import Sequence

    from returns.io import IOResult

    from gsd.gsd_modules.errors import CommandError

SEPARATOR = "═" * 67
FOLLOW_INSTRUCTIONS = (
    "Follow the instructions above to execute this GSD workflow."
)


def render_banner(
    name: str,
    args: Sequence[str],
    content: str,
) -> str:
    """Build the framed output for a resolved document.

    Content is emitted verbatim. The Arguments line appears
    only when args is non-empty.
    """
    lines = [SEPARATOR, f"GSD Command: {name}"]
    if args:
        lines.append(f"Arguments: {' '.join(args)}")
    lines.extend([SEPARATOR, "", content, "", SEPARATOR])
    lines.extend([FOLLOW_INSTRUCTIONS, SEPARATOR])
    return "\n".join(lines) + "\n"


def display_document(
    name: str,
    args: Sequence[str],
    content: str,
) -> IOResult[None, CommandError]:
    """Write the framed document to stdout via io_ops."""
    return io_ops.write_stdout(render_banner(name, args, content))
