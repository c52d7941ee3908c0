"""Command resolution -- map a command name to its document.

Looks the name up in the command table, then checks the
entry's candidate paths in fixed order (command definition
first, workflow second) and reads the first one that exists.
All filesystem access goes through io_ops.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from returns.io import IOFailure, IOResult, IOSuccess

from gsd.gsd_modules import io_ops
from gsd.gsd_modules.commands.registry import (
    get_command,
    list_commands,
)
from gsd.gsd_modules.errors import CommandError
from gsd.gsd_modules.types import ResolvedDocument

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from gsd.gsd_modules.commands.types import CommandSpec

logger = logging.getLogger(__name__)


def select_candidate(
    spec: CommandSpec,
    exists: Callable[[str], bool],
) -> str | None:
    """Return the first candidate path for which exists() is true.

    Pure function over the given predicate. Returns None when
    no candidate exists.
    """
    for relative in spec.candidate_paths():
        if exists(relative):
            return relative
    return None


def unknown_command_error(name: str) -> CommandError:
    """Build the UnknownCommand error for name."""
    available = sorted(cmd.name for cmd in list_commands())
    return CommandError(
        step_name="commands.resolve",
        error_type="UnknownCommand",
        message=f"Unknown command '{name}'",
        context={
            "command_name": name,
            "available": available,
        },
    )


def missing_document_error(spec: CommandSpec) -> CommandError:
    """Build the MissingDocument error listing every tried path."""
    tried = list(spec.candidate_paths())
    return CommandError(
        step_name="commands.resolve",
        error_type="MissingDocument",
        message=(
            "Neither command nor workflow file found"
            f" for '{spec.name}'"
        ),
        context={
            "command_name": spec.name,
            "tried_paths": tried,
        },
    )


def resolve_command(
    name: str,
    root: Path,
) -> IOResult[ResolvedDocument, CommandError]:
    """Resolve a command name to the contents of its document.

    Unknown names fail with UnknownCommand without touching the
    filesystem. Known names return the first existing candidate
    under root, or fail with MissingDocument naming both tried
    paths. Read errors on an existing candidate propagate as-is.
    """
    spec = get_command(name)
    if spec is None:
        logger.debug("Command %r not in table", name)
        return IOFailure(unknown_command_error(name))

    def _exists(relative: str) -> bool:
        found = io_ops.document_exists(root / relative)
        logger.debug(
            "Checked %s: %s", relative, "found" if found else "absent",
        )
        return found

    relative = select_candidate(spec, _exists)
    if relative is None:
        return IOFailure(missing_document_error(spec))

    path = root / relative

    def _wrap(content: str) -> IOResult[ResolvedDocument, CommandError]:
        doc = ResolvedDocument(
            command_name=name,
            relative_path=relative,
            path=path,
            content=content,
        )
        logger.info(
            "Resolved %s -> %s (%s)",
            doc.command_name, doc.relative_path, doc.path,
        )
        return IOSuccess(doc)

    return io_ops.read_file(path).bind(_wrap)
