"""Shared type definitions for the GSD dispatcher."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from pathlib import Path

HELP_ALIASES: frozenset[str] = frozenset({"help", "--help", "-h"})


class Invocation(BaseModel):
    """A single CLI invocation: command name plus trailing arguments.

    Arguments are passed through verbatim. Nothing here knows
    what a given workflow expects.
    """

    model_config = ConfigDict(frozen=True)

    command: str | None = None
    args: tuple[str, ...] = ()

    @classmethod
    def from_argv(cls, argv: list[str] | tuple[str, ...]) -> Invocation:
        """Split raw argv tokens positionally: first is the command."""
        if not argv:
            return cls()
        return cls(command=argv[0], args=tuple(argv[1:]))

    @property
    def is_help_request(self) -> bool:
        """True when no command was given or it is a help alias."""
        return not self.command or self.command in HELP_ALIASES


@dataclass(frozen=True)
class ResolvedDocument:
    """A command resolved to an existing document on disk.

    relative_path: The candidate that matched, relative to the root.
    path: Absolute location that was read.
    content: Full file text, untouched.
    """

    command_name: str
    relative_path: str
    path: Path
    content: str
