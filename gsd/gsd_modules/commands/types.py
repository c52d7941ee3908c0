"""Command type definitions for the GSD command table."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for a registered command.

    Each command names two candidate documents relative to the
    GSD root: the command definition (tried first) and the
    workflow document (fallback). Description, category and
    usage feed the generated help text.
    """

    name: str
    description: str
    category: str
    command_path: str
    workflow_path: str
    usage: str = ""

    def candidate_paths(self) -> tuple[str, str]:
        """Return candidate documents in lookup order."""
        return (self.command_path, self.workflow_path)
