"""Commands package -- table, resolution and printing.

Public API for the dispatcher: command types, the command
table, resolve_command, display_document and show_help.
"""
from __future__ import annotations

from gsd.gsd_modules.commands.display import (
    display_document,
    render_banner,
)
from gsd.gsd_modules.commands.help import (
    render_help,
    show_help,
)
from gsd.gsd_modules.commands.registry import (
    COMMAND_REGISTRY,
    commands_by_category,
    get_command,
    list_commands,
)
from gsd.gsd_modules.commands.resolve import (
    resolve_command,
    select_candidate,
)
from gsd.gsd_modules.commands.types import CommandSpec

__all__ = [
    "COMMAND_REGISTRY",
    "CommandSpec",
    "commands_by_category",
    "display_document",
    "get_command",
    "list_commands",
    "render_banner",
    "render_help",
    "resolve_command",
    "select_candidate",
    "show_help",
]
