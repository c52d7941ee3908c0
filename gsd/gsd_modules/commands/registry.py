"""Command table and lookup functions."""
from __future__ import annotations

from types import MappingProxyType

from gsd.gsd_modules.commands.types import CommandSpec

COMMAND_DIR = "commands/gsd"
WORKFLOW_DIR = "workflows"

# Help sections, in display order
CATEGORIES: tuple[str, ...] = (
    "Project Initialization",
    "Phase Workflow",
    "Milestone Management",
    "Phase Management",
    "Quick Tasks",
    "Navigation & Info",
    "Workflow Management",
    "Utilities",
)


def _spec(
    name: str,
    category: str,
    description: str,
    usage: str = "",
) -> CommandSpec:
    return CommandSpec(
        name=name,
        description=description,
        category=category,
        command_path=f"{COMMAND_DIR}/{name}.md",
        workflow_path=f"{WORKFLOW_DIR}/{name}.md",
        usage=usage,
    )


_SPECS: tuple[CommandSpec, ...] = (
    _spec(
        "new-project",
        "Project Initialization",
        (
            "Initialize project: questions → research"
            " → requirements → roadmap"
        ),
        usage="[--auto]",
    ),
    _spec(
        "map-codebase",
        "Project Initialization",
        "Analyze existing codebase before new-project",
    ),
    _spec(
        "discuss-phase",
        "Phase Workflow",
        "Capture implementation decisions for phase N",
        usage="<N>",
    ),
    _spec(
        "research-phase",
        "Phase Workflow",
        "Research phase N before planning",
        usage="<N>",
    ),
    _spec(
        "plan-phase",
        "Phase Workflow",
        "Research + plan + verify for phase N",
        usage="<N>",
    ),
    _spec(
        "execute-phase",
        "Phase Workflow",
        "Execute plans in parallel waves",
        usage="<N>",
    ),
    _spec(
        "verify-work",
        "Phase Workflow",
        "Manual user acceptance testing",
        usage="<N>",
    ),
    _spec(
        "audit-milestone",
        "Milestone Management",
        "Verify milestone achieved its goals",
    ),
    _spec(
        "complete-milestone",
        "Milestone Management",
        "Archive milestone, tag release",
    ),
    _spec(
        "new-milestone",
        "Milestone Management",
        "Start next version",
    ),
    _spec(
        "plan-milestone-gaps",
        "Milestone Management",
        "Plan work to complete current milestone",
    ),
    _spec(
        "add-phase",
        "Phase Management",
        "Add new phase to roadmap",
        usage="<description>",
    ),
    _spec(
        "insert-phase",
        "Phase Management",
        "Insert decimal phase after existing",
        usage="<after> <desc>",
    ),
    _spec(
        "remove-phase",
        "Phase Management",
        "Remove phase and renumber",
        usage="<N> [--force]",
    ),
    _spec(
        "list-phase-assumptions",
        "Phase Management",
        "List all phase assumptions",
    ),
    _spec(
        "quick",
        "Quick Tasks",
        "Ad-hoc task with GSD guarantees",
    ),
    _spec(
        "progress",
        "Navigation & Info",
        "Show project progress and current state",
    ),
    _spec(
        "help",
        "Navigation & Info",
        "Show GSD command reference",
    ),
    _spec(
        "health",
        "Navigation & Info",
        "Check .planning/ directory health",
    ),
    _spec(
        "pause-work",
        "Workflow Management",
        "Pause work, capture state",
    ),
    _spec(
        "resume-work",
        "Workflow Management",
        "Resume from pause point",
    ),
    _spec(
        "add-todo",
        "Utilities",
        "Capture idea for later",
        usage="<description>",
    ),
    _spec(
        "check-todos",
        "Utilities",
        "List pending todos",
        usage="[area]",
    ),
    _spec(
        "cleanup",
        "Utilities",
        "Archive completed work",
    ),
    _spec(
        "debug",
        "Utilities",
        "Debug workflow issues",
    ),
    _spec(
        "reapply-patches",
        "Utilities",
        "Merge local modifications after update",
    ),
    _spec(
        "settings",
        "Utilities",
        "Configure GSD preferences",
    ),
    _spec(
        "set-profile",
        "Utilities",
        "Set agent model profile",
        usage="<name>",
    ),
    _spec(
        "update",
        "Utilities",
        "Update GSD to latest version",
    ),
    _spec(
        "join-discord",
        "Utilities",
        "Get Discord invite link",
    ),
)

COMMAND_REGISTRY: MappingProxyType[str, CommandSpec] = (
    MappingProxyType({spec.name: spec for spec in _SPECS})
)


def get_command(name: str) -> CommandSpec | None:
    """Look up a command by exact name. Returns None if not found."""
    return COMMAND_REGISTRY.get(name)


def list_commands() -> list[CommandSpec]:
    """Return all registered commands in table order."""
    return list(COMMAND_REGISTRY.values())


def commands_by_category() -> list[tuple[str, list[CommandSpec]]]:
    """Group registered commands under their help category.

    Categories come out in CATEGORIES order; commands keep
    table order within a category. Empty categories are dropped.
    """
    grouped: list[tuple[str, list[CommandSpec]]] = []
    for category in CATEGORIES:
        specs = [
            spec
            for spec in COMMAND_REGISTRY.values()
            if spec.category == category
        ]
        if specs:
            grouped.append((category, specs))
    return grouped
