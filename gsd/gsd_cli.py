#!/usr/bin/env python3
"""GSD command dispatcher for agent environments.

Maps GSD slash commands to CLI subcommands. Instead of
/gsd:plan-phase 1, an agent runs:

    python gsd/gsd_cli.py plan-phase 1

The matching command (or workflow) document is printed
between banner lines for the agent to follow.

Usage:
    python gsd/gsd_cli.py                  # Show command reference
    python gsd/gsd_cli.py help             # Same
    python gsd/gsd_cli.py <command> [args] # Print command document

Set GSD_CLI_LOG_LEVEL=DEBUG to trace which documents were checked.
"""
from __future__ import annotations

import sys
from pathlib import Path

# When run as a script, add the project root to sys.path so that
# absolute imports like "from gsd.gsd_modules..." resolve correctly.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import logging  # noqa: E402
import os  # noqa: E402
from typing import TYPE_CHECKING  # noqa: E402

import click  # noqa: E402
from returns.io import IOFailure  # noqa: E402
from returns.unsafe import unsafe_perform_io  # noqa: E402

from gsd.gsd_modules import io_ops  # noqa: E402
from gsd.gsd_modules.commands.display import display_document  # noqa: E402
from gsd.gsd_modules.commands.help import show_help  # noqa: E402
from gsd.gsd_modules.commands.resolve import resolve_command  # noqa: E402
from gsd.gsd_modules.types import Invocation  # noqa: E402

if TYPE_CHECKING:
    from gsd.gsd_modules.errors import CommandError

LOG_LEVEL_ENV = "GSD_CLI_LOG_LEVEL"
_LOGGER_NAME = "gsd"


def setup_logging() -> logging.Logger:
    """Configure the gsd logger to write to stderr.

    Level comes from GSD_CLI_LOG_LEVEL (default WARNING).
    Idempotent: repeated calls do not add handlers.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logger.setLevel(level)

    # Don't add handlers if already configured
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def format_error(
    error: CommandError,
    program: str,
) -> list[str]:
    """Return the stderr lines describing a failed invocation."""
    name = error.context.get("command_name", "")
    if error.error_type == "UnknownCommand":
        lines = [
            f"Error: Unknown command '{name}'",
            f"Run 'python {program} help' for available commands.",
        ]
        available = error.context.get("available", [])
        if isinstance(available, list) and available:
            lines.append(f"Available: {', '.join(available)}")
        return lines
    if error.error_type == "MissingDocument":
        tried = error.context.get("tried_paths", [])
        lines = [
            "Error: Neither command nor workflow file"
            f" found for '{name}'",
        ]
        if isinstance(tried, list):
            lines.extend(f"  Tried: {path}" for path in tried)
        return lines
    return [f"Error: {error.message}"]


def run(invocation: Invocation) -> int:
    """Execute one invocation and return the process exit code."""
    log = logging.getLogger(_LOGGER_NAME)
    program = io_ops.cli_script_path()
    root = io_ops.find_gsd_root()

    if invocation.is_help_request:
        result = show_help(program, root)
    else:
        command = str(invocation.command)
        log.debug(
            "Dispatching %s with args %s", command, invocation.args,
        )
        result = resolve_command(command, root).bind(
            lambda doc: display_document(
                doc.command_name, invocation.args, doc.content,
            ),
        )

    if isinstance(result, IOFailure):
        error = unsafe_perform_io(result.failure())
        log.debug("%s", error)
        for line in format_error(error, str(program)):
            io_ops.write_stderr(line)
        return 1
    return 0


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    },
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
def main(argv: tuple[str, ...]) -> None:
    """Print the GSD document for COMMAND, framed for an agent."""
    log = setup_logging()
    streams = io_ops.use_utf8_streams()
    if isinstance(streams, IOFailure):
        log.debug("%s", unsafe_perform_io(streams.failure()))
    code = run(Invocation.from_argv(argv))
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
