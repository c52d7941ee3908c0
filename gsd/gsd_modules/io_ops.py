"""I/O boundary module -- ALL external I/O goes through here.

This is the single mock point for the test suite. The
resolver and printers never touch the filesystem or the
standard streams directly; they call io_ops functions.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path as _Path
from typing import TYPE_CHECKING

from returns.io import IOFailure, IOResult, IOSuccess

from gsd.gsd_modules.errors import CommandError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# gsd/gsd_modules/io_ops.py -> gsd/ is the program directory
_PROGRAM_DIR = _Path(__file__).resolve().parent.parent


def find_gsd_root() -> _Path:
    """Return the GSD root directory.

    The root is the directory one level above the program
    directory (the one holding gsd_cli.py). Document trees
    commands/ and workflows/ live directly beneath it.
    """
    return _PROGRAM_DIR.parent


def cli_script_path() -> _Path:
    """Return the absolute path of the CLI entry script."""
    return _PROGRAM_DIR / "gsd_cli.py"


def document_exists(path: Path) -> bool:
    """Return True when path exists. Never raises."""
    try:
        return path.exists()
    except OSError as exc:
        logger.debug("Existence check failed for %s: %s", path, exc)
        return False


def read_file(path: Path) -> IOResult[str, CommandError]:
    """Read file contents as UTF-8. Returns IOResult, never raises.

    Bytes are decoded without newline translation, so CRLF
    documents come back exactly as stored.
    """
    try:
        return IOSuccess(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return IOFailure(
            CommandError(
                step_name="io_ops.read_file",
                error_type="FileNotFoundError",
                message=f"File not found: {path}",
                context={"path": str(path)},
            ),
        )
    except PermissionError:
        return IOFailure(
            CommandError(
                step_name="io_ops.read_file",
                error_type="PermissionError",
                message=f"Permission denied: {path}",
                context={"path": str(path)},
            ),
        )
    except UnicodeDecodeError as exc:
        return IOFailure(
            CommandError(
                step_name="io_ops.read_file",
                error_type="UnicodeDecodeError",
                message=f"Not valid UTF-8 text: {path} ({exc.reason})",
                context={"path": str(path)},
            ),
        )
    except OSError as exc:
        return IOFailure(
            CommandError(
                step_name="io_ops.read_file",
                error_type=type(exc).__name__,
                message=f"OS error reading {path}: {exc}",
                context={"path": str(path)},
            ),
        )


def write_stdout(
    text: str,
) -> IOResult[None, CommandError]:
    """Write text to stdout as-is. Returns IOResult, never raises."""
    try:
        sys.stdout.write(text)
        sys.stdout.flush()
    except UnicodeEncodeError as exc:
        return IOFailure(
            CommandError(
                step_name="io_ops.write_stdout",
                error_type="UnicodeEncodeError",
                message=(
                    f"stdout encoding {exc.encoding!r} cannot"
                    f" represent the output: {exc.reason}"
                ),
                context={"encoding": exc.encoding},
            ),
        )
    except OSError as exc:
        return IOFailure(
            CommandError(
                step_name="io_ops.write_stdout",
                error_type="StdoutWriteError",
                message=f"Failed to write to stdout: {exc}",
                context={},
            ),
        )
    return IOSuccess(None)


def write_stderr(
    message: str,
) -> IOResult[None, CommandError]:
    """Write message to stderr, adding a trailing newline.

    Returns IOSuccess(None) or IOFailure on error.
    """
    try:
        sys.stderr.write(message + "\n")
    except (OSError, UnicodeEncodeError) as exc:
        return IOFailure(
            CommandError(
                step_name="io_ops.write_stderr",
                error_type="StderrWriteError",
                message=f"Failed to write to stderr: {exc}",
                context={"original_message": message},
            ),
        )
    return IOSuccess(None)


def use_utf8_streams() -> IOResult[None, CommandError]:
    """Switch stdout and stderr to UTF-8 without newline translation.

    Documents and banners contain non-ASCII characters and may
    use CRLF line endings; both must reach the reader unchanged
    whatever the locale or console code page. Streams that
    cannot be reconfigured are reported as an IOFailure and
    left as they are.
    """
    for name in ("stdout", "stderr"):
        stream = getattr(sys, name)
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is None:
            return IOFailure(
                CommandError(
                    step_name="io_ops.use_utf8_streams",
                    error_type="StreamReconfigureError",
                    message=f"{name} cannot be reconfigured",
                    context={"stream": name},
                ),
            )
        try:
            reconfigure(encoding="utf-8", newline="")
        except (OSError, ValueError) as exc:
            return IOFailure(
                CommandError(
                    step_name="io_ops.use_utf8_streams",
                    error_type=type(exc).__name__,
                    message=f"Failed to reconfigure {name}: {exc}",
                    context={"stream": name},
                ),
            )
    return IOSuccess(None)
