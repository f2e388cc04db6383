"""Native command execution and collector error types."""

import logging
import subprocess

logger = logging.getLogger(__name__)


class CollectorError(Exception):
    """Base class for failures while collecting a single fact."""


class CommandNotFoundError(CollectorError):
    """Raised when a native command is not installed."""


class CommandFailedError(CollectorError):
    """Raised when a native command exits with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stderr: str = ""):
        self.command = args
        self.returncode = returncode
        self.stderr = stderr
        message = f"{' '.join(args)} exited with status {returncode}"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message)


class ParseError(CollectorError):
    """Raised when command output does not have the expected shape."""


class UnsupportedPlatformError(CollectorError):
    """Raised when a fact has no implementation for the host platform."""


def run_command(args: list[str]) -> str:
    """Run a native command and return its standard output.

    No timeout is applied; a command that never exits blocks the caller.

    Args:
        args: Command and arguments (e.g., ["uname", "-r"])

    Returns:
        Captured standard output as text

    Raises:
        CommandNotFoundError: If the executable cannot be found
        CommandFailedError: If the command exits non-zero
    """
    logger.debug("Running: %s", " ".join(args))

    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise CommandNotFoundError(f"{args[0]} not found") from e
    except OSError as e:
        raise CollectorError(f"Cannot run {args[0]}: {e}") from e

    if result.returncode != 0:
        raise CommandFailedError(args, result.returncode, result.stderr or "")

    return result.stdout
