from __future__ import annotations

"""
Exception handlers for the command line.

This module translates application exceptions into the diagnostic line
printed on stderr and the process exit status.
"""

import sys
from typing import Optional, TextIO

from structlog import get_logger

from dirpasswd.core.exceptions import DirpasswdError, UserNotFoundError

__all__ = [
    "format_error",
    "handle_error",
]

logger = get_logger(__name__)


def format_error(prog_name: str, exc: DirpasswdError) -> Optional[str]:
    """Build the diagnostic line for an error.

    Directory-reported errors render as
    ``<prog>: <description>  <reason>  <suggestion>``, leaving out the parts
    the directory did not supply. Errors without a message (input aborted)
    render nothing.

    Args:
        prog_name: Program name used as prefix.
        exc: The error to render.

    Returns:
        The line without trailing newline, or None when nothing is printed.
    """
    if isinstance(exc, UserNotFoundError):
        return f"{prog_name}: {exc.message}"
    if exc.diagnostic is not None:
        return f"{prog_name}: {exc.diagnostic}"
    if exc.message:
        return f"{prog_name}: {exc.message}"
    return None


def handle_error(
    prog_name: str,
    exc: DirpasswdError,
    stderr: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Report an error and return the exit status for it.

    Clean terminations (`InputCancelledError`) print their neutral message on
    stdout; everything else goes to stderr.

    Returns:
        int: 0 for a clean cancellation, 1 otherwise.
    """
    logger.debug("Command terminated", error_code=exc.code, exit_status=exc.exit_status)

    if exc.exit_status == 0:
        if exc.message:
            print(exc.message, file=stdout or sys.stdout)
        return 0

    line = format_error(prog_name, exc)
    if line is not None:
        print(line, file=stderr or sys.stderr)
    return exc.exit_status
