from __future__ import annotations

"""Centralized, structured exception hierarchy for dirpasswd.

Every error raised by the application derives from `DirpasswdError` and
carries a machine-readable `code` alongside a human-readable `message`.
Errors that originate in the directory service also carry a `Diagnostic`
holding the description, failure reason and recovery suggestion reported
by the service, which the command line renders verbatim.

The hierarchy maps onto the command line exit status:
- `InputCancelledError` is the only clean termination (exit 0).
- Everything else terminates the run with exit status 1.
"""

from dataclasses import dataclass
from typing import Final, Optional

__all__: Final = [
    "Diagnostic",
    "DirpasswdError",
    "DirectoryServiceError",
    "DirectoryConnectionError",
    "UserNotFoundError",
    "RecordLookupError",
    "AuthenticationError",
    "InputCancelledError",
    "InputAbortedError",
    "PasswordConfirmationError",
]


@dataclass(frozen=True)
class Diagnostic:
    """Diagnostic text reported by the directory service for a failure.

    Attributes:
        description: Short description of the failure.
        reason: Why the failure happened, when the service knows.
        suggestion: What the user can do about it, when the service knows.
    """

    description: str
    reason: Optional[str] = None
    suggestion: Optional[str] = None

    def parts(self) -> list[str]:
        """Return the non-empty parts in display order."""
        return [part for part in (self.description, self.reason, self.suggestion) if part]

    def __str__(self) -> str:
        return "  ".join(self.parts())


class DirpasswdError(Exception):
    """Base exception class for all custom errors in dirpasswd.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
        diagnostic (Diagnostic | None): Directory-reported diagnostic, if any.
    """

    message: str
    code: str = "generic_error"
    exit_status: int = 1

    def __init__(
        self,
        message: str,
        code: str = "generic_error",
        diagnostic: Optional[Diagnostic] = None,
    ):
        self.message = message
        self.code = code
        self.diagnostic = diagnostic
        Exception.__init__(self, self.message)

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic, **kwargs) -> "DirpasswdError":
        """Build the error using the diagnostic's description as message."""
        return cls(diagnostic.description, diagnostic=diagnostic, **kwargs)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Collaborator errors
# ---------------------------------------------------------------------------


class DirectoryServiceError(DirpasswdError):
    """Raised by directory collaborators when an operation fails.

    Adapters translate their framework's native error into this exception;
    the domain services translate it into one of the errors below. The
    `daemon_not_running` code marks a session open that failed because the
    directory daemon is not running.
    """

    DAEMON_NOT_RUNNING: Final = "daemon_not_running"

    def __init__(
        self,
        message: str,
        code: str = "directory_service_error",
        diagnostic: Optional[Diagnostic] = None,
    ):
        super().__init__(message, code, diagnostic)

    @property
    def daemon_not_running(self) -> bool:
        return self.code == self.DAEMON_NOT_RUNNING


# ---------------------------------------------------------------------------
# Directory errors (exit status 1)
# ---------------------------------------------------------------------------


class DirectoryConnectionError(DirpasswdError):
    """Raised when no directory service backend can be reached.

    This includes a failed attempt to start the local-only backend in
    single-user mode and a failed session retry against it.
    """

    def __init__(
        self,
        message: str,
        code: str = "connection_error",
        diagnostic: Optional[Diagnostic] = None,
    ):
        super().__init__(message, code, diagnostic)


class UserNotFoundError(DirpasswdError):
    """Raised when the directory holds no record for the username.

    The lookup itself succeeded; there is no diagnostic attached.
    """

    def __init__(self, username: str, code: str = "user_not_found"):
        self.username = username
        super().__init__(f"Unknown user name '{username}'.", code)


class RecordLookupError(DirpasswdError):
    """Raised when the directory reports an error while locating a record."""

    def __init__(
        self,
        message: str,
        code: str = "lookup_error",
        diagnostic: Optional[Diagnostic] = None,
    ):
        super().__init__(message, code, diagnostic)


class AuthenticationError(DirpasswdError):
    """Raised when the directory rejects the password mutation.

    Covers wrong old passwords, authorizer failures and password policy
    rejections alike; the diagnostic tells them apart for the user.
    """

    def __init__(
        self,
        message: str,
        code: str = "authentication_error",
        diagnostic: Optional[Diagnostic] = None,
    ):
        super().__init__(message, code, diagnostic)


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------


class InputCancelledError(DirpasswdError):
    """Raised when the user declines to enter a new password.

    This is a clean termination: no mutation was attempted and the command
    exits with status 0.
    """

    exit_status = 0

    def __init__(self, message: str = "Password unchanged.", code: str = "input_cancelled"):
        super().__init__(message, code)


class InputAbortedError(DirpasswdError):
    """Raised when input ends while a password was still required.

    End of input at the old password or retype prompt lands here. Nothing is
    printed for it and the command exits with status 1.
    """

    def __init__(self, message: str = "", code: str = "input_aborted"):
        super().__init__(message, code)


class PasswordConfirmationError(DirpasswdError):
    """Raised when the configured number of confirmation attempts runs out."""

    def __init__(
        self,
        message: str = "Too many mismatched passwords; password unchanged.",
        code: str = "password_confirmation_error",
    ):
        super().__init__(message, code)
