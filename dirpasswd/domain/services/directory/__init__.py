"""Directory password change services."""

from .credential_store import CredentialStoreClient
from .password_change_orchestrator import PasswordChangeOrchestrator, PasswordChangeResult
from .session_resolver import ResolvedSession, SessionResolver

__all__ = [
    "CredentialStoreClient",
    "PasswordChangeOrchestrator",
    "PasswordChangeResult",
    "ResolvedSession",
    "SessionResolver",
]
