"""Authentication mode for a password change."""

from enum import Enum
from typing import Optional


class AuthMode(str, Enum):
    """How the new password is applied to the record.

    SELF_CHANGE: the record's own change-password operation, given the old
        password (or none, for a privileged caller on the trusted local store).
    ELEVATED: the set-credentials operation, authorized by the auth name and
        its password.
    """

    SELF_CHANGE = "self_change"
    ELEVATED = "elevated"

    @classmethod
    def decide(
        cls, is_privileged: bool, location_path: Optional[str], trusted_prefix: str
    ) -> "AuthMode":
        """Pick the mode from privilege level and record location.

        A credential is needed unless the caller is privileged and the record
        lives under the trusted local prefix. An unknown location is never
        trusted.
        """
        needs_auth = (
            not is_privileged
            or not location_path
            or not location_path.startswith(trusted_prefix)
        )
        return cls.ELEVATED if needs_auth else cls.SELF_CHANGE

    @property
    def needs_auth(self) -> bool:
        return self is AuthMode.ELEVATED

    @property
    def change_method(self) -> str:
        """Audit label used in domain events."""
        return "self_service" if self is AuthMode.SELF_CHANGE else "elevated"
