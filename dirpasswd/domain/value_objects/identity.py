"""Identity reference value object.

Names the account whose password changes and the identity that authorizes
the change. The two are the same unless an explicit authorizer is given.
"""

from dataclasses import dataclass
from typing import Optional

from structlog import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class IdentityReference:
    """Target username plus the name of the authorizing identity.

    Attributes:
        username: Account whose password is changed.
        auth_name: Identity whose credential authorizes the change.
    """

    username: str
    auth_name: str

    def __post_init__(self) -> None:
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.auth_name:
            raise ValueError("Authorization name cannot be empty")

    @classmethod
    def create(cls, username: str, auth_name: Optional[str] = None) -> "IdentityReference":
        """Build an identity, defaulting the authorizer to the target user.

        Args:
            username: Account whose password is changed.
            auth_name: Explicit authorizer (``-u``), or None.

        Returns:
            IdentityReference: The resolved identity.

        Raises:
            ValueError: If the username (or an explicit authorizer) is empty.
        """
        identity = cls(username=username, auth_name=auth_name if auth_name is not None else username)
        logger.debug(
            "Identity resolved",
            username=identity.mask_for_logging(),
            self_change=identity.is_self_change,
        )
        return identity

    @property
    def is_self_change(self) -> bool:
        """True when the user authorizes a change of their own password."""
        return self.auth_name == self.username

    def mask_for_logging(self) -> str:
        """Return masked username for safe logging.

        Returns:
            str: Masked username (first 2 chars + asterisks)
        """
        if len(self.username) <= 2:
            return "*" * len(self.username)
        return self.username[:2] + "*" * (len(self.username) - 2)
