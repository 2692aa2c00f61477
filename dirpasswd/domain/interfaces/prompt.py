"""Secret input interface."""

from abc import ABC, abstractmethod
from typing import Optional

from dirpasswd.domain.value_objects.secret import Secret


class ISecretPrompt(ABC):
    """Supplies secrets typed by the user.

    Implementations must not echo the input.
    """

    @abstractmethod
    def prompt(self, label: str) -> Optional[Secret]:
        """Ask for a secret.

        Args:
            label: Prompt text, e.g. "Old password:".

        Returns:
            The secret (possibly empty), or None at end of input.
        """
        raise NotImplementedError
