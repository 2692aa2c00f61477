"""Operating system collaborator interfaces."""

from abc import ABC, abstractmethod


class IBootModeProbe(ABC):
    """Answers whether the machine is running in a degraded boot mode."""

    @abstractmethod
    def is_single_user(self) -> bool:
        """Return True in single-user mode; False when unknown."""
        raise NotImplementedError


class ILocalBackendLauncher(ABC):
    """Starts the local-only directory backend."""

    @abstractmethod
    def launch(self) -> bool:
        """Start the backend and wait for the launcher to finish.

        Returns:
            True when the launcher exited successfully, False on a spawn
            error, a non-zero exit or termination by a signal.
        """
        raise NotImplementedError
