"""Directory service interfaces.

These abstract base classes are the "ports" through which the domain talks
to a directory service. The concrete adapters live in the infrastructure
layer (for instance the OpenDirectory adapter on macOS); tests supply fakes.

Every handle is a context manager that closes itself on exit, so callers
can release sessions, nodes and records deterministically on every path.
All operations report failures by raising `DirectoryServiceError`.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

# Attribute holding the path of the node a record actually lives in.
META_NODE_LOCATION = "dsAttrTypeStandard:AppleMetaNodeLocation"

# Items for the set-credentials call: (username, new password, auth name, auth password).
CredentialItems = Tuple[str, str, str, str]


class _Closeable(ABC):
    """Shared context manager behaviour for directory handles."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resource. Must be idempotent."""
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class IDirectoryRecord(_Closeable):
    """A user record copied out of a directory node."""

    @abstractmethod
    def values(self, attribute: str) -> List[str]:
        """Read all values of an attribute.

        Args:
            attribute: Attribute type name, e.g. `META_NODE_LOCATION`.

        Returns:
            The values, empty when the attribute is not present.
        """
        raise NotImplementedError

    @abstractmethod
    def change_password(self, old_password: Optional[str], new_password: str) -> None:
        """Change the record's password, re-authenticating with the old one.

        Args:
            old_password: Current password, or None when the caller is trusted.
            new_password: Password to set.

        Raises:
            DirectoryServiceError: If the directory rejects the change.
        """
        raise NotImplementedError

    @abstractmethod
    def set_credentials(self, items: CredentialItems) -> None:
        """Set the record's password on behalf of an authorizer.

        Args:
            items: (username, new password, auth name, auth password).

        Raises:
            DirectoryServiceError: If the directory rejects the change.
        """
        raise NotImplementedError


class IDirectoryNode(_Closeable):
    """A directory node (or search-path node) that can be searched."""

    @abstractmethod
    def copy_user_record(self, username: str) -> Optional[IDirectoryRecord]:
        """Copy the user record with the given name.

        Returns:
            The record, or None when the node holds no such user.

        Raises:
            DirectoryServiceError: If the search itself fails.
        """
        raise NotImplementedError


class IDirectorySession(_Closeable):
    """A connected session with the directory service."""

    @abstractmethod
    def open_node(self, name: str) -> IDirectoryNode:
        """Open the node at an explicit location, e.g. ``/Local/Default``."""
        raise NotImplementedError

    @abstractmethod
    def open_search_node(self) -> IDirectoryNode:
        """Open the authentication search-path node.

        The search-path node fans out across the configured nodes in
        priority order; that behaviour belongs to the service.
        """
        raise NotImplementedError


class IDirectoryService(ABC):
    """Entry point of a directory service."""

    @abstractmethod
    def open_session(self, local_path: Optional[str] = None) -> IDirectorySession:
        """Open a session.

        Args:
            local_path: When given, connect to the local-only backend serving
                the datastore at this path.

        Raises:
            DirectoryServiceError: With code ``daemon_not_running`` when the
                directory daemon is not running, or another code otherwise.
        """
        raise NotImplementedError
