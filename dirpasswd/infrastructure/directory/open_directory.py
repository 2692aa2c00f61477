"""OpenDirectory adapter.

Implements the directory interfaces on macOS with the OpenDirectory
framework through PyObjC. Framework calls follow the Objective-C
convention of returning their result together with an ``NSError`` out
parameter; every non-nil error is translated into `DirectoryServiceError`
carrying the error's localized description, failure reason and recovery
suggestion.
"""

import importlib
from typing import Any, List, Optional

import structlog

from dirpasswd.core.exceptions import (
    Diagnostic,
    DirectoryConnectionError,
    DirectoryServiceError,
)
from dirpasswd.domain.interfaces.directory import (
    CredentialItems,
    IDirectoryNode,
    IDirectoryRecord,
    IDirectoryService,
    IDirectorySession,
)

logger = structlog.get_logger(__name__)

FRAMEWORK_MODULE = "OpenDirectory"


def diagnostic_from_nserror(error: Any) -> Diagnostic:
    """Convert an NSError into a `Diagnostic`."""
    description = error.localizedDescription() or "Directory service error."
    return Diagnostic(
        description=str(description),
        reason=_optional_text(error.localizedFailureReason()),
        suggestion=_optional_text(error.localizedRecoverySuggestion()),
    )


def _optional_text(value: Any) -> Optional[str]:
    return str(value) if value else None


class _FrameworkBound:
    """Shared error translation for objects bound to the framework module."""

    def __init__(self, framework: Any):
        self._od = framework

    def _raise_for(self, error: Any, fallback: str) -> None:
        if error is None:
            raise DirectoryServiceError(fallback, diagnostic=Diagnostic(fallback))
        diagnostic = diagnostic_from_nserror(error)
        code = "directory_service_error"
        if error.code() == self._od.kODErrorSessionDaemonNotRunning:
            code = DirectoryServiceError.DAEMON_NOT_RUNNING
        raise DirectoryServiceError(diagnostic.description, code=code, diagnostic=diagnostic)


class OpenDirectoryRecord(_FrameworkBound, IDirectoryRecord):
    """Wraps an ``ODRecord``."""

    def __init__(self, framework: Any, record: Any):
        super().__init__(framework)
        self._record = record

    def values(self, attribute: str) -> List[str]:
        values, error = self._record.valuesForAttribute_error_(attribute, None)
        if values is None:
            # A missing attribute is reported as an error too; both mean "no values".
            if error is not None:
                logger.debug("Record attribute unavailable", attribute=attribute, error_code=error.code())
            return []
        return [str(value) for value in values]

    def change_password(self, old_password: Optional[str], new_password: str) -> None:
        ok, error = self._record.changePassword_toPassword_error_(old_password, new_password, None)
        if not ok or error is not None:
            self._raise_for(error, "Unable to change password.")

    def set_credentials(self, items: CredentialItems) -> None:
        result = self._record.setNodeCredentialsWithRecordType_authenticationType_authenticationItems_continueItems_context_error_(
            self._od.kODRecordTypeUsers,
            self._od.kODAuthenticationTypeSetPassword,
            list(items),
            None,
            None,
            None,
        )
        ok, error = result[0], result[-1]
        if not ok or error is not None:
            self._raise_for(error, "Unable to set password.")

    def close(self) -> None:
        self._record = None


class OpenDirectoryNode(_FrameworkBound, IDirectoryNode):
    """Wraps an ``ODNode``."""

    def __init__(self, framework: Any, node: Any):
        super().__init__(framework)
        self._node = node

    def copy_user_record(self, username: str) -> Optional[IDirectoryRecord]:
        record, error = self._node.recordWithRecordType_name_attributes_error_(
            self._od.kODRecordTypeUsers, username, None, None
        )
        if record is None:
            if error is not None:
                self._raise_for(error, "Unable to look up record.")
            return None
        return OpenDirectoryRecord(self._od, record)

    def close(self) -> None:
        self._node = None


class OpenDirectorySession(_FrameworkBound, IDirectorySession):
    """Wraps an ``ODSession``."""

    def __init__(self, framework: Any, session: Any):
        super().__init__(framework)
        self._session = session

    def open_node(self, name: str) -> IDirectoryNode:
        node, error = self._od.ODNode.nodeWithSession_name_error_(self._session, name, None)
        if node is None:
            self._raise_for(error, f"Unable to open node {name}.")
        return OpenDirectoryNode(self._od, node)

    def open_search_node(self) -> IDirectoryNode:
        node, error = self._od.ODNode.nodeWithSession_type_error_(
            self._session, self._od.kODNodeTypeAuthentication, None
        )
        if node is None:
            self._raise_for(error, "Unable to open the authentication search node.")
        return OpenDirectoryNode(self._od, node)

    def close(self) -> None:
        self._session = None


class OpenDirectoryService(_FrameworkBound, IDirectoryService):
    """Directory service backed by the macOS OpenDirectory framework.

    Args:
        framework: The ``OpenDirectory`` module; imported on demand when not
            given, so the package stays importable on other platforms.

    Raises:
        DirectoryConnectionError: If the framework is not available.
    """

    def __init__(self, framework: Any = None):
        if framework is None:
            try:
                framework = importlib.import_module(FRAMEWORK_MODULE)
            except ImportError as e:
                logger.error("OpenDirectory framework unavailable", error=str(e))
                raise DirectoryConnectionError(
                    "Directory service framework is not available.",
                    diagnostic=Diagnostic(
                        "Directory service framework is not available.",
                        reason=str(e),
                        suggestion="Install pyobjc-framework-OpenDirectory on macOS.",
                    ),
                ) from e
        super().__init__(framework)

    def open_session(self, local_path: Optional[str] = None) -> IDirectorySession:
        options = None
        if local_path is not None:
            options = {self._od.kODSessionLocalPath: local_path}
        session, error = self._od.ODSession.sessionWithOptions_error_(options, None)
        if session is None:
            self._raise_for(error, "Unable to open a directory session.")
        logger.debug("OpenDirectory session opened", local_path=local_path)
        return OpenDirectorySession(self._od, session)
