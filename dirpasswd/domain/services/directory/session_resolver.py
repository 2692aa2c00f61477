"""Session Resolver domain service.

Connects to the directory service and decides which node the record lookup
should use. When the directory daemon is not running because the machine
booted into single-user mode, the resolver starts the local-only backend
and retries against the local datastore. The boot mode is only probed
after the daemon has been found not running.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from dirpasswd.core.config.settings import Settings, settings as default_settings
from dirpasswd.core.exceptions import (
    Diagnostic,
    DirectoryConnectionError,
    DirectoryServiceError,
)
from dirpasswd.domain.interfaces.directory import IDirectoryService, IDirectorySession
from dirpasswd.domain.interfaces.system import IBootModeProbe, ILocalBackendLauncher
from dirpasswd.domain.value_objects.run_context import RunContext

logger = structlog.get_logger(__name__)


@dataclass
class ResolvedSession:
    """A connected session plus the location the lookup should use.

    The session is owned by this object; use it as a context manager so the
    session is closed as soon as the lookup that needed it is done.

    Attributes:
        session: Connected directory session.
        effective_location: Explicit location, the local default node after a
            single-user fallback, or None to use the search path.
        used_local_fallback: True when the local-only backend was started.
    """

    session: IDirectorySession
    effective_location: Optional[str] = None
    used_local_fallback: bool = False

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ResolvedSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class SessionResolver:
    """Opens the directory session for a run."""

    def __init__(
        self,
        directory: IDirectoryService,
        launcher: ILocalBackendLauncher,
        boot_probe: IBootModeProbe,
        context: RunContext,
        settings: Optional[Settings] = None,
    ):
        """Initialize the resolver with its collaborators.

        Args:
            directory: Directory service to connect to.
            launcher: Starts the local-only backend in single-user mode.
            boot_probe: Answers whether the machine is in single-user mode.
            context: Captured run context (correlation id).
            settings: Settings override; defaults to the application settings.
        """
        self._directory = directory
        self._launcher = launcher
        self._boot_probe = boot_probe
        self._context = context
        self._settings = settings or default_settings

    def resolve(self, explicit_location: Optional[str] = None) -> ResolvedSession:
        """Connect to the directory service.

        Args:
            explicit_location: Node given on the command line (``-l``), if any.

        Returns:
            ResolvedSession: The connected session and effective location.

        Raises:
            DirectoryConnectionError: If no directory backend can be reached.
        """
        request_logger = logger.bind(
            correlation_id=self._context.correlation_id,
            operation="resolve_session",
            explicit_location=explicit_location,
        )

        try:
            session = self._directory.open_session()
        except DirectoryServiceError as e:
            if not (e.daemon_not_running and self._boot_probe.is_single_user()):
                request_logger.warning(
                    "Directory session unavailable",
                    error_code=e.code,
                    error_message=str(e),
                )
                raise self._connection_error(e) from e

            request_logger.info("Directory daemon not running in single-user mode; starting local backend")
            return self._resolve_local(explicit_location, e, request_logger)

        request_logger.debug("Directory session opened")
        return ResolvedSession(session=session, effective_location=explicit_location)

    def _resolve_local(
        self,
        explicit_location: Optional[str],
        original_error: DirectoryServiceError,
        request_logger: structlog.BoundLogger,
    ) -> ResolvedSession:
        """Start the local-only backend and retry against the local datastore."""
        if not self._launcher.launch():
            request_logger.error("Local directory backend failed to start")
            raise self._connection_error(original_error) from original_error

        try:
            session = self._directory.open_session(local_path=self._settings.LOCAL_STORE_PATH)
        except DirectoryServiceError as e:
            request_logger.error(
                "Local directory session unavailable",
                error_code=e.code,
                error_message=str(e),
            )
            raise self._connection_error(e) from e

        effective_location = explicit_location or self._settings.LOCAL_DEFAULT_NODE
        request_logger.info(
            "Connected to local directory backend",
            local_path=self._settings.LOCAL_STORE_PATH,
            effective_location=effective_location,
        )
        return ResolvedSession(
            session=session,
            effective_location=effective_location,
            used_local_fallback=True,
        )

    @staticmethod
    def _connection_error(error: DirectoryServiceError) -> DirectoryConnectionError:
        diagnostic = error.diagnostic or Diagnostic(error.message or "Unable to connect to the directory service.")
        return DirectoryConnectionError.from_diagnostic(diagnostic)
