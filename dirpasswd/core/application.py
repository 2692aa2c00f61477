"""Application factory for wiring the password change service.

Builds a `PasswordChangeOrchestrator` with the production collaborators,
allowing any of them to be replaced (tests inject fakes here).
"""

from typing import Optional, TextIO

from dirpasswd.core.config.settings import Settings, settings as default_settings
from dirpasswd.domain.interfaces.directory import IDirectoryService
from dirpasswd.domain.interfaces.prompt import ISecretPrompt
from dirpasswd.domain.interfaces.services import IEventPublisher
from dirpasswd.domain.interfaces.system import IBootModeProbe, ILocalBackendLauncher
from dirpasswd.domain.services.directory.credential_store import CredentialStoreClient
from dirpasswd.domain.services.directory.password_change_orchestrator import (
    PasswordChangeOrchestrator,
)
from dirpasswd.domain.services.directory.session_resolver import SessionResolver
from dirpasswd.domain.value_objects.run_context import RunContext
from dirpasswd.infrastructure.directory.open_directory import OpenDirectoryService
from dirpasswd.infrastructure.services.event_publisher import InMemoryEventPublisher
from dirpasswd.infrastructure.system.backend_launcher import LaunchctlBackendLauncher
from dirpasswd.infrastructure.system.boot_mode import SysctlBootModeProbe
from dirpasswd.infrastructure.system.prompt import TerminalSecretPrompt


def create_orchestrator(
    context: RunContext,
    settings: Optional[Settings] = None,
    directory: Optional[IDirectoryService] = None,
    launcher: Optional[ILocalBackendLauncher] = None,
    boot_probe: Optional[IBootModeProbe] = None,
    prompt: Optional[ISecretPrompt] = None,
    event_publisher: Optional[IEventPublisher] = None,
    output: Optional[TextIO] = None,
) -> PasswordChangeOrchestrator:
    """Create the orchestrator and its collaborators.

    Args:
        context: Captured run context.
        settings: Settings override; defaults to the application settings.
        directory: Directory service; defaults to OpenDirectory.
        launcher: Local backend launcher; defaults to launchctl.
        boot_probe: Single-user mode probe; defaults to sysctl.
        prompt: Secret prompt; defaults to the terminal.
        event_publisher: Audit event sink; defaults to the in-memory publisher.
        output: Stream for user-facing messages; defaults to stdout.

    Returns:
        PasswordChangeOrchestrator: Ready to run.

    Raises:
        DirectoryConnectionError: If the default directory framework is unavailable.
    """
    settings = settings or default_settings
    resolver = SessionResolver(
        directory=directory or OpenDirectoryService(),
        launcher=launcher or LaunchctlBackendLauncher(settings),
        boot_probe=boot_probe or SysctlBootModeProbe(settings),
        context=context,
        settings=settings,
    )
    return PasswordChangeOrchestrator(
        resolver=resolver,
        store=CredentialStoreClient(),
        prompt=prompt or TerminalSecretPrompt(),
        event_publisher=event_publisher or InMemoryEventPublisher(),
        context=context,
        settings=settings,
        output=output,
    )
