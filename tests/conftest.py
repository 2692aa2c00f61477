import io

import pytest

from dirpasswd.core.config.settings import create_settings
from dirpasswd.domain.services.directory.credential_store import CredentialStoreClient
from dirpasswd.domain.services.directory.password_change_orchestrator import (
    PasswordChangeOrchestrator,
)
from dirpasswd.domain.services.directory.session_resolver import SessionResolver
from dirpasswd.domain.value_objects.run_context import RunContext
from dirpasswd.infrastructure.services.event_publisher import InMemoryEventPublisher
from tests.utils.fake_directory import (
    FakeBootProbe,
    FakeDirectoryService,
    FakeLauncher,
    ScriptedPrompt,
)


@pytest.fixture
def test_settings():
    """Settings with the stock directory paths and no confirmation ceiling."""
    return create_settings(MAX_CONFIRMATION_ATTEMPTS=None)


@pytest.fixture
def directory():
    return FakeDirectoryService()


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def boot_probe():
    return FakeBootProbe()


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def privileged_context():
    return RunContext(prog_name="dirpasswd", is_privileged=True)


@pytest.fixture
def unprivileged_context():
    return RunContext(prog_name="dirpasswd", is_privileged=False)


@pytest.fixture
def make_orchestrator(directory, launcher, boot_probe, publisher, output, test_settings):
    """Build an orchestrator over the fakes for a context and prompt script."""

    def _make(context, answers, settings=None):
        settings = settings or test_settings
        prompt = ScriptedPrompt(answers)
        resolver = SessionResolver(directory, launcher, boot_probe, context, settings)
        orchestrator = PasswordChangeOrchestrator(
            resolver=resolver,
            store=CredentialStoreClient(),
            prompt=prompt,
            event_publisher=publisher,
            context=context,
            settings=settings,
            output=output,
        )
        return orchestrator, prompt

    return _make
