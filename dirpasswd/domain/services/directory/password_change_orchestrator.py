"""Password Change Orchestrator domain service.

Drives a complete password change:

1. **Resolve**: connect to the directory (with the single-user fallback)
2. **Lookup**: find the user's record and where it actually lives
3. **Decide**: compute the `AuthMode` once from privilege and location
4. **Collect**: prompt for the authorizer's password when needed, then for
   the new password twice until both entries match
5. **Mutate**: apply the change through the mode's mutation operation
6. **Audit**: publish a domain event describing the outcome

Every secret collected is wiped before this service returns or raises, and
the record handle is released once the mutation has resolved.
"""

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

import structlog

from dirpasswd.core.config.settings import Settings, settings as default_settings
from dirpasswd.core.exceptions import (
    AuthenticationError,
    InputAbortedError,
    InputCancelledError,
    PasswordConfirmationError,
)
from dirpasswd.domain.entities.record import Record
from dirpasswd.domain.events.password_events import (
    PasswordChangedEvent,
    PasswordChangeFailedEvent,
)
from dirpasswd.domain.interfaces.prompt import ISecretPrompt
from dirpasswd.domain.interfaces.services import IEventPublisher
from dirpasswd.domain.services.directory.credential_store import CredentialStoreClient
from dirpasswd.domain.services.directory.session_resolver import SessionResolver
from dirpasswd.domain.value_objects.auth_mode import AuthMode
from dirpasswd.domain.value_objects.identity import IdentityReference
from dirpasswd.domain.value_objects.run_context import RunContext
from dirpasswd.domain.value_objects.secret import Secret, SecretPair

logger = structlog.get_logger(__name__)

OLD_PASSWORD_LABEL = "Old password:"
AUTHORIZER_PASSWORD_LABEL = "Password for {auth_name}:"
NEW_PASSWORD_LABEL = "New password:"
RETYPE_PASSWORD_LABEL = "Retype new password:"
MISMATCH_NOTICE = "Mismatch; try again, EOF to quit."


def old_password_label(identity: IdentityReference) -> str:
    """Prompt label for the credential that authorizes the change."""
    if identity.is_self_change:
        return OLD_PASSWORD_LABEL
    return AUTHORIZER_PASSWORD_LABEL.format(auth_name=identity.auth_name)


@dataclass(frozen=True)
class PasswordChangeResult:
    """Outcome of a completed password change."""

    identity: IdentityReference
    mode: AuthMode
    location_path: Optional[str]


class PasswordChangeOrchestrator:
    """Runs the password change state machine for one identity."""

    def __init__(
        self,
        resolver: SessionResolver,
        store: CredentialStoreClient,
        prompt: ISecretPrompt,
        event_publisher: IEventPublisher,
        context: RunContext,
        settings: Optional[Settings] = None,
        output: Optional[TextIO] = None,
    ):
        """Initialize the orchestrator with its collaborators.

        Args:
            resolver: Opens the directory session.
            store: Looks up records and applies mutations.
            prompt: Supplies secrets typed by the user.
            event_publisher: Receives audit events.
            context: Captured run context (privilege level, correlation id).
            settings: Settings override; defaults to the application settings.
            output: Stream for user-facing messages; defaults to stdout.
        """
        self._resolver = resolver
        self._store = store
        self._prompt = prompt
        self._event_publisher = event_publisher
        self._context = context
        self._settings = settings or default_settings
        self._output = output

    def change_password(
        self,
        username: str,
        auth_name: Optional[str] = None,
        location: Optional[str] = None,
    ) -> PasswordChangeResult:
        """Change the password of `username`.

        Args:
            username: Account whose password changes.
            auth_name: Authorizing identity (``-u``); defaults to `username`.
            location: Node holding the record (``-l``); defaults to the
                authentication search path.

        Returns:
            PasswordChangeResult: The identity, mode and record location.

        Raises:
            DirectoryConnectionError: If no directory backend is reachable.
            UserNotFoundError: If the user has no record.
            RecordLookupError: If the directory failed during the lookup.
            AuthenticationError: If the directory rejected the mutation.
            InputCancelledError: If the user entered an empty new password.
            InputAbortedError: If input ended while a password was required.
            PasswordConfirmationError: If the confirmation attempts ran out.
        """
        identity = IdentityReference.create(username, auth_name)
        request_logger = logger.bind(
            correlation_id=self._context.correlation_id,
            username=identity.mask_for_logging(),
            self_change=identity.is_self_change,
            operation="password_change",
        )
        request_logger.info("Password change initiated")

        with self._resolver.resolve(location) as resolved:
            record = self._store.find_record(
                resolved.session, identity, resolved.effective_location
            )

        with record:
            return self._change_record_password(record, identity, request_logger)

    def _change_record_password(
        self,
        record: Record,
        identity: IdentityReference,
        request_logger: structlog.BoundLogger,
    ) -> PasswordChangeResult:
        self._write(f"Changing password for {identity.username}.")

        mode = AuthMode.decide(
            self._context.is_privileged,
            record.location_path,
            self._settings.TRUSTED_LOCATION_PREFIX,
        )
        request_logger = request_logger.bind(auth_mode=mode.value, node_location=record.location_path)
        request_logger.debug("Authentication mode decided", needs_auth=mode.needs_auth)

        secrets = SecretPair()
        try:
            if mode.needs_auth:
                secrets.old = self._prompt_authorizer_secret(identity)
            secrets.new = self._prompt_new_secret(request_logger)

            self._mutate(record, mode, identity, secrets, request_logger)
        finally:
            secrets.wipe()

        request_logger.info("Password change completed successfully")
        return PasswordChangeResult(identity=identity, mode=mode, location_path=record.location_path)

    def _prompt_authorizer_secret(self, identity: IdentityReference) -> Secret:
        secret = self._prompt.prompt(old_password_label(identity))
        if secret is None:
            raise InputAbortedError()
        return secret

    def _prompt_new_secret(self, request_logger: structlog.BoundLogger) -> Secret:
        """Ask for the new password twice until both entries match.

        An empty entry (or end of input) at the first prompt cancels the
        change. End of input at the retype prompt aborts it.

        Each mismatch prints the retry notice before asking again, except
        the one that reaches ``MAX_CONFIRMATION_ATTEMPTS``: that mismatch
        raises `PasswordConfirmationError` straight away, so the error's
        message is the only thing the user sees for it.
        """
        max_attempts = self._settings.MAX_CONFIRMATION_ATTEMPTS
        attempts = 0
        while True:
            new_secret = self._prompt.prompt(NEW_PASSWORD_LABEL)
            if new_secret is None or new_secret.is_empty():
                if new_secret is not None:
                    new_secret.wipe()
                request_logger.info("Password change cancelled by user")
                raise InputCancelledError()

            retyped = self._prompt.prompt(RETYPE_PASSWORD_LABEL)
            if retyped is None:
                new_secret.wipe()
                request_logger.info("Input ended during confirmation")
                raise InputAbortedError()

            with retyped:
                matched = new_secret.matches(retyped)
            if matched:
                return new_secret

            new_secret.wipe()
            attempts += 1
            request_logger.debug("New password confirmation mismatch", attempts=attempts)
            if max_attempts is not None and attempts >= max_attempts:
                request_logger.warning("Confirmation attempts exhausted", attempts=attempts)
                raise PasswordConfirmationError()
            self._write(MISMATCH_NOTICE)

    def _mutate(
        self,
        record: Record,
        mode: AuthMode,
        identity: IdentityReference,
        secrets: SecretPair,
        request_logger: structlog.BoundLogger,
    ) -> None:
        try:
            self._store.change_password(record, mode, identity, secrets)
        except AuthenticationError as e:
            self._event_publisher.publish(
                PasswordChangeFailedEvent.create(
                    username=identity.username,
                    auth_name=identity.auth_name,
                    change_method=mode.change_method,
                    failure_reason=str(e),
                    correlation_id=self._context.correlation_id,
                )
            )
            raise

        self._event_publisher.publish(
            PasswordChangedEvent.create(
                username=identity.username,
                auth_name=identity.auth_name,
                change_method=mode.change_method,
                node_location=record.location_path,
                correlation_id=self._context.correlation_id,
            )
        )
        request_logger.debug("Password changed event published")

    def _write(self, message: str) -> None:
        print(message, file=self._output or sys.stdout, flush=True)
