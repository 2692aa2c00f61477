"""Credential Store Client domain service.

Locates a user's record in the directory and applies a password mutation to
it. The two mutation shapes are chosen by `AuthMode`:

- SELF_CHANGE calls the record's change-password operation with the old and
  new password; the directory re-authenticates the user with the old one.
- ELEVATED calls set-credentials with ``(username, new, auth name, auth
  password)`` so an administrator or another authorized identity can set
  the password; the directory verifies the authorizer.
"""

from typing import Optional

import structlog

from dirpasswd.core.exceptions import (
    AuthenticationError,
    Diagnostic,
    DirectoryServiceError,
    RecordLookupError,
    UserNotFoundError,
)
from dirpasswd.domain.entities.record import Record
from dirpasswd.domain.interfaces.directory import (
    META_NODE_LOCATION,
    IDirectoryNode,
    IDirectorySession,
)
from dirpasswd.domain.value_objects.auth_mode import AuthMode
from dirpasswd.domain.value_objects.identity import IdentityReference
from dirpasswd.domain.value_objects.secret import SecretPair

logger = structlog.get_logger(__name__)


class CredentialStoreClient:
    """Finds user records and mutates their passwords."""

    def find_record(
        self,
        session: IDirectorySession,
        identity: IdentityReference,
        location: Optional[str] = None,
    ) -> Record:
        """Look up the record for `identity.username`.

        Args:
            session: Connected directory session.
            identity: Identity whose record is wanted.
            location: Node to search; None searches the authentication path.

        Returns:
            Record: The record, with its actual node location when the
            directory reports one.

        Raises:
            UserNotFoundError: If no record exists and the directory reported no error.
            RecordLookupError: If the directory reported an error during the lookup.
        """
        request_logger = logger.bind(
            username=identity.mask_for_logging(),
            location=location or "<search path>",
            operation="find_record",
        )

        try:
            with self._open_node(session, location) as node:
                handle = node.copy_user_record(identity.username)
        except DirectoryServiceError as e:
            request_logger.warning(
                "Record lookup failed",
                error_code=e.code,
                error_message=str(e),
            )
            raise self._wrap(RecordLookupError, e) from e

        if handle is None:
            request_logger.info("No record for user")
            raise UserNotFoundError(identity.username)

        try:
            locations = handle.values(META_NODE_LOCATION)
        except DirectoryServiceError as e:
            handle.close()
            raise self._wrap(RecordLookupError, e) from e

        actual_location = locations[0] if locations else location
        request_logger.debug("Record found", node_location=actual_location)
        return Record(identity=identity, location_path=actual_location, handle=handle)

    def change_password(
        self,
        record: Record,
        mode: AuthMode,
        identity: IdentityReference,
        secrets: SecretPair,
    ) -> None:
        """Apply the new password to the record.

        Args:
            record: Record returned by `find_record`.
            mode: Which mutation operation to use.
            identity: Target and authorizer names.
            secrets: Old (optional) and new secrets. Not wiped here.

        Raises:
            AuthenticationError: If the directory rejects the mutation.
        """
        request_logger = logger.bind(
            username=identity.mask_for_logging(),
            auth_mode=mode.value,
            operation="change_password",
        )

        try:
            if mode is AuthMode.ELEVATED:
                record.handle.set_credentials(
                    (
                        identity.username,
                        secrets.new.reveal(),
                        identity.auth_name,
                        secrets.reveal_old(default=""),
                    )
                )
            else:
                record.handle.change_password(secrets.reveal_old(), secrets.new.reveal())
        except DirectoryServiceError as e:
            request_logger.warning(
                "Password mutation rejected",
                error_code=e.code,
                error_message=str(e),
            )
            raise self._wrap(AuthenticationError, e) from e

        request_logger.info("Password mutation accepted")

    @staticmethod
    def _open_node(session: IDirectorySession, location: Optional[str]) -> IDirectoryNode:
        if location:
            return session.open_node(location)
        return session.open_search_node()

    @staticmethod
    def _wrap(error_cls, error: DirectoryServiceError):
        diagnostic = error.diagnostic or Diagnostic(error.message)
        return error_cls.from_diagnostic(diagnostic)
