"""Unit tests for CredentialStoreClient."""

import pytest

from dirpasswd.core.exceptions import AuthenticationError, RecordLookupError, UserNotFoundError
from dirpasswd.domain.services.directory.credential_store import CredentialStoreClient
from dirpasswd.domain.value_objects.auth_mode import AuthMode
from dirpasswd.domain.value_objects.identity import IdentityReference
from dirpasswd.domain.value_objects.secret import Secret, SecretPair
from tests.utils.fake_directory import service_error


@pytest.fixture
def store():
    return CredentialStoreClient()


@pytest.fixture
def session(directory):
    return directory.open_session()


class TestFindRecord:
    """Test cases for record lookup."""

    def test_search_path_used_without_location(self, store, directory, session):
        directory.add_user("alice", location="/Local/Default")

        record = store.find_record(session, IdentityReference.create("alice"))

        assert directory.opened_nodes == ["<search>"]
        assert directory.lookups == [("/Search", "alice")]
        assert record.location_path == "/Local/Default"
        assert record.identity.username == "alice"

    def test_explicit_location_opens_that_node(self, store, directory, session):
        directory.add_user("alice", location="/Local/Default")

        store.find_record(session, IdentityReference.create("alice"), "/Local/Default")

        assert directory.opened_nodes == ["/Local/Default"]

    def test_record_location_supersedes_known_location(self, store, directory, session):
        directory.add_user("carol", location="/LDAPv3/ldap.example.com")

        record = store.find_record(session, IdentityReference.create("carol"), "/Local/Default")

        assert record.location_path == "/LDAPv3/ldap.example.com"

    def test_known_location_kept_without_attribute(self, store, directory, session):
        directory.add_user("dave", location=None)

        record = store.find_record(session, IdentityReference.create("dave"), "/Local/Default")

        assert record.location_path == "/Local/Default"

    def test_node_closed_after_lookup(self, store, directory, session):
        directory.add_user("alice")

        store.find_record(session, IdentityReference.create("alice"))

        assert directory.events == ["node.close"]

    def test_missing_record_without_error(self, store, session):
        with pytest.raises(UserNotFoundError) as exc:
            store.find_record(session, IdentityReference.create("ghost"))

        assert str(exc.value) == "Unknown user name 'ghost'."

    def test_lookup_error(self, store, directory, session):
        directory.lookup_error = service_error("Search failed.", reason="Node offline.")

        with pytest.raises(RecordLookupError) as exc:
            store.find_record(session, IdentityReference.create("alice"))

        assert exc.value.diagnostic.reason == "Node offline."
        assert directory.events == ["node.close"]

    def test_node_open_error_is_lookup_error(self, store, directory, session):
        directory.node_error = service_error("Unknown node.")

        with pytest.raises(RecordLookupError, match="Unknown node."):
            store.find_record(session, IdentityReference.create("alice"), "/Nope")


class TestChangePassword:
    """Test cases for mutation dispatch."""

    def _record(self, store, directory, session, username="alice", auth_name=None):
        directory.add_user(username)
        return store.find_record(session, IdentityReference.create(username, auth_name))

    def test_self_change_calls_change_password(self, store, directory, session):
        record = self._record(store, directory, session)
        secrets = SecretPair(new=Secret("Sn0wman!"), old=Secret("0ldpass"))

        store.change_password(record, AuthMode.SELF_CHANGE, record.identity, secrets)

        fake = directory.records["alice"]
        assert fake.change_password_calls == [("0ldpass", "Sn0wman!")]
        assert fake.set_credentials_calls == []

    def test_self_change_without_old_secret(self, store, directory, session):
        record = self._record(store, directory, session)

        store.change_password(record, AuthMode.SELF_CHANGE, record.identity, SecretPair(new=Secret("Sn0wman!")))

        assert directory.records["alice"].change_password_calls == [(None, "Sn0wman!")]

    def test_elevated_passes_ordered_tuple(self, store, directory, session):
        record = self._record(store, directory, session, "bob", "admin")
        secrets = SecretPair(new=Secret("newpass"), old=Secret("adminOldPass"))

        store.change_password(record, AuthMode.ELEVATED, record.identity, secrets)

        fake = directory.records["bob"]
        assert fake.set_credentials_calls == [("bob", "newpass", "admin", "adminOldPass")]
        assert fake.change_password_calls == []

    def test_elevated_without_old_secret_sends_empty_string(self, store, directory, session):
        record = self._record(store, directory, session, "bob", "admin")

        store.change_password(record, AuthMode.ELEVATED, record.identity, SecretPair(new=Secret("newpass")))

        assert directory.records["bob"].set_credentials_calls == [("bob", "newpass", "admin", "")]

    def test_rejection_is_authentication_error(self, store, directory, session):
        record = self._record(store, directory, session)
        directory.records["alice"].mutation_error = service_error(
            "Credential operation failed.", suggestion="Check the old password."
        )

        with pytest.raises(AuthenticationError) as exc:
            store.change_password(
                record, AuthMode.ELEVATED, record.identity,
                SecretPair(new=Secret("Sn0wman!"), old=Secret("wrong")),
            )

        assert exc.value.diagnostic.suggestion == "Check the old password."
        assert directory.records["alice"].mutation_count == 1
