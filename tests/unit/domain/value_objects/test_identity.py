"""Unit tests for the IdentityReference value object."""

import pytest

from dirpasswd.domain.value_objects.identity import IdentityReference
from tests.factories.identity import create_fake_identity


class TestIdentityReference:
    """Test cases for IdentityReference."""

    def test_auth_name_defaults_to_username(self):
        identity = IdentityReference.create("alice")

        assert identity.username == "alice"
        assert identity.auth_name == "alice"
        assert identity.is_self_change

    def test_explicit_auth_name(self):
        identity = IdentityReference.create("bob", "admin")

        assert identity.auth_name == "admin"
        assert not identity.is_self_change

    def test_random_identity_is_self_change(self):
        identity = create_fake_identity()

        assert identity.is_self_change
        assert identity.username

    @pytest.mark.parametrize("username,auth_name", [("", None), ("bob", "")])
    def test_empty_names_rejected(self, username, auth_name):
        with pytest.raises(ValueError):
            IdentityReference.create(username, auth_name)

    def test_immutability(self):
        identity = IdentityReference.create("alice")

        with pytest.raises(AttributeError):
            identity.username = "mallory"  # type: ignore

    def test_mask_for_logging(self):
        assert IdentityReference.create("alice").mask_for_logging() == "al***"
        assert IdentityReference.create("al").mask_for_logging() == "**"
