"""Unit tests for the Secret value objects."""

import pytest

from dirpasswd.domain.value_objects.secret import Secret, SecretPair


class TestSecret:
    """Test cases for Secret."""

    def test_reveal_returns_text(self):
        assert Secret("Sn0wman!").reveal() == "Sn0wman!"

    def test_wipe_zeroes_buffer(self):
        secret = Secret("Sn0wman!")
        buffer = secret._buffer

        secret.wipe()

        assert secret.is_wiped
        assert buffer == bytearray(len(b"Sn0wman!"))

    def test_wiped_secret_cannot_be_revealed(self):
        secret = Secret("Sn0wman!")
        secret.wipe()

        with pytest.raises(ValueError, match="wiped"):
            secret.reveal()

    def test_context_manager_wipes_on_exit(self):
        with Secret("Sn0wman!") as secret:
            assert secret.reveal() == "Sn0wman!"

        assert secret.is_wiped

    def test_matches(self):
        assert Secret("same").matches(Secret("same"))
        assert not Secret("same").matches(Secret("other"))
        assert Secret("same") == Secret("same")

    def test_empty(self):
        assert Secret("").is_empty()
        assert not Secret("x").is_empty()

    def test_repr_hides_value(self):
        secret = Secret("Sn0wman!")

        assert "Sn0wman" not in repr(secret)
        assert "Sn0wman" not in str(secret)

    def test_unicode_round_trip(self):
        assert Secret("pässwörd").reveal() == "pässwörd"


class TestSecretPair:
    """Test cases for SecretPair."""

    def test_reveal_old_default_when_absent(self):
        pair = SecretPair(new=Secret("new"))

        assert pair.reveal_old() is None
        assert pair.reveal_old(default="") == ""

    def test_wipe_wipes_both(self):
        pair = SecretPair(new=Secret("new"), old=Secret("old"))

        pair.wipe()

        assert pair.new.is_wiped
        assert pair.old.is_wiped

    def test_wipe_partially_collected_pair(self):
        pair = SecretPair(old=Secret("old"))

        pair.wipe()

        assert pair.new is None
        assert pair.old.is_wiped
