"""Factory functions for generating fake test data."""

# flake8: noqa: F401 – re-export

from .identity import create_fake_identity, fake_password
