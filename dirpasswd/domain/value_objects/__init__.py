"""Domain value objects for the password change."""

from .auth_mode import AuthMode
from .identity import IdentityReference
from .secret import Secret, SecretPair

__all__ = ["AuthMode", "IdentityReference", "Secret", "SecretPair"]
