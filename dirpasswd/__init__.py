"""dirpasswd: change a user's password in a directory service."""

__version__ = "0.1.0"
