"""Secret value objects.

Passwords typed at the prompts live in mutable byte buffers so they can be
overwritten with zeros as soon as they have been used. Python strings are
immutable and cannot be wiped, so `reveal()` should only be called at the
moment a collaborator needs the text.
"""

import secrets
from dataclasses import dataclass
from typing import Optional


class Secret:
    """A wipeable secret string.

    The secret is stored UTF-8 encoded in a ``bytearray``. `wipe()` zeroes the
    buffer and marks the secret as wiped; using a wiped secret raises
    ``ValueError``. Instances are context managers that wipe on exit.

    Example:
        >>> with Secret("Sn0wman!") as secret:
        ...     record.change_password(None, secret.reveal())
    """

    __slots__ = ("_buffer", "_wiped")

    def __init__(self, value: str):
        self._buffer = bytearray(value.encode("utf-8"))
        self._wiped = False

    @property
    def is_wiped(self) -> bool:
        return self._wiped

    def is_empty(self) -> bool:
        self._ensure_live()
        return len(self._buffer) == 0

    def reveal(self) -> str:
        """Return the secret as text for handing to a collaborator.

        Raises:
            ValueError: If the secret has already been wiped.
        """
        self._ensure_live()
        return self._buffer.decode("utf-8")

    def wipe(self) -> None:
        """Overwrite the buffer with zeros. Safe to call more than once."""
        for index in range(len(self._buffer)):
            self._buffer[index] = 0
        self._wiped = True

    def matches(self, other: "Secret") -> bool:
        """Constant-time comparison against another live secret."""
        self._ensure_live()
        other._ensure_live()
        return secrets.compare_digest(bytes(self._buffer), bytes(other._buffer))

    def _ensure_live(self) -> None:
        if self._wiped:
            raise ValueError("Secret has been wiped")

    def __enter__(self) -> "Secret":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return self.matches(other)

    __hash__ = None

    def __repr__(self) -> str:
        return "Secret(<wiped>)" if self._wiped else "Secret(********)"

    __str__ = __repr__


@dataclass
class SecretPair:
    """The old and new secrets collected for one password change.

    Filled in as the prompts are answered; `wipe()` clears whatever was
    collected so far.

    Attributes:
        new: The confirmed new password, once collected.
        old: Proof of the authorizer's current credential; absent when a
            privileged caller changes a password in the trusted local store.
    """

    new: Optional[Secret] = None
    old: Optional[Secret] = None

    def reveal_old(self, default: Optional[str] = None) -> Optional[str]:
        """Reveal the old secret, or return `default` when none was collected."""
        if self.old is None:
            return default
        return self.old.reveal()

    def wipe(self) -> None:
        for secret in (self.new, self.old):
            if secret is not None:
                secret.wipe()
