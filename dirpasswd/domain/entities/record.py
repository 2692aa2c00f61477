"""Directory record entity."""

from dataclasses import dataclass, field
from typing import Optional

from dirpasswd.domain.interfaces.directory import IDirectoryRecord
from dirpasswd.domain.value_objects.identity import IdentityReference


@dataclass(frozen=True)
class Record:
    """A located user record.

    Created by a successful lookup and released once the password mutation
    has resolved. Usable as a context manager that releases on exit.

    Attributes:
        identity: Identity the record was looked up for.
        location_path: Node the record lives in, when known.
        handle: Collaborator handle used for the mutation call.
    """

    identity: IdentityReference
    location_path: Optional[str]
    handle: IDirectoryRecord = field(repr=False, compare=False)

    def release(self) -> None:
        self.handle.close()

    def __enter__(self) -> "Record":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
