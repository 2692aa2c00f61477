"""Directory service settings.

Paths and node names used when talking to the directory service, including
the single-user fallback to the local-only backend.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class DirectorySettings(BaseSettings):
    """Defines where the local datastore lives and how to reach it.

    Security Note:
        - TRUSTED_LOCATION_PREFIX decides which records a privileged caller
          may reset without proving a credential. Widening it lets root set
          passwords on network directories without the directory's consent.
        - LAUNCHCTL_PATH and LOCAL_BACKEND_PLIST are executed with the
          caller's privileges in single-user mode; keep them pointing at
          system-owned files.
    """

    LOCAL_STORE_PATH: str = "/var/db/dslocal"
    LOCAL_DEFAULT_NODE: str = "/Local/Default"
    TRUSTED_LOCATION_PREFIX: str = "/Local/"

    LAUNCHCTL_PATH: str = "/bin/launchctl"
    LOCAL_BACKEND_PLIST: str = (
        "/System/Library/LaunchDaemons/com.apple.DirectoryServicesLocal.plist"
    )

    SYSCTL_PATH: str = "/usr/sbin/sysctl"
    SINGLE_USER_SYSCTL: str = "kern.singleuser"

    # Unset keeps asking until the passwords match or input ends.
    MAX_CONFIRMATION_ATTEMPTS: Optional[int] = Field(default=None, ge=1)
