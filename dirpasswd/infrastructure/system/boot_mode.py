"""Single-user boot mode detection."""

import subprocess
from typing import Optional

import structlog

from dirpasswd.core.config.settings import Settings, settings as default_settings
from dirpasswd.domain.interfaces.system import IBootModeProbe

logger = structlog.get_logger(__name__)


class SysctlBootModeProbe(IBootModeProbe):
    """Reads the single-user flag through ``sysctl -n <name>``.

    Any failure to read the flag is reported as "not single user".
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings

    def is_single_user(self) -> bool:
        command = [self._settings.SYSCTL_PATH, "-n", self._settings.SINGLE_USER_SYSCTL]
        try:
            completed = subprocess.run(command, capture_output=True, text=True, check=False)
        except OSError as e:
            logger.debug("sysctl unavailable", error=str(e))
            return False

        if completed.returncode != 0:
            logger.debug("sysctl failed", returncode=completed.returncode)
            return False

        try:
            return int(completed.stdout.strip()) != 0
        except ValueError:
            logger.debug("Unexpected sysctl output", output=completed.stdout.strip())
            return False
