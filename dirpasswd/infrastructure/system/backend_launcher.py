"""Local-only directory backend launcher."""

import subprocess
from typing import Optional

import structlog

from dirpasswd.core.config.settings import Settings, settings as default_settings
from dirpasswd.domain.interfaces.system import ILocalBackendLauncher

logger = structlog.get_logger(__name__)


class LaunchctlBackendLauncher(ILocalBackendLauncher):
    """Loads the local directory daemon with ``launchctl load <plist>``.

    The call blocks until launchctl exits; only a normal exit with status 0
    counts as success.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings

    def launch(self) -> bool:
        command = [self._settings.LAUNCHCTL_PATH, "load", self._settings.LOCAL_BACKEND_PLIST]
        try:
            completed = subprocess.run(command, check=False)
        except OSError as e:
            logger.error("launchctl could not be started", command=command, error=str(e))
            return False

        if completed.returncode < 0:
            logger.error("launchctl terminated by signal", signal=-completed.returncode)
            return False
        if completed.returncode != 0:
            logger.error("launchctl failed", returncode=completed.returncode)
            return False

        logger.info("Local directory backend loaded", plist=self._settings.LOCAL_BACKEND_PLIST)
        return True
