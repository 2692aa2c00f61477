import subprocess

import pytest

from dirpasswd.core.config.settings import create_settings
from dirpasswd.infrastructure.system.backend_launcher import LaunchctlBackendLauncher


@pytest.fixture
def launcher():
    return LaunchctlBackendLauncher(
        create_settings(LAUNCHCTL_PATH="/bin/launchctl", LOCAL_BACKEND_PLIST="/tmp/local.plist")
    )


def _completed(returncode):
    return subprocess.CompletedProcess(args=[], returncode=returncode)


class TestLaunchctlBackendLauncher:
    def test_success(self, launcher, mocker):
        run = mocker.patch("subprocess.run", return_value=_completed(0))

        assert launcher.launch() is True
        run.assert_called_once_with(["/bin/launchctl", "load", "/tmp/local.plist"], check=False)

    def test_nonzero_exit(self, launcher, mocker):
        mocker.patch("subprocess.run", return_value=_completed(1))

        assert launcher.launch() is False

    def test_killed_by_signal(self, launcher, mocker):
        mocker.patch("subprocess.run", return_value=_completed(-9))

        assert launcher.launch() is False

    def test_cannot_start(self, launcher, mocker):
        mocker.patch("subprocess.run", side_effect=FileNotFoundError("/bin/launchctl"))

        assert launcher.launch() is False
