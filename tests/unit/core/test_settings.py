import pytest
from pydantic import ValidationError

from dirpasswd.core.config.settings import Settings, create_settings
from dirpasswd.domain.value_objects.auth_mode import AuthMode


def test_directory_defaults(monkeypatch):
    for name in ("DIRPASSWD_TRUSTED_LOCATION_PREFIX", "DIRPASSWD_LOCAL_STORE_PATH",
                 "DIRPASSWD_LOCAL_DEFAULT_NODE", "DIRPASSWD_MAX_CONFIRMATION_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.LOCAL_STORE_PATH == "/var/db/dslocal"
    assert settings.LOCAL_DEFAULT_NODE == "/Local/Default"
    assert settings.TRUSTED_LOCATION_PREFIX == "/Local/"
    assert settings.MAX_CONFIRMATION_ATTEMPTS is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DIRPASSWD_MAX_CONFIRMATION_ATTEMPTS", "3")
    monkeypatch.setenv("DIRPASSWD_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.MAX_CONFIRMATION_ATTEMPTS == 3
    assert settings.LOG_LEVEL == "DEBUG"


def test_dotenv_in_working_directory_is_ignored(tmp_path, monkeypatch):
    # Arrange
    for name in ("DIRPASSWD_TRUSTED_LOCATION_PREFIX", "DIRPASSWD_LAUNCHCTL_PATH"):
        monkeypatch.delenv(name, raising=False)
    (tmp_path / ".env").write_text(
        "DIRPASSWD_TRUSTED_LOCATION_PREFIX=/\n"
        "DIRPASSWD_LAUNCHCTL_PATH=/tmp/launcher\n"
    )
    monkeypatch.chdir(tmp_path)

    # Act
    settings = create_settings()

    # Assert
    assert settings.TRUSTED_LOCATION_PREFIX == "/Local/"
    assert settings.LAUNCHCTL_PATH == "/bin/launchctl"
    assert AuthMode.decide(
        True, "/LDAPv3/ldap.example.com", settings.TRUSTED_LOCATION_PREFIX
    ) is AuthMode.ELEVATED


def test_confirmation_ceiling_must_be_positive():
    with pytest.raises(ValidationError):
        create_settings(MAX_CONFIRMATION_ATTEMPTS=0)
