"""
Application-wide settings.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like the program name and logging.

    Logging goes to stderr; LOG_LEVEL defaults to WARNING so that an
    interactive run only shows the prompts and the final outcome.
    """
    PROJECT_NAME: str = "dirpasswd"
    VERSION: str = "0.1.0"

    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """
        Upper-cases the level name so `debug` and `DEBUG` are equivalent.

        Args:
            v: Input level name.

        Returns:
            The upper-cased level name.
        """
        if isinstance(v, str):
            return v.strip().upper()
        return v
