"""Operating system collaborators."""

from .backend_launcher import LaunchctlBackendLauncher
from .boot_mode import SysctlBootModeProbe
from .prompt import TerminalSecretPrompt

__all__ = ["LaunchctlBackendLauncher", "SysctlBootModeProbe", "TerminalSecretPrompt"]
