"""Terminal secret prompt."""

import getpass
from typing import Callable, Optional

from dirpasswd.domain.interfaces.prompt import ISecretPrompt
from dirpasswd.domain.value_objects.secret import Secret


class TerminalSecretPrompt(ISecretPrompt):
    """Reads secrets from the controlling terminal without echo.

    End of input (Ctrl-D) is reported as None.
    """

    def __init__(self, reader: Callable[[str], str] = getpass.getpass):
        self._reader = reader

    def prompt(self, label: str) -> Optional[Secret]:
        try:
            value = self._reader(label)
        except EOFError:
            return None
        return Secret(value)
