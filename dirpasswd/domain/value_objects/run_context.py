"""Run context value object.

Process-wide facts the password change depends on, captured once at startup
and passed explicitly to the services that need them.
"""

import os
import uuid
from dataclasses import dataclass, field
from typing import Optional

from structlog import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RunContext:
    """Immutable per-run context.

    Single-user boot mode is not part of it: that is only asked for when the
    directory daemon turns out not to be running.

    Attributes:
        prog_name: Program name used as the diagnostic prefix.
        is_privileged: True when the real uid is 0.
        correlation_id: Identifier bound into every log line of the run.
    """

    prog_name: str
    is_privileged: bool = False
    correlation_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def capture(cls, prog_name: str, uid: Optional[int] = None) -> "RunContext":
        """Capture the context of the current process.

        Args:
            prog_name: Program name for diagnostics.
            uid: Uid override; defaults to ``os.getuid()``.

        Returns:
            RunContext: The captured context.
        """
        caller_uid = os.getuid() if uid is None else uid
        context = cls(prog_name=prog_name, is_privileged=caller_uid == 0)
        logger.debug(
            "Run context captured",
            correlation_id=context.correlation_id,
            is_privileged=context.is_privileged,
        )
        return context
