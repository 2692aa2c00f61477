"""Command line entry point.

Usage::

    dirpasswd <username> [-u authname] [-l location]

Changes the password of <username> in the directory service. Without ``-l``
the record is found through the authentication search path; with ``-u`` the
change is authorized by another identity's password.
"""

import argparse
import logging
import sys
from typing import List, Optional

from dirpasswd.core.application import create_orchestrator
from dirpasswd.core.config.settings import settings
from dirpasswd.core.exceptions import DirpasswdError
from dirpasswd.core.handlers import handle_error
from dirpasswd.core.logging import configure_logging
from dirpasswd.domain.value_objects.run_context import RunContext

PROG_NAME = "dirpasswd"


def _non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("must not be empty")
    return value


def parser(descr: str = __doc__) -> argparse.ArgumentParser:
    rv = argparse.ArgumentParser(
        prog=PROG_NAME,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=descr,
    )
    rv.add_argument("username", type=_non_empty, help="Account whose password is changed")
    rv.add_argument(
        "-u", dest="auth_name", type=_non_empty, default=None,
        help="Authorize the change with this identity's password")
    rv.add_argument(
        "-l", dest="location", type=_non_empty, default=None,
        help="Directory node holding the record, e.g. /Local/Default")
    rv.add_argument(
        "-v", "--verbose", required=False,
        action="store_const", dest="log_level",
        const=logging.getLevelName(logging.DEBUG), default=None,
        help="Increase the verbosity of output")
    rv.add_argument(
        "--version", action="version",
        version=f"%(prog)s {settings.VERSION}")
    return rv


def main(argv: Optional[List[str]] = None) -> int:
    args = parser().parse_args(argv)
    configure_logging(args.log_level)

    context = RunContext.capture(PROG_NAME)
    try:
        orchestrator = create_orchestrator(context, settings)
        orchestrator.change_password(args.username, args.auth_name, args.location)
    except DirpasswdError as e:
        return handle_error(context.prog_name, e)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
