"""
CLI Error Handling
==================

Provides consistent error reporting and exit codes for the rox command.
Exit codes follow the BSD sysexits convention.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the rox command."""
    SUCCESS = 0
    USAGE = 64           # Wrong number of arguments
    DATA_ERROR = 65      # Source failed to scan
    NO_INPUT = 66        # Script file missing or unreadable
    INTERNAL_ERROR = 70  # Unexpected internal error


def report_error(error: Exception) -> None:
    """Print an error report to stderr."""
    click.echo(f"Error: {error}", err=True)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from rox.errors import RoxError

    if isinstance(error, RoxError):
        report_error(error)
        sys.exit(ExitCode.DATA_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        report_error(error)
        sys.exit(ExitCode.NO_INPUT)

    elif isinstance(error, UnicodeDecodeError):
        report_error(error)
        sys.exit(ExitCode.DATA_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
