"""
rox - Lox Scanner Command-Line Interface
========================================

This module implements the ``rox`` command. It scans Lox source and
prints one token per line.

Usage Examples
--------------
Scan a script file:
    $ rox hello.lox

Interactive prompt (one source fragment per line):
    $ rox
    > var x = 1;

Verbose mode (debug logging):
    $ rox -v hello.lox

Exit Codes
----------
0  - Success
64 - Too many arguments
65 - Script failed to scan
66 - Script file missing or unreadable
"""

import logging
import sys
from pathlib import Path

import click

from rox import __version__
from rox.cli.errors import ExitCode, handle_cli_exception, report_error
from rox.errors import RoxError
from rox.scanner import scan

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "> "


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Options shared by the file runner and the interactive prompt.
    """

    def __init__(self, verbose: bool = False, prompt: str = DEFAULT_PROMPT) -> None:
        self.verbose = verbose
        self.prompt = prompt

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


def run(source: str) -> None:
    """
    Scan source and print its tokens.

    Raises:
        ScanError: If the source does not scan; nothing is printed
    """
    for token in scan(source):
        click.echo(str(token))


def run_file(path: Path) -> None:
    """Scan a whole script file."""
    logger.debug(f"Reading {path}")
    source = path.read_text(encoding="utf-8")
    run(source)


def run_prompt(ctx: Context) -> None:
    """
    Read-scan-print loop.

    Each line is scanned on its own. A scan error is reported and the
    loop carries on with the next line; end of input ends the session.
    """
    stdin = click.get_text_stream("stdin")

    while True:
        click.echo(ctx.prompt, nl=False)

        try:
            line = stdin.readline()
        except UnicodeDecodeError:
            click.echo("Sorry, i didn't catch that!")
            continue

        if not line:
            click.echo()
            break

        try:
            run(line)
        except RoxError as e:
            report_error(e)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("scripts", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--prompt",
    default=DEFAULT_PROMPT,
    show_default=True,
    help="Prompt shown by the interactive session",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="rox")
def main(scripts: tuple[Path, ...], prompt: str, verbose: bool) -> None:
    """
    Scan Lox source code and print its tokens.

    With no SCRIPT, starts an interactive prompt. With one SCRIPT,
    scans that file.

    \b
    Examples:
        rox                  # Interactive prompt
        rox hello.lox        # Scan a file
        rox -v hello.lox     # With debug logging
    """
    if len(scripts) > 1:
        click.echo("Usage: rox [script]")
        sys.exit(ExitCode.USAGE)

    ctx = Context(verbose=verbose, prompt=prompt)
    ctx.setup_logging()

    if not scripts:
        run_prompt(ctx)
        return

    try:
        run_file(scripts[0])
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
