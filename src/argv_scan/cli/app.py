"""Example program and process-level error boundary for argv-scan.

The program accepts a handful of typical options, requires at least
one positional argument, and echoes what it parsed::

    argv-scan-example -vv --period=2.5 -ofile.txt one two

Architecture notes
------------------
* Option scanning is delegated to :class:`~argv_scan.core.scanner.OptionScanner`.
* :func:`main` is the testable entry point and returns an exit code.
* :func:`cli` is the only place that translates errors into the OS
  process exit status.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from argv_scan.cli import exit_codes
from argv_scan.cli.console import ConsoleReporter, console, stdout_console
from argv_scan.core.models import DOUBLE, Slot
from argv_scan.core.scanner import OptionScanner
from argv_scan.exceptions import ArgvError, HelpRequested


HELP_TEXT: str = """
Usage: {name} [options] foo....

Options:

--output (-o) FILE
    Write the results to FILE

--period (-p) SECONDS
    Duration in each period.  Units are floating point seconds

--debug (-d)
    Enable debug logging

--verbose (-v)
    Be verbose.  Multiple occurrences increase verbosity

"""


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def _render_report(
    output: str | None,
    period: float,
    debug: bool,
    verbosity: int,
    argv: Sequence[str],
) -> list[str]:
    """Build the lines echoed back after a successful scan."""
    lines: list[str] = []
    if output is not None:
        lines.append(f"Output: {output}")
    else:
        lines.append("No output specified")
    lines.append(f"Period: {period:g}")
    if debug:
        lines.append("Debug logging enabled")
    lines.append(f"Verbosity: {verbosity}")
    lines.extend(f"argv[{i}]={arg}" for i, arg in enumerate(argv))
    return lines


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the example program.

    Parameters
    ----------
    argv:
        Full argument vector, program path first.  When ``None``
        (default), ``sys.argv`` is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ArgvError
        For any usage problem.  The diagnostic has already been written
        to stderr.
    """
    if argv is None:
        argv = sys.argv

    scanner = OptionScanner(argv, HELP_TEXT, reporter=ConsoleReporter())

    output: Slot[str | None] = Slot(None)
    period: Slot[float] = Slot(10.0)
    debug: Slot[bool] = Slot(False)
    verbosity: Slot[int] = Slot(0)

    try:
        while scanner:
            scanner.string("o", "--output", output)
            scanner.number("p", "--period", period, DOUBLE)
            scanner.flag("d", "--debug", debug)
            scanner.counter("v", "--verbose", verbosity)
    except HelpRequested as help_request:
        stdout_console.out(help_request.text, end="")
        return exit_codes.SUCCESS

    if scanner.argc < 2:
        scanner.try_help("wrong usage")

    for line in _render_report(
        output.value, period.value, debug.value, verbosity.value, scanner.argv
    ):
        stdout_console.out(line)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ArgvError as exc:
        # Scanner errors carry the program name and were already reported.
        if exc.program is None:
            console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
