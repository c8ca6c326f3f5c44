"""Custom exception hierarchy for argv-scan.

Every fatal condition raised while scanning options is a subclass of
:class:`ArgvError`.  None of them terminate the process; deciding the
exit status belongs to the outermost caller.

Hierarchy
---------
ArgvError
├── UsageError
├── MissingArgumentError
├── InvalidArgumentError
├── ConstructionError
└── MissingDependencyError

HelpRequested
    Not an error.  Raised when ``-h`` / ``--help`` was seen; carries the
    rendered help text for the caller to print before exiting cleanly.
"""

from __future__ import annotations


class ArgvError(Exception):
    """Base exception for all argv-scan errors.

    ``str(exc)`` is the bare problem description (``"unknown option: -x"``).
    The full two-line diagnostic that is shown to users is available as
    :attr:`diagnostic`.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        program: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.hint: str | None = hint
        """Optional follow-up line shown below the error message."""
        self.program: str | None = program
        """Display name of the program the error was raised for."""

    @property
    def diagnostic(self) -> str:
        """Return the message as written to the diagnostic stream."""
        text = f"{self.program}: {self.message}" if self.program else self.message
        if self.hint:
            text = f"{text}\n{self.hint}"
        return text


# --- Option scanning -------------------------------------------------------

class UsageError(ArgvError):
    """Raised for an option no accessor recognized, or for wrong usage."""


class MissingArgumentError(ArgvError):
    """Raised when an option that takes a value has none available."""


class InvalidArgumentError(ArgvError):
    """Raised when an option value fails conversion or its bounds."""


# --- Construction ----------------------------------------------------------

class ConstructionError(ArgvError):
    """Raised when the scanner is given an empty or absent argument vector."""


# --- Help ------------------------------------------------------------------

class HelpRequested(Exception):
    """Raised when the reserved help option was given.

    This is a successful outcome: callers print :attr:`text` to standard
    output and exit with status 0.
    """

    def __init__(self, text: str) -> None:
        super().__init__("help requested")
        self.text: str = text


# --- Environment -----------------------------------------------------------

class MissingDependencyError(ArgvError):
    """Raised when an optional runtime dependency is not installed."""
