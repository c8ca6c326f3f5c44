"""Protocols (interfaces) consumed by the core layer.

Every diagnostic reaches a reporter before the matching error is
raised.  :class:`StderrReporter` is the default; the CLI layer injects
its Rich-backed reporter instead.
"""

from __future__ import annotations

import sys
from typing import Protocol


class DiagnosticReporter(Protocol):
    """Contract for diagnostic sinks.

    Any object with a matching :meth:`report` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def report(self, diagnostic: str) -> None:
        """Deliver *diagnostic* (possibly multi-line, no trailing newline)."""
        ...  # pragma: no cover


class StderrReporter:
    """Default reporter: writes each diagnostic verbatim to ``sys.stderr``.

    The stream is looked up on every call so redirection after the
    scanner was built is honoured.
    """

    def report(self, diagnostic: str) -> None:
        sys.stderr.write(diagnostic + "\n")
        sys.stderr.flush()
