"""Core layer — the option scanner and its pure helpers.

Rules
-----
* No ``print()`` calls.  The only stream output is diagnostics, which
  leave through a :class:`~argv_scan.core.protocols.DiagnosticReporter`
  (stderr unless another reporter is injected).
* No imports from ``cli``.
"""

from argv_scan.core.models import NumericKind, NumericType, Slot
from argv_scan.core.protocols import DiagnosticReporter, StderrReporter
from argv_scan.core.scanner import OptionScanner

__all__: list[str] = [
    "DiagnosticReporter",
    "NumericKind",
    "NumericType",
    "OptionScanner",
    "Slot",
    "StderrReporter",
]
