"""argv-scan — incremental command-line option scanning.

Options are pulled out of the argument vector one at a time by a loop
that offers a menu of accessors; whatever is left afterwards is the
program name followed by the positional arguments in their original
order.
"""

from argv_scan.core.models import (
    DOUBLE,
    FLOAT,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    NumericKind,
    NumericType,
    Slot,
)
from argv_scan.core.scanner import OptionScanner
from argv_scan.exceptions import (
    ArgvError,
    ConstructionError,
    HelpRequested,
    InvalidArgumentError,
    MissingArgumentError,
    UsageError,
)
from argv_scan.version import __version__

__all__: list[str] = [
    "DOUBLE",
    "FLOAT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "ArgvError",
    "ConstructionError",
    "HelpRequested",
    "InvalidArgumentError",
    "MissingArgumentError",
    "NumericKind",
    "NumericType",
    "OptionScanner",
    "Slot",
    "UsageError",
    "__version__",
]
