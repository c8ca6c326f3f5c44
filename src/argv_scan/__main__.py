"""Allow ``python -m argv_scan`` invocation.

Runs the bundled example program through the same error boundary as
the ``argv-scan-example`` console script.
"""

from __future__ import annotations

from argv_scan.cli.app import cli

if __name__ == "__main__":
    cli()
