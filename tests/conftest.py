"""Shared pytest fixtures and configuration for the argv-scan test suite.

Guidelines
----------
* Core tests are pure — the scanner never touches real streams.
* CLI tests observe output through ``capsys`` only.
* Tests must not depend on ``sys.argv`` of the test runner.
"""

from __future__ import annotations
