# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Exit codes returned by the sarifdoc CLI.

Exit codes:
    0 - OK: every document decoded and validated
    1 - INVALID: malformed content or unsupported version
    2 - IO_ERROR: a file could not be read or written
"""

from __future__ import annotations

from enum import IntEnum

from sarifdoc.core.exceptions import SarifError, SarifIOError


class ExitCode(IntEnum):
    """Exit codes used by the sarifdoc CLI."""

    OK = 0
    INVALID = 1
    IO_ERROR = 2


def error_to_exit_code(exc: SarifError) -> ExitCode:
    """Map a sarifdoc error to the exit code reported for it."""
    if isinstance(exc, SarifIOError):
        return ExitCode.IO_ERROR
    return ExitCode.INVALID
