# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for sarifdoc."""

from __future__ import annotations

from pathlib import Path


class SarifError(Exception):
    """Base exception for all sarifdoc errors."""


class SarifIOError(SarifError):
    """Reading or writing a SARIF file failed."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = str(path)
        super().__init__(message)


class SarifParseError(SarifError):
    """Content is not valid JSON or does not match the document schema."""


class SarifValidationError(SarifError):
    """A structurally valid document failed validation."""


class VersionMismatchError(SarifValidationError):
    """The document version is not the supported SARIF version."""

    def __init__(self, version: str, expected: str) -> None:
        self.version = version
        self.expected = expected
        super().__init__(f"Unsupported SARIF version {version!r}, expected {expected!r}")
