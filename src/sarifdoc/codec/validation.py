# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Version validation and schema defaulting shared by decoder and encoder."""

from __future__ import annotations

import logging

from sarifdoc.core.constants import SARIF_SCHEMA_URI, SARIF_VERSION
from sarifdoc.core.exceptions import VersionMismatchError
from sarifdoc.models.log import Log

logger = logging.getLogger("sarifdoc.codec.validation")


def validate_version(log: Log) -> None:
    """Raise VersionMismatchError unless the log declares SARIF 2.1.0."""
    if log.version != SARIF_VERSION:
        logger.warning("Rejecting SARIF document with version %r", log.version)
        raise VersionMismatchError(log.version, SARIF_VERSION)


def apply_defaults(log: Log) -> Log:
    """Return a copy of *log* ready to be written.

    An empty version becomes ``2.1.0`` and an empty ``$schema`` becomes the
    canonical schema URI. Any other version is rejected. The input is left
    untouched.
    """
    updates: dict[str, str] = {}
    if not log.version:
        updates["version"] = SARIF_VERSION
    if not log.schema_uri:
        updates["schema_uri"] = SARIF_SCHEMA_URI

    defaulted = log.model_copy(update=updates) if updates else log
    validate_version(defaulted)
    return defaulted
