# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Decode SARIF documents from bytes or files."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from sarifdoc.codec.validation import validate_version
from sarifdoc.core.exceptions import SarifIOError, SarifParseError
from sarifdoc.models.log import Log

logger = logging.getLogger("sarifdoc.codec.decoder")


def decode(data: bytes | str) -> Log:
    """Parse a SARIF document.

    Parameters
    ----------
    data:
        JSON content, as UTF-8 bytes or text.

    Returns
    -------
    The decoded Log. Its ``version`` is always ``2.1.0``.

    Raises
    ------
    SarifParseError
        If the content is not JSON or does not match the document schema.
    VersionMismatchError
        If the document does not declare version ``2.1.0``.
    """
    try:
        log = Log.model_validate_json(data)
    except ValidationError as exc:
        raise SarifParseError(f"Failed to parse SARIF document: {exc}") from exc

    validate_version(log)
    logger.debug("Decoded SARIF document with %d run(s)", len(log.runs))
    return log


def decode_file(path: str | Path) -> Log:
    """Read a SARIF document from disk and decode it.

    Raises
    ------
    SarifIOError
        If the file cannot be read.
    SarifParseError, VersionMismatchError
        As for :func:`decode`.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise SarifIOError(path, f"Cannot read {path}: {exc}") from exc

    logger.debug("Read %d bytes from %s", len(data), path)
    return decode(data)
