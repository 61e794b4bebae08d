# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Encode SARIF documents to bytes or files."""

from __future__ import annotations

import logging
from pathlib import Path

from sarifdoc.codec.validation import apply_defaults
from sarifdoc.core.exceptions import SarifIOError
from sarifdoc.models.log import Log

logger = logging.getLogger("sarifdoc.codec.encoder")


def encode(log: Log, *, indent: int | None = None) -> bytes:
    """Serialize *log* to UTF-8 JSON after applying version and schema defaults.

    Empty fields are omitted. ``indent`` of None (or 0) writes compact JSON.

    Raises
    ------
    VersionMismatchError
        If ``log.version`` is set to anything other than ``2.1.0``.
    """
    defaulted = apply_defaults(log)
    text = defaulted.model_dump_json(by_alias=True, indent=indent or None)
    logger.debug("Encoded SARIF document with %d run(s)", len(defaulted.runs))
    return text.encode("utf-8")


def encode_file(log: Log, path: str | Path, *, indent: int | None = None) -> None:
    """Encode *log* and write it to *path*, replacing any existing file.

    Nothing is written when validation fails.

    Raises
    ------
    VersionMismatchError
        As for :func:`encode`.
    SarifIOError
        If the destination cannot be written.
    """
    data = encode(log, indent=indent)
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise SarifIOError(path, f"Cannot write {path}: {exc}") from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
