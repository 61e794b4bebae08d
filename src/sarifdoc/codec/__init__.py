# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Decode and encode SARIF documents with version validation."""

from sarifdoc.codec.decoder import decode, decode_file
from sarifdoc.codec.encoder import encode, encode_file
from sarifdoc.codec.validation import apply_defaults, validate_version

__all__ = [
    "apply_defaults",
    "decode",
    "decode_file",
    "encode",
    "encode_file",
    "validate_version",
]
