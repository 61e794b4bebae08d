# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Format version, schema URI, and result level constants."""

from enum import StrEnum

SARIF_VERSION = "2.1.0"

SARIF_SCHEMA_URI = "https://json.schemastore.org/sarif-2.1.0.json"


class Level(StrEnum):
    NONE = "none"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"
