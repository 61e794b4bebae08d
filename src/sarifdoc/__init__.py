# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""sarifdoc - SARIF 2.1.0 document models and codec."""

__version__ = "0.1.0"

from sarifdoc.codec import decode, decode_file, encode, encode_file
from sarifdoc.core.constants import SARIF_SCHEMA_URI, SARIF_VERSION, Level
from sarifdoc.core.exceptions import (
    SarifError,
    SarifIOError,
    SarifParseError,
    SarifValidationError,
    VersionMismatchError,
)
from sarifdoc.models import (
    ArtifactLocation,
    CodeFlow,
    Description,
    Driver,
    Frame,
    Location,
    Log,
    PhysicalLocation,
    Region,
    Result,
    Rule,
    Run,
    Stack,
    ThreadFlow,
    ThreadFlowLocation,
    Tool,
)

__all__ = [
    "SARIF_SCHEMA_URI",
    "SARIF_VERSION",
    "ArtifactLocation",
    "CodeFlow",
    "Description",
    "Driver",
    "Frame",
    "Level",
    "Location",
    "Log",
    "PhysicalLocation",
    "Region",
    "Result",
    "Rule",
    "Run",
    "SarifError",
    "SarifIOError",
    "SarifParseError",
    "SarifValidationError",
    "Stack",
    "ThreadFlow",
    "ThreadFlowLocation",
    "Tool",
    "VersionMismatchError",
    "__version__",
    "decode",
    "decode_file",
    "encode",
    "encode_file",
]
