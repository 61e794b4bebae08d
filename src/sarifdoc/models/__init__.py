# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 document models."""

from sarifdoc.models.flow import CodeFlow, Frame, Stack, ThreadFlow, ThreadFlowLocation
from sarifdoc.models.location import ArtifactLocation, Location, PhysicalLocation, Position, Region
from sarifdoc.models.log import Driver, Log, Result, Rule, Run, Tool
from sarifdoc.models.message import Description

__all__ = [
    "ArtifactLocation",
    "CodeFlow",
    "Description",
    "Driver",
    "Frame",
    "Location",
    "Log",
    "PhysicalLocation",
    "Position",
    "Region",
    "Result",
    "Rule",
    "Run",
    "Stack",
    "ThreadFlow",
    "ThreadFlowLocation",
    "Tool",
]
