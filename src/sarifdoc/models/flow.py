# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Execution path and call stack models."""

from __future__ import annotations

from pydantic import Field

from sarifdoc.models.base import SarifModel
from sarifdoc.models.location import Location
from sarifdoc.models.message import Description


class ThreadFlowLocation(SarifModel):
    """A location visited while simulating or monitoring execution."""

    module: str = ""
    location: Location = Field(default_factory=Location)


class ThreadFlow(SarifModel):
    """Ordered locations along a single thread of execution."""

    locations: list[ThreadFlowLocation] = Field(default_factory=list)


class CodeFlow(SarifModel):
    """Progress of one or more programs through thread flows that lead to a result."""

    threadFlows: list[ThreadFlow] = Field(default_factory=list)
    message: Description = Field(default_factory=Description)


class Frame(SarifModel):
    module: str = ""
    location: Location = Field(default_factory=Location)


class Stack(SarifModel):
    """A call stack, innermost frame first."""

    message: Description = Field(default_factory=Description)
    frames: list[Frame] = Field(default_factory=list)
