# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Source locations: artifacts, regions, and their string rendering."""

from __future__ import annotations

import posixpath
from typing import Annotated

from pydantic import AfterValidator, Field

from sarifdoc.models.base import SarifModel
from sarifdoc.models.message import Description


def _zero_as_absent(value: int | None) -> int | None:
    """Map the persisted ``0`` placeholder to ``None``.

    Runs after int coercion, so ``0.0`` and ``"0"`` count as zero too.
    """
    if value == 0:
        return None
    return value


# A 1-based line or column number; None when the producer did not supply one.
Position = Annotated[int | None, AfterValidator(_zero_as_absent)]


class ArtifactLocation(SarifModel):
    """Identifies an artifact (usually a file).

    ``uri`` is relative to the root named by ``uriBaseId`` when one is set.
    """

    uri: str = ""
    uriBaseId: str = ""


class Region(SarifModel):
    """A contiguous line/column span within an artifact."""

    startLine: Position = None
    startColumn: Position = None
    endLine: Position = None
    endColumn: Position = None


def _join_uri(base: str, uri: str) -> str:
    parts = [p for p in (base, uri) if p]
    if not parts:
        return ""
    joined = posixpath.normpath("/".join(parts))
    # normpath keeps a leading "//"; path cleaning collapses it to one slash
    if joined.startswith("//"):
        joined = "/" + joined.lstrip("/")
    return joined


class PhysicalLocation(SarifModel):
    """Artifact plus region where a result was detected."""

    artifactLocation: ArtifactLocation = Field(default_factory=ArtifactLocation)
    region: Region = Field(default_factory=Region)

    def is_empty(self) -> bool:
        """Return True for the all-empty value, which stands for "no location"."""
        return self == PhysicalLocation()

    def __str__(self) -> str:
        """Render as ``base/uri[:startLine[:startColumn][,endLine[:endColumn]]]``.

        Column and end positions are only emitted when ``startLine`` is
        present, and ``endColumn`` only together with ``endLine``.
        """
        if self.is_empty():
            return ""

        s = _join_uri(self.artifactLocation.uriBaseId, self.artifactLocation.uri)
        region = self.region
        if region.startLine:
            s += f":{region.startLine}"
            if region.startColumn:
                s += f":{region.startColumn}"
            if region.endLine:
                s += f",{region.endLine}"
                if region.endColumn:
                    s += f":{region.endColumn}"

        return s


class Location(SarifModel):
    """A physical location plus a message relevant to it."""

    physicalLocation: PhysicalLocation = Field(default_factory=PhysicalLocation)
    message: Description = Field(default_factory=Description)
