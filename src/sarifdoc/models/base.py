# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared base model for SARIF document entities."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


class SarifModel(BaseModel):
    """Frozen record whose empty fields are left out of the serialized form.

    Freezing blocks attribute assignment only; list and dict fields can
    still be changed in place and are not copied on construction.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Nested models are serialized first, so an all-empty child arrives as {}
        data = handler(self)
        return {key: value for key, value in data.items() if not _is_empty(value)}
