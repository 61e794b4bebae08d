# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Multi-format message text."""

from __future__ import annotations

from sarifdoc.models.base import SarifModel


class Description(SarifModel):
    """Plain text and GitHub-Flavored Markdown renderings of one message."""

    text: str = ""
    markdown: str = ""
