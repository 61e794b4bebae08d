# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF log, run, tool, rule, and result models."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import Field

from sarifdoc.models.base import SarifModel
from sarifdoc.models.flow import CodeFlow, Stack
from sarifdoc.models.location import Location
from sarifdoc.models.message import Description


class Rule(SarifModel):
    """Describes a reporting item a tool can produce.

    ``id`` should be unique within its driver; duplicates are tolerated and
    lookups return the first one.
    """

    id: str = ""
    shortDescription: Description = Field(default_factory=Description)
    fullDescription: Description = Field(default_factory=Description)
    help: Description = Field(default_factory=Description)
    helpUri: str = ""
    properties: dict[str, Any] = Field(default_factory=dict)


class Driver(SarifModel):
    """The tool component containing the analyzer's primary executable."""

    name: str = ""
    semanticVersion: str = ""
    informationUri: str = ""
    properties: dict[str, Any] = Field(default_factory=dict)
    rules: list[Rule] = Field(default_factory=list)


class Tool(SarifModel):
    driver: Driver = Field(default_factory=Driver)


class Result(SarifModel):
    """A single finding.

    The rule is referenced by ``ruleId`` and resolved with
    :meth:`Log.find_rule`; results never hold the rule itself.
    """

    ruleId: str = ""
    level: str = ""
    message: Description = Field(default_factory=Description)
    locations: list[Location] = Field(default_factory=list)
    codeFlows: list[CodeFlow] = Field(default_factory=list)
    stacks: list[Stack] = Field(default_factory=list)


class Run(SarifModel):
    """One execution of an analysis tool and the results it produced."""

    tool: Tool = Field(default_factory=Tool)
    results: list[Result] = Field(default_factory=list)


class Log(SarifModel):
    """Top-level SARIF document."""

    version: str = ""
    schema_uri: str = Field(default="", alias="$schema")
    runs: list[Run] = Field(default_factory=list)

    def find_rule(self, rule_id: str) -> tuple[Rule, bool]:
        """Return the first rule with the given id across all runs.

        The second element reports whether a rule was found; when it is
        False the rule is an empty ``Rule()``.
        """
        for run in self.runs:
            for rule in run.tool.driver.rules:
                if rule.id == rule_id:
                    return rule, True
        return Rule(), False

    def rule_index(self) -> dict[str, Rule]:
        """Map every rule id to its rule, keeping the first of any duplicates."""
        index: dict[str, Rule] = {}
        for run in self.runs:
            for rule in run.tool.driver.rules:
                index.setdefault(rule.id, rule)
        return index

    def iter_results(self) -> Iterator[tuple[Run, Result]]:
        """Yield ``(run, result)`` pairs in document order."""
        for run in self.runs:
            for result in run.results:
                yield run, result
