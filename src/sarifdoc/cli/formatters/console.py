# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output for SARIF results and rules."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from sarifdoc.core.constants import Level
from sarifdoc.models.log import Log, Result

LEVEL_COLORS = {
    Level.ERROR: "red",
    Level.WARNING: "yellow",
    Level.NOTE: "cyan",
    Level.NONE: "dim",
}


def _cell(value: str) -> str:
    # Document text may contain square brackets
    return escape(value) if value else "-"


def _first_location(result: Result) -> str:
    for location in result.locations:
        rendered = str(location.physicalLocation)
        if rendered:
            return rendered
    return ""


def results_table(log: Log, title: str = "Results") -> Table:
    """Build a table with one row per result, resolving each rule by id."""
    rules = log.rule_index()

    table = Table(title=title)
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Level")
    table.add_column("Location")
    table.add_column("Message")
    table.add_column("Rule Description", style="dim")

    for _run, result in log.iter_results():
        rule = rules.get(result.ruleId)
        table.add_row(
            _cell(result.ruleId),
            Text(result.level or "-", style=LEVEL_COLORS.get(result.level, "white")),
            _cell(_first_location(result)),
            _cell(result.message.text),
            _cell(rule.shortDescription.text) if rule is not None else "-",
        )

    return table


def rules_table(log: Log, title: str = "Rules") -> Table:
    """Build a table with one row per rule declared by any driver."""
    table = Table(title=title)
    table.add_column("Driver", style="bold")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Help URI", style="dim")

    for run in log.runs:
        driver = run.tool.driver
        for rule in driver.rules:
            table.add_row(
                _cell(driver.name),
                _cell(rule.id),
                _cell(rule.shortDescription.text),
                _cell(rule.helpUri),
            )

    return table


def print_results(log: Log) -> None:
    """Print the results of *log* as a table."""
    console = Console()
    result_count = sum(len(run.results) for run in log.runs)
    if not result_count:
        console.print("No results found.")
        return
    console.print(results_table(log, title=f"Results ({result_count})"))


def print_rules(log: Log) -> None:
    """Print the rules declared in *log* as a table."""
    console = Console()
    if not any(run.tool.driver.rules for run in log.runs):
        console.print("No rules found.")
        return
    console.print(rules_table(log))
