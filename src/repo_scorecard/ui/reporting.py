"""
Report rendering utilities.

Renders a RunReport as a Rich table for the terminal or as JSON for
machine consumption.
"""

from __future__ import annotations

import json

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from repo_scorecard.models.check_result import CheckResult, MAX_CONFIDENCE
from repo_scorecard.models.run_report import RunReport


def _verdict_text(res: CheckResult) -> Text:
	if res.is_retryable:
		return Text("RETRY", style="yellow")
	if res.is_inconclusive:
		return Text("?", style="dim")
	if res.passed:
		return Text("PASS", style="green")
	return Text("FAIL", style="red")


def render_results_table(report: RunReport) -> Table:
	"""
	Build a Rich table with one row per check result.

	Parameters:
		report: The RunReport to render.

	Returns:
		A Table ready to print.
	"""
	table = Table(box=box.ROUNDED, title=report.repository, expand=False)
	table.add_column("Check", style="bold")
	table.add_column("Verdict")
	table.add_column("Confidence", justify="right")
	table.add_column("Classification")
	table.add_column("Detail", style="dim")
	for res in report.results:
		confidence = (f"{res.confidence}/{MAX_CONFIDENCE}"
		              if res.is_definitive else "-")
		table.add_row(
		    res.name,
		    _verdict_text(res),
		    confidence,
		    res.error.value,
		    res.message or "",
		)
	return table


def print_report(report: RunReport, console: Console | None = None) -> None:
	"""Print the report table to ``console`` (default: stdout)."""
	(console or Console()).print(render_results_table(report))


def report_to_json(report: RunReport) -> str:
	"""Serialize a report to indented JSON; exception causes are omitted."""
	return json.dumps(report.model_dump(mode="json"), indent=2)


__all__ = ["render_results_table", "print_report", "report_to_json"]
