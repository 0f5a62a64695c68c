"""User interface components.

Key modules:
    - reporting: Rich table and JSON rendering of run reports
"""

from repo_scorecard.ui.reporting import (
    render_results_table,
    print_report,
    report_to_json,
)

__all__ = [
    "render_results_table",
    "print_report",
    "report_to_json",
]
