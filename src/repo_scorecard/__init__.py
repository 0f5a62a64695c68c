"""
Repo Scorecard - heuristic security-practice checks for repositories.

Evaluates a GitHub repository against named checks (such as
Code-Review) and reports, per check, a verdict, a 0-10 confidence and
an error classification that separates failed fetches from missing
evidence.

Main entry points:
    - repo_scorecard.main: CLI entrypoint
    - repo_scorecard.checker.runner: run_check() / run_checks()
    - repo_scorecard.checks: init_checks() for the built-in registry
    - repo_scorecard.models.config: Config and load_env()
"""
