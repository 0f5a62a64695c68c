from __future__ import annotations

import sys

import typer
from pydantic import ValidationError
from typer.main import get_command

from repo_scorecard.checker.runner import run_checks
from repo_scorecard.checks import init_checks
from repo_scorecard.errors import UnknownCheckError
from repo_scorecard.integrations.github import (
    GitHubEvidenceProvider,
    get_github_client,
)
from repo_scorecard.models.check_request import CheckRequest
from repo_scorecard.models.config import Config, load_env
from repo_scorecard.models.run_params import RunParams
from repo_scorecard.ui.reporting import print_report, report_to_json
from repo_scorecard.utils.cancellation import CancelScope
from repo_scorecard.utils.logging import configure_logging, get_logger

cli = typer.Typer(add_completion=False, no_args_is_help=True)
logger = get_logger(__name__)


@cli.callback()
def root() -> None:
	"""
	Root callback for the repo-scorecard CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def run_impl(
    org_repo: str,
    checks: list[str] | None = None,
    timeout: int | None = None,
    threshold: float | None = None,
    output_json: bool = False,
) -> None:
	"""
	Evaluate checks for one repository and print the results.

	Parameters:
		org_repo: GitHub repository in 'owner/repo' format.
		checks: Check names to run; None runs every registered check.
		timeout: Override for the evaluation deadline in seconds.
		threshold: Override for the review threshold.
		output_json: Print JSON instead of a table.
	"""
	load_env()
	config = Config()
	configure_logging(config.log_level)
	try:
		params = RunParams(
		    org_repo=org_repo,
		    checks=checks,
		    timeout=timeout,
		    threshold=threshold,
		    output_json=output_json,
		)
	except ValidationError as exc:
		typer.echo(f"invalid arguments: {exc}", err=True)
		raise typer.Exit(code=2)
	config.apply_overrides(params)
	logger.info("evaluating %s (checks=%s, threshold=%s)", params.org_repo,
	            params.checks or "all", config.review_threshold)

	registry = init_checks()
	client = get_github_client(
	    config.github_token,
	    base_url=config.github_api_url,
	    timeout=config.request_timeout_seconds,
	)
	with GitHubEvidenceProvider(client, per_page=config.per_page,
	                            max_pages=config.max_pages) as provider:
		request = CheckRequest(
		    owner=params.owner,
		    repo=params.repo,
		    client=provider,
		    scope=CancelScope(config.check_timeout_seconds),
		    settings=config.check_settings,
		)
		try:
			report = run_checks(
			    request,
			    params.checks,
			    checks=registry,
			    max_workers=config.max_parallel_checks,
			)
		except UnknownCheckError as exc:
			typer.echo(str(exc), err=True)
			raise typer.Exit(code=2)

	if params.output_json:
		typer.echo(report_to_json(report))
	else:
		print_report(report)


@cli.command()
def run(
    org_repo: str,
    check: list[str] = typer.Option(
        None,
        "--check",
        "-c",
        help="Check to run (repeatable; default: all)",
    ),
    timeout: int = typer.Option(None, "--timeout",
                                help="Override evaluation timeout seconds"),
    threshold: float = typer.Option(None, "--threshold",
                                    help="Override review threshold (0-1]"),
    output_json: bool = typer.Option(False, "--json/--no-json",
                                     help="Print JSON instead of a table"),
) -> None:
	"""
	Evaluate checks for a given owner/repo.
	"""
	run_impl(org_repo, list(check) if check else None, timeout, threshold,
	         output_json)


@cli.command("list")
def list_checks() -> None:
	"""List registered check names."""
	for name in init_checks().names():
		typer.echo(name)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `run` when appropriate.

	Allows calling 'repo-scorecard owner/repo' without explicitly
	specifying the 'run' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	# default to run when first arg is not a command/option
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["run"] + args
	return _click_app.main(
	    args=args,
	    prog_name="repo-scorecard",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
