"""Standardized CLI option definitions for the checkout command.

Long options are accepted both in kebab-case and in the camelCase spelling
of the original tool (``--remoteName``).
"""

import typer

from ..git.branches import parse_issue_number, validate_remote_name


def _issue_number_callback(value: str) -> int:
    try:
        return parse_issue_number(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _remote_name_callback(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return validate_remote_name(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


ISSUE_NUMBER_ARGUMENT = typer.Argument(
    ...,
    metavar="ISSUE_NUMBER",
    help="Issue number, optionally prefixed with '#'",
    callback=_issue_number_callback,
)

REMOTE_NAME_OPTION = typer.Option(
    None,
    "--remote-name",
    "--remoteName",
    "-r",
    help="Remote to fetch from (defaults to GFC_REMOTE_NAME or 'origin')",
    callback=_remote_name_callback,
)

SELECT_BRANCH_OPTION = typer.Option(
    None,
    "--select-branch",
    "--selectBranch",
    hidden=True,
    help="Remote branch to use when several match the issue",
)

REBASE_OPTION = typer.Option(
    False,
    "--rebase",
    hidden=True,
    help="Rebase with autostash when the branch cannot be fast-forwarded",
)

CWD_OPTION = typer.Option(
    None,
    "--cwd",
    "-C",
    help="Git working copy to operate in (defaults to current directory)",
    exists=True,
    file_okay=False,
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log every git command to stderr"
)
