"""Main CLI entry point."""

import asyncio
import shlex
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..checkout import BranchResolver, CheckoutRequest
from ..config import CheckoutSettings
from ..errors import (
    AmbiguousBranchError,
    CheckoutError,
    NonFastForwardError,
    format_error_chain,
)
from ..git.runner import GitCommandRunner
from ..utils import checks
from ..utils.log import get_logger, setup_logging
from .options import (
    CWD_OPTION,
    ISSUE_NUMBER_ARGUMENT,
    REBASE_OPTION,
    REMOTE_NAME_OPTION,
    SELECT_BRANCH_OPTION,
    VERBOSE_OPTION,
)

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gfc",
    help="Checks out a branch, given its issue number",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)
logger = get_logger("cli")


def _version_callback(value: bool) -> None:
    if value:
        from issue_checkout import __version__

        console.print(f"issue-checkout v{__version__}")
        raise typer.Exit()


def relaunch_command(
    request: CheckoutRequest,
    cwd: Path | None = None,
    rebase: bool | None = None,
    select_branch: str | None = None,
) -> str:
    """Rebuild the command line to suggest after a recoverable failure.

    Every argument of the original invocation is kept; ``rebase`` and
    ``select_branch`` override the requested values when given.
    """
    args = ["gfc", str(request.issue_number), "--remote-name", request.remote_name]
    if cwd is not None:
        args += ["--cwd", str(cwd)]
    if rebase is None:
        rebase = request.rebase
    if rebase:
        args.append("--rebase")
    selector = select_branch or request.select_branch
    if selector:
        args += ["--select-branch", selector]
    return shlex.join(args)


def _print_failure(
    error: CheckoutError, request: CheckoutRequest, cwd: Path | None
) -> None:
    err_console.print(
        f"❌ Failed to checkout issue branch: {format_error_chain(error)}",
        style="red",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    hint = None
    if isinstance(error, AmbiguousBranchError):
        hint = relaunch_command(request, cwd, select_branch="<name>")
    elif isinstance(error, NonFastForwardError):
        hint = relaunch_command(request, cwd, rebase=True)
    if hint:
        err_console.print(
            f"\nRelaunch using: [cyan]{escape(hint)}[/cyan]",
            highlight=False,
            soft_wrap=True,
        )


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def checkout(
    # Converted to int by the argument callback
    issue_number: str = ISSUE_NUMBER_ARGUMENT,
    remote_name: str | None = REMOTE_NAME_OPTION,
    select_branch: str | None = SELECT_BRANCH_OPTION,
    rebase: bool = REBASE_OPTION,
    cwd: Path | None = CWD_OPTION,
    verbose: bool = VERBOSE_OPTION,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version information.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Checks out a branch, given its issue number.

    Fetches the remote, finds the branch named <remote>/<issue>-<slug>, then
    creates a local tracking branch or fast-forwards the existing one.

    Examples:
        gfc 42
        gfc '#42' --remote-name upstream
    """
    try:
        settings = CheckoutSettings.from_env()
    except ValueError as e:
        err_console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_file)

    if not checks.git() or not checks.work_tree(cwd):
        raise typer.Exit(1)

    try:
        request = CheckoutRequest(
            remote_name=remote_name or settings.remote_name,
            issue_number=issue_number,
            select_branch=select_branch,
            rebase=rebase,
        )
    except ValidationError as e:
        err_console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    logger.debug("Checkout request: %s", request)
    runner = GitCommandRunner(cwd=cwd, settle_delay=settings.settle_delay)
    resolver = BranchResolver(runner)
    try:
        result = asyncio.run(resolver.checkout(request))
    except CheckoutError as e:
        logger.debug("Checkout failed in state %s", resolver.state.value)
        _print_failure(e, request, cwd)
        raise typer.Exit(1)

    console.print(f"[green]✔ {escape(result.message)}[/green]", highlight=False)


if __name__ == "__main__":
    app()
