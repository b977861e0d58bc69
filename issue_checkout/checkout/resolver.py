"""Resolve the remote branch of an issue and reconcile the local checkout."""

import logging
import shlex
from enum import Enum

from ..errors import (
    AmbiguousBranchError,
    CheckoutCreateError,
    CheckoutSwitchError,
    FetchError,
    ListError,
    MergeProbeError,
    NoBranchForIssueError,
    NonFastForwardError,
    NotFoundError,
    RebaseError,
)
from ..git.branches import filter_issue_branches, local_branch_name, parse_branch_list
from ..git.runner import CommandError, CommandRunner
from .models import CheckoutOutcome, CheckoutRequest, CheckoutResult

logger = logging.getLogger(__name__)

# Exit code of `git show` when the revision does not exist
MISSING_REF_EXIT_CODE = 128


class ResolverState(str, Enum):
    """Progress of a single checkout run."""

    IDLE = "idle"
    FETCHED = "fetched"
    BRANCHES_LISTED = "branches_listed"
    BRANCH_SELECTED = "branch_selected"
    CREATED = "created"
    UPDATED = "updated"
    REBASED = "rebased"
    FAILED = "failed"


class BranchResolver:
    """Checks out the local branch that belongs to an issue.

    The resolver fetches the remote, picks the remote branch following the
    ``<remote>/<issue>-<slug>`` convention, then either creates a local
    tracking branch or switches to the existing one and fast-forwards it
    (rebasing with autostash when asked to).

    Usage:
        resolver = BranchResolver(GitCommandRunner())
        result = await resolver.checkout(
            CheckoutRequest(remote_name="origin", issue_number=42)
        )
    """

    def __init__(self, runner: CommandRunner):
        self.runner = runner
        self.state = ResolverState.IDLE

    async def checkout(self, request: CheckoutRequest) -> CheckoutResult:
        """Run the whole checkout for a request.

        Raises:
            CheckoutError: Any failure, with the underlying command error
                chained as its cause
        """
        self.state = ResolverState.IDLE
        try:
            await self._fetch(request.remote_name)
            branches = await self._list_remote_branches()
            remote_branch = self.select_branch(request, branches)
            local_branch = local_branch_name(
                remote_branch, request.remote_name, request.issue_number
            )
            if local_branch is None:
                raise NotFoundError(
                    f"Branch {remote_branch} does not belong to issue "
                    f"{request.issue_number}."
                )
            self.state = ResolverState.BRANCH_SELECTED
            logger.info("Selected %s for local branch %s", remote_branch, local_branch)

            if not await self._local_branch_exists(local_branch):
                return await self._create(local_branch, remote_branch)
            return await self._update(local_branch, remote_branch, request.rebase)
        except Exception:
            self.state = ResolverState.FAILED
            raise

    async def _fetch(self, remote_name: str) -> None:
        try:
            await self.runner.fetch(remote_name)
        except CommandError as e:
            raise FetchError("Failed to fetch remote repository") from e
        self.state = ResolverState.FETCHED

    async def _list_remote_branches(self) -> list[str]:
        try:
            output = await self.runner.run("git branch -r")
        except CommandError as e:
            raise ListError("Failed to list remote branches") from e
        self.state = ResolverState.BRANCHES_LISTED
        branches = parse_branch_list(output)
        logger.debug("Found %d remote branches", len(branches))
        return branches

    def select_branch(self, request: CheckoutRequest, branches: list[str]) -> str:
        """Pick the remote branch to check out.

        An explicit selector must name an existing remote branch, either in
        full (``origin/42-fix``) or without the remote prefix (``42-fix``).
        Otherwise exactly one branch must follow the naming convention for
        the issue.
        """
        if request.select_branch:
            wanted = request.select_branch
            candidates = {wanted, f"{request.remote_name}/{wanted}"}
            for branch in branches:
                if branch in candidates:
                    return branch
            raise NotFoundError(f"No branch named {wanted} exists.")

        matches = filter_issue_branches(
            branches, request.remote_name, request.issue_number
        )
        if not matches:
            raise NoBranchForIssueError(
                f"No branch found for issue {request.issue_number}. Please ensure "
                "the issue number is correct and that a branch has been created "
                "using default name settings."
            )
        if len(matches) > 1:
            listing = "\n".join(f"{i}. {name}" for i, name in enumerate(matches, 1))
            raise AmbiguousBranchError(
                f"{len(matches)} branches found for issue "
                f"{request.issue_number}:\n{listing}\n"
                "Select one with --select-branch <name>.",
                candidates=matches,
            )
        return matches[0]

    async def _local_branch_exists(self, local_branch: str) -> bool:
        try:
            await self.runner.run(shlex.join(["git", "show", local_branch]))
        except CommandError as e:
            if e.exit_code == MISSING_REF_EXIT_CODE:
                return False
            raise MergeProbeError(
                f"Failed to inspect local branch {local_branch}"
            ) from e
        return True

    async def _create(self, local_branch: str, remote_branch: str) -> CheckoutResult:
        try:
            await self.runner.run(
                shlex.join(["git", "checkout", "-b", local_branch, remote_branch])
            )
        except CommandError as e:
            raise CheckoutCreateError("Failed to checkout remote branch") from e
        self.state = ResolverState.CREATED
        return CheckoutResult(
            outcome=CheckoutOutcome.CREATED,
            local_branch=local_branch,
            remote_branch=remote_branch,
        )

    async def _update(
        self, local_branch: str, remote_branch: str, rebase: bool
    ) -> CheckoutResult:
        try:
            await self.runner.run(shlex.join(["git", "checkout", local_branch]))
        except CommandError as e:
            raise CheckoutSwitchError(
                f"Failed to switch to local branch {local_branch}"
            ) from e

        try:
            await self.runner.run(
                shlex.join(["git", "merge", "--ff-only", remote_branch])
            )
        except CommandError as merge_error:
            if not rebase:
                raise NonFastForwardError(
                    "Could not apply remote changes: History is non-fast forward.",
                    remote_branch=remote_branch,
                ) from merge_error
            logger.info("Fast-forward failed, rebasing onto %s", remote_branch)
            try:
                await self.runner.run(
                    shlex.join(["git", "rebase", remote_branch, "--autostash"])
                )
            except CommandError as e:
                raise RebaseError(
                    f"Failed to rebase on top of {remote_branch}"
                ) from e
            self.state = ResolverState.REBASED
            return CheckoutResult(
                outcome=CheckoutOutcome.UPDATED,
                local_branch=local_branch,
                remote_branch=remote_branch,
            )

        self.state = ResolverState.UPDATED
        return CheckoutResult(
            outcome=CheckoutOutcome.SWITCHED,
            local_branch=local_branch,
            remote_branch=remote_branch,
        )
