"""Errors raised while resolving and checking out an issue branch."""

INDENT = "  "


class CheckoutError(Exception):
    """Base class for every failure of a checkout run."""


class FetchError(CheckoutError):
    """The remote could not be fetched."""


class ListError(CheckoutError):
    """Remote branches could not be listed."""


class NoBranchForIssueError(CheckoutError):
    """No remote branch follows the naming convention for the issue."""


class AmbiguousBranchError(CheckoutError):
    """Several remote branches match the issue."""

    def __init__(self, message: str, candidates: list[str]):
        super().__init__(message)
        self.candidates = candidates


class NotFoundError(CheckoutError):
    """The explicitly selected branch does not exist on the remote."""


class CheckoutCreateError(CheckoutError):
    """Creating the local tracking branch failed."""


class CheckoutSwitchError(CheckoutError):
    """Switching to the existing local branch failed."""


class MergeProbeError(CheckoutError):
    """Probing the local branch failed for a reason other than a missing ref."""


class NonFastForwardError(CheckoutError):
    """The local branch cannot be fast-forwarded to the remote branch."""

    def __init__(self, message: str, remote_branch: str):
        super().__init__(message)
        self.remote_branch = remote_branch


class RebaseError(CheckoutError):
    """Rebasing the local branch onto the remote branch failed."""


def format_error_chain(error: BaseException) -> str:
    """Render an error followed by its chain of causes.

    Each cause is listed under a ``Caused by:`` line and indented one level
    deeper than the error that wrapped it, so multi-line messages stay
    readable.

    Args:
        error: The outermost exception

    Returns:
        The formatted message
    """
    lines = str(error).splitlines() or [type(error).__name__]
    cause = error.__cause__
    depth = 0
    while cause is not None:
        depth += 1
        prefix = INDENT * depth
        lines.append(f"{INDENT * (depth - 1)}Caused by:")
        cause_lines = str(cause).splitlines() or [type(cause).__name__]
        lines.extend(f"{prefix}{line}" for line in cause_lines)
        cause = cause.__cause__
    return "\n".join(lines)
