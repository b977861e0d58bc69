"""Issue branch naming convention.

Issue branches are published on a remote as ``<remote>/<issue>-<slug>``,
where the slug is made of ASCII letters, digits and dashes. The local branch
drops the remote prefix: ``<issue>-<slug>``.
"""

import re

ISSUE_NUMBER_PATTERN = re.compile(r"^\s*#?[1-9][0-9]*\s*$")
REMOTE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._][A-Za-z0-9._/-]*$")
SLUG_PATTERN = r"[A-Za-z0-9-]+"


def parse_issue_number(value: str | int) -> int:
    """Parse an issue number as typed by a user.

    Accepts surrounding whitespace and a leading ``#`` (``" #42 "``).

    Args:
        value: Raw issue number

    Returns:
        The positive issue number

    Raises:
        ValueError: If the value is not a positive integer
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid issue number: integer expected, got: {value}")
    if isinstance(value, int):
        if value < 1:
            raise ValueError(f"Invalid issue number: integer expected, got: {value}")
        return value
    if not ISSUE_NUMBER_PATTERN.match(value):
        raise ValueError(f"Invalid issue number: integer expected, got: {value}")
    return int(value.strip().lstrip("#"))


def validate_remote_name(value: str) -> str:
    """Check that a remote name is safe to use in commands and patterns."""
    name = value.strip()
    if not REMOTE_NAME_PATTERN.match(name) or ".." in name:
        raise ValueError(f"Invalid remote name: {value!r}")
    return name


def issue_branch_pattern(remote_name: str, issue_number: int) -> re.Pattern[str]:
    """Build the pattern matching remote branches of an issue.

    The single capture group is the local branch name.
    """
    return re.compile(
        rf"^{re.escape(remote_name)}/({issue_number}-{SLUG_PATTERN})$"
    )


def parse_branch_list(output: str) -> list[str]:
    """Split ``git branch -r`` output into trimmed branch names."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def filter_issue_branches(
    branches: list[str], remote_name: str, issue_number: int
) -> list[str]:
    """Keep the remote branches that belong to an issue, in listing order."""
    pattern = issue_branch_pattern(remote_name, issue_number)
    return [branch for branch in branches if pattern.match(branch)]


def local_branch_name(
    remote_branch: str, remote_name: str, issue_number: int
) -> str | None:
    """Extract the local branch name from a remote issue branch.

    Returns:
        ``<issue>-<slug>``, or None if the branch does not follow the
        naming convention
    """
    match = issue_branch_pattern(remote_name, issue_number).match(remote_branch)
    if match is None:
        return None
    return match.group(1)
