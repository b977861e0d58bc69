"""Git plumbing: command execution and branch naming."""

from .branches import (
    filter_issue_branches,
    issue_branch_pattern,
    local_branch_name,
    parse_branch_list,
    parse_issue_number,
    validate_remote_name,
)
from .runner import CommandError, CommandRunner, GitCommandRunner

__all__ = [
    "CommandError",
    "CommandRunner",
    "GitCommandRunner",
    "filter_issue_branches",
    "issue_branch_pattern",
    "local_branch_name",
    "parse_branch_list",
    "parse_issue_number",
    "validate_remote_name",
]
