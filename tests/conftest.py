"""Test configuration and fixtures."""

from collections.abc import Callable

import pytest

from issue_checkout.git.runner import CommandError


class FakeRunner:
    """In-memory CommandRunner recording every call.

    ``responses`` maps a command prefix to either the stdout to return or a
    CommandError to raise. Unmatched commands succeed with empty output.
    """

    def __init__(
        self,
        branches: list[str] | None = None,
        responses: dict[str, str | CommandError] | None = None,
        fetch_error: CommandError | None = None,
    ):
        self.calls: list[str] = []
        self.fetch_error = fetch_error
        self.responses = dict(responses or {})
        if branches is not None:
            self.responses.setdefault("git branch -r", "\n".join(branches))

    async def fetch(self, remote: str) -> None:
        self.calls.append(f"fetch {remote}")
        if self.fetch_error is not None:
            raise self.fetch_error

    async def run(self, command: str) -> str:
        self.calls.append(command)
        for prefix, response in self.responses.items():
            if command.startswith(prefix):
                if isinstance(response, CommandError):
                    raise response
                return response
        return ""


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    """Factory for FakeRunner instances."""
    return FakeRunner
