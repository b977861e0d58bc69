"""Tests for the asyncio git command runner."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from issue_checkout.git.runner import CommandError, GitCommandRunner


class TestRun:
    """Test GitCommandRunner.run against a real shell."""

    @pytest.mark.asyncio
    async def test_returns_trimmed_stdout(self) -> None:
        runner = GitCommandRunner(settle_delay=0)
        assert await runner.run("printf '  hello\\n\\n'") == "hello"

    @pytest.mark.asyncio
    async def test_failure_keeps_exit_code_and_stderr(self) -> None:
        runner = GitCommandRunner(settle_delay=0)

        with pytest.raises(CommandError) as exc_info:
            await runner.run("echo 'no such ref' >&2; exit 128")

        error = exc_info.value
        assert error.exit_code == 128
        assert error.stderr == "no such ref"
        assert error.command == "echo 'no such ref' >&2; exit 128"
        assert "no such ref" in str(error)

    @pytest.mark.asyncio
    async def test_runs_in_working_directory(self, tmp_path) -> None:
        runner = GitCommandRunner(cwd=tmp_path, settle_delay=0)
        assert await runner.run("pwd -P") == str(tmp_path.resolve())

    @pytest.mark.asyncio
    async def test_settle_delay_after_every_call(self) -> None:
        """Test that the settle delay is awaited after success and failure."""
        runner = GitCommandRunner(settle_delay=0.15)
        with patch.object(runner, "_settle", new=AsyncMock()) as settle:
            await runner.run("true")
            with pytest.raises(CommandError):
                await runner.run("false")
        assert settle.await_count == 2


class TestFetch:
    """Test GitCommandRunner.fetch with a mocked subprocess."""

    @pytest.mark.asyncio
    async def test_fetch_success(self) -> None:
        process = Mock()
        process.wait = AsyncMock(return_value=0)
        runner = GitCommandRunner(settle_delay=0)

        with patch(
            "issue_checkout.git.runner.asyncio.create_subprocess_exec",
            new=AsyncMock(return_value=process),
        ) as create:
            await runner.fetch("upstream")

        args = create.await_args
        assert args.args == ("git", "fetch", "upstream")
        assert args.kwargs["stdin"] is None
        assert args.kwargs["stderr"] is None

    @pytest.mark.asyncio
    async def test_fetch_failure(self) -> None:
        process = Mock()
        process.wait = AsyncMock(return_value=1)
        runner = GitCommandRunner(settle_delay=0)

        with patch(
            "issue_checkout.git.runner.asyncio.create_subprocess_exec",
            new=AsyncMock(return_value=process),
        ):
            with pytest.raises(
                CommandError, match="Child process did not exit successfully: 1"
            ) as exc_info:
                await runner.fetch("origin")

        assert exc_info.value.exit_code == 1
        assert exc_info.value.command == "git fetch origin"

    @pytest.mark.asyncio
    async def test_settle_delay_after_fetch(self) -> None:
        """Test that fetch waits for the settle delay on success and failure."""
        succeeded = Mock()
        succeeded.wait = AsyncMock(return_value=0)
        failed = Mock()
        failed.wait = AsyncMock(return_value=128)
        runner = GitCommandRunner(settle_delay=0.15)

        with (
            patch(
                "issue_checkout.git.runner.asyncio.create_subprocess_exec",
                new=AsyncMock(side_effect=[succeeded, failed]),
            ),
            patch.object(runner, "_settle", new=AsyncMock()) as settle,
        ):
            await runner.fetch("origin")
            assert settle.await_count == 1
            with pytest.raises(CommandError):
                await runner.fetch("origin")

        assert settle.await_count == 2
