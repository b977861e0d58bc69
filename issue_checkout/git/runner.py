"""Asynchronous execution of git commands."""

import asyncio
import logging
import shlex
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Time to let the OS flush and settle output after each external command
DEFAULT_SETTLE_DELAY = 0.15


class CommandError(Exception):
    """An external command exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        exit_code: int | None = None,
        command: str | None = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.exit_code = exit_code
        self.command = command
        self.stderr = stderr


class CommandRunner(Protocol):
    """Capability to run git against the working copy."""

    async def fetch(self, remote: str) -> None:
        """Fetch a remote, raising CommandError on failure."""
        ...

    async def run(self, command: str) -> str:
        """Run a shell command and return its trimmed stdout.

        Raises:
            CommandError: If the command exits with a non-zero status
        """
        ...


class GitCommandRunner:
    """Runs commands one at a time through asyncio subprocesses.

    Every call, successful or not, is followed by a fixed settle delay.
    """

    def __init__(
        self,
        cwd: Path | None = None,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
    ):
        self.cwd = cwd
        self.settle_delay = settle_delay

    async def fetch(self, remote: str) -> None:
        """Fetch a remote with progress shown on the terminal's stderr."""
        logger.debug("Fetching remote %s", remote)
        try:
            # stdin and stderr inherited so git can prompt for credentials
            process = await asyncio.create_subprocess_exec(
                "git",
                "fetch",
                remote,
                cwd=self.cwd,
                stdin=None,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=None,
            )
            code = await process.wait()
            if code != 0:
                raise CommandError(
                    f"Child process did not exit successfully: {code}",
                    exit_code=code,
                    command=shlex.join(["git", "fetch", remote]),
                )
        finally:
            await self._settle()

    async def run(self, command: str) -> str:
        """Run a command through the shell, capturing its output."""
        logger.debug("Running: %s", command)
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                cwd=self.cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await process.communicate()
            error_output = stderr.decode(errors="replace").strip()
            if process.returncode != 0:
                logger.debug(
                    "Command exited with %s: %s", process.returncode, error_output
                )
                message = f"Command failed: {command}"
                if error_output:
                    message = f"{message}\n{error_output}"
                raise CommandError(
                    message,
                    exit_code=process.returncode,
                    command=command,
                    stderr=error_output,
                )
            return stdout.decode(errors="replace").strip()
        finally:
            await self._settle()

    async def _settle(self) -> None:
        if self.settle_delay > 0:
            await asyncio.sleep(self.settle_delay)
