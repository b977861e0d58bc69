"""Settings read from the environment."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from .git.branches import validate_remote_name
from .git.runner import DEFAULT_SETTLE_DELAY

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class CheckoutSettings(BaseModel):
    """Runtime configuration for gfc.

    Values come from ``GFC_*`` environment variables; a ``.env`` file in the
    working directory is loaded by the CLI before these are read.
    """

    remote_name: str = Field("origin", description="Default remote to fetch")
    settle_delay: float = Field(
        DEFAULT_SETTLE_DELAY, description="Seconds to wait after each git call"
    )
    log_level: str = Field("WARNING", description="Logging level")
    log_file: Path | None = Field(None, description="Optional log file")

    @classmethod
    def from_env(cls) -> "CheckoutSettings":
        """Build settings from environment variables.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        raw_delay = os.getenv("GFC_SETTLE_DELAY")
        if raw_delay is None:
            settle_delay = DEFAULT_SETTLE_DELAY
        else:
            try:
                settle_delay = float(raw_delay)
            except ValueError:
                raise ValueError(
                    f"GFC_SETTLE_DELAY must be a number of seconds, got: {raw_delay}"
                ) from None
            if settle_delay < 0:
                raise ValueError(
                    f"GFC_SETTLE_DELAY must not be negative, got: {raw_delay}"
                )

        log_level = os.getenv("GFC_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"GFC_LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}, "
                f"got: {log_level}"
            )

        try:
            remote_name = validate_remote_name(os.getenv("GFC_REMOTE_NAME", "origin"))
        except ValueError as e:
            raise ValueError(f"GFC_REMOTE_NAME: {e}") from None

        log_file = os.getenv("GFC_LOG_FILE")
        return cls(
            remote_name=remote_name,
            settle_delay=settle_delay,
            log_level=log_level,
            log_file=Path(log_file) if log_file else None,
        )
