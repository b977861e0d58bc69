"""Pydantic models describing a checkout run."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..git.branches import parse_issue_number, validate_remote_name


class CheckoutRequest(BaseModel):
    """What the user asked for."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    remote_name: str = Field("origin", description="Remote to fetch from")
    issue_number: int = Field(..., description="Issue the branch belongs to")
    select_branch: str | None = Field(
        None, description="Explicit branch when several match the issue"
    )
    rebase: bool = Field(
        False, description="Rebase when the branch cannot be fast-forwarded"
    )

    @field_validator("issue_number", mode="before")
    @classmethod
    def validate_issue_number(cls, v: str | int) -> int:
        return parse_issue_number(v)

    @field_validator("remote_name")
    @classmethod
    def validate_remote(cls, v: str) -> str:
        return validate_remote_name(v)

    @field_validator("select_branch")
    @classmethod
    def validate_select_branch(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class CheckoutOutcome(str, Enum):
    """How the local branch was brought up to date."""

    CREATED = "created"
    SWITCHED = "switched"
    UPDATED = "updated"


class CheckoutResult(BaseModel):
    """Result of a successful checkout."""

    outcome: CheckoutOutcome
    local_branch: str
    remote_branch: str

    @property
    def message(self) -> str:
        if self.outcome == CheckoutOutcome.CREATED:
            return f"Successfully created and moved to branch {self.local_branch}."
        if self.outcome == CheckoutOutcome.UPDATED:
            return f"Successfully updated local branch {self.local_branch}."
        return f"Successfully switched to local branch {self.local_branch}."
