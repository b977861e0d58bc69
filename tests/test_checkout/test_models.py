"""Tests for checkout request and result models."""

import pytest
from pydantic import ValidationError

from issue_checkout.checkout import CheckoutOutcome, CheckoutRequest, CheckoutResult


class TestCheckoutRequest:
    """Test CheckoutRequest validation."""

    @pytest.mark.parametrize("raw", ["42", "#42", "  42 ", " #42", 42])
    def test_issue_number_forms(self, raw: str | int) -> None:
        """Test the accepted spellings of an issue number."""
        assert CheckoutRequest(issue_number=raw).issue_number == 42

    @pytest.mark.parametrize("raw", ["0", "042", "-3", "4 2", "abc", "##4", 0])
    def test_invalid_issue_numbers(self, raw: str | int) -> None:
        """Test that anything but a positive integer is rejected."""
        with pytest.raises(ValidationError, match="Invalid issue number"):
            CheckoutRequest(issue_number=raw)

    def test_defaults(self) -> None:
        """Test default values."""
        request = CheckoutRequest(issue_number=1)
        assert request.remote_name == "origin"
        assert request.select_branch is None
        assert request.rebase is False

    @pytest.mark.parametrize("remote", ["-x", "a b", "a;rm", "a..b", ""])
    def test_invalid_remote_names(self, remote: str) -> None:
        """Test that remote names unsafe for commands are rejected."""
        with pytest.raises(ValidationError, match="Invalid remote name"):
            CheckoutRequest(remote_name=remote, issue_number=1)

    def test_blank_selector_is_ignored(self) -> None:
        """Test that an empty selector behaves like no selector."""
        assert CheckoutRequest(issue_number=1, select_branch="  ").select_branch is None


class TestCheckoutResult:
    """Test CheckoutResult messages."""

    def test_created_message(self) -> None:
        result = CheckoutResult(
            outcome=CheckoutOutcome.CREATED,
            local_branch="42-fix",
            remote_branch="origin/42-fix",
        )
        assert result.message == "Successfully created and moved to branch 42-fix."
