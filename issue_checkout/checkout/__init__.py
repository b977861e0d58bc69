"""Issue branch resolution and checkout."""

from .models import CheckoutOutcome, CheckoutRequest, CheckoutResult
from .resolver import BranchResolver, ResolverState

__all__ = [
    "BranchResolver",
    "CheckoutOutcome",
    "CheckoutRequest",
    "CheckoutResult",
    "ResolverState",
]
