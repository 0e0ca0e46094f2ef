"""Domain policies package."""

from .status import counts_as_cash, is_pending, is_revenue_sale, is_settled

__all__ = ["counts_as_cash", "is_pending", "is_revenue_sale", "is_settled"]
