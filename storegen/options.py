"""
Typed option sets for each generate command, plus amount coercion.
"""

from dataclasses import dataclass
from typing import Any, Optional

from storegen.config import Config


def coerce_amount(raw: Any, default: int) -> int:
    """
    Turn a raw positional amount into the number of items to generate.

    Missing, blank or non-numeric input falls back to the command default.
    Zero and negative numbers mean "generate nothing".

    Args:
        raw: Value as received from the command line (usually a string or None).
        default: The command's documented default amount.

    Returns:
        int: Amount to generate, never negative.
    """
    if raw is None:
        return default
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return default
    try:
        amount = int(raw)
    except (TypeError, ValueError):
        return default
    return max(amount, 0)


@dataclass
class ProductsOptions:
    amount: int = Config.DEFAULT_PRODUCTS


@dataclass
class OrdersOptions:
    """
    Options forwarded to the order generator.

    ``status`` is an order status identifier (e.g. "completed"); the date
    range and ``coupons`` values are passed through to the backend unparsed.
    """

    amount: int = Config.DEFAULT_ORDERS
    status: Optional[str] = None
    date_start: Optional[str] = None
    date_end: Optional[str] = None
    coupons: Optional[str] = None


@dataclass
class CustomersOptions:
    amount: int = Config.DEFAULT_CUSTOMERS


@dataclass
class CouponsOptions:
    amount: int = Config.DEFAULT_COUPONS
    min: int = Config.COUPON_MIN
    max: int = Config.COUPON_MAX


@dataclass
class TermsOptions:
    """
    Options for batch term generation.

    ``max_depth`` is the number of hierarchy levels (1 means all terms are
    top-level) and ``parent`` an existing term id to nest new terms under.
    Both only matter for hierarchical taxonomies.
    """

    taxonomy: str
    amount: int = Config.DEFAULT_TERMS
    max_depth: int = Config.TERM_MAX_DEPTH
    parent: int = Config.TERM_PARENT
