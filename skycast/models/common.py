"""Common helpers shared across models."""

import uuid
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def new_favorite_id() -> str:
    return uuid.uuid4().hex


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (21.5 -> 22, -2.5 -> -3).

    Works on the shortest decimal repr of the float, so 0.49999999999999994
    rounds to 0. Raises ValueError for NaN and OverflowError for infinities.
    """
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))
