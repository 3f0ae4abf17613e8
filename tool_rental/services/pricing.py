"""
Rental pricing: tiered commission and rental totals.

Both functions are pure. They accept any numeric rate (zero and negative
included) and never validate the day count; callers decide what to reject.
"""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from tool_rental.exceptions import ValidationError
from tool_rental.services.common import as_datetime, to_decimal
from tool_rental.utils.constants import CENT, COMMISSION_TIERS, SECONDS_PER_DAY, TOP_COMMISSION


class RentalQuote(NamedTuple):
    days: int
    commission: Decimal
    total: Decimal


def commission_for(daily_rate) -> Decimal:
    """
    Flat commission charged per rental, by daily rate:
      - rate <= 30       -> 2
      - 30 < rate <= 50  -> 5
      - rate > 50        -> 10
    """
    rate = to_decimal(daily_rate)
    for upper, commission in COMMISSION_TIERS:
        if rate <= upper:
            return commission
    return TOP_COMMISSION


def rental_days(start, end) -> int:
    """Whole days between start and end, rounded up; zero or negative when end <= start."""
    delta = as_datetime(end) - as_datetime(start)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def rental_total(start, end, daily_rate) -> RentalQuote:
    """total = days * daily_rate + commission, with the commission taken from the same rate."""
    rate = to_decimal(daily_rate)
    days = rental_days(start, end)
    commission = commission_for(rate)
    try:
        total = (days * rate + commission).quantize(CENT)
    except InvalidOperation:
        raise ValidationError(f"Amount out of range: {days} days at {rate}/day") from None
    return RentalQuote(days=days, commission=commission, total=total)
