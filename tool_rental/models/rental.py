from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Rental:
    """
    A single booking. Charges are derived once, at creation, from the
    tool's daily rate at that moment; the record is never amended.
    """
    rental_id: int
    tool_id: int
    renter_name: str
    start_date: str
    end_date: str
    days: int
    total_amount: Decimal
    commission: Decimal
    created_at: Optional[str] = None


@dataclass(frozen=True)
class RentalView:
    """A rental joined with the name of the tool it references."""
    rental: Rental
    tool_name: str


@dataclass(frozen=True)
class MonthlyCommission:
    month: str  # "YYYY-MM"
    rental_count: int
    total_commission: Decimal
