"""Shared service helpers and factories."""

from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Optional

from flask import current_app

from tool_rental.exceptions import ValidationError
from tool_rental.models.rental import Rental
from tool_rental.models.store import Store
from tool_rental.models.tool import Tool
from tool_rental.utils.constants import CENT

STORE_KEY = "tool_rental.store"


def _store() -> Store:
    """Get the store the running app was built with."""
    return current_app.extensions[STORE_KEY]


def _naive_utc(dt: datetime) -> datetime:
    """Aware datetimes are converted to UTC before the offset is dropped."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.replace(tzinfo=None)


# -------- parsing & money helpers --------
def as_datetime(x) -> datetime:
    """
    Coerce a date-like to a naive UTC datetime.
    Accepts date/datetime objects, 'YYYY-MM-DD' and ISO strings with a time
    part, an offset or a trailing 'Z'.
    """
    if isinstance(x, datetime):
        return _naive_utc(x)
    if isinstance(x, date):
        return datetime(x.year, x.month, x.day)
    if isinstance(x, str) and x.strip():
        s = x.strip()
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        try:
            return _naive_utc(datetime.fromisoformat(s))
        except ValueError:
            pass
    raise ValidationError(f"Invalid date: {x!r} (expected YYYY-MM-DD)")


def to_decimal(value) -> Decimal:
    """Coerce int/float/str/Decimal to a finite Decimal; floats go through repr() to keep 30.01 exact."""
    if isinstance(value, Decimal):
        amount = value
    else:
        if isinstance(value, float):
            value = repr(value)
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, TypeError):
            raise ValidationError(f"Not a number: {value!r}") from None
    if not amount.is_finite():
        raise ValidationError(f"Not a number: {value!r}")
    return amount


def to_money(value) -> Decimal:
    """Coerce a number or numeric string to a Decimal with two fractional digits."""
    try:
        return to_decimal(value).quantize(CENT)
    except InvalidOperation:
        raise ValidationError(f"Amount out of range: {value!r}") from None


def to_id(value) -> Optional[int]:
    """Coerce a route/form id to int; None when it is not an integer."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def _clean(s) -> str:
    return (s or "").strip()


# -------- dict -> model mappers --------
def tool_from_dict(d: Optional[dict]) -> Optional[Tool]:
    """Map a stored tool row to a Tool."""
    if not d:
        return None
    return Tool(
        tool_id=d["tool_id"],
        name=d.get("name", ""),
        description=d.get("description") or "",
        daily_rate=Decimal(d.get("daily_rate") or 0),
        available=bool(d.get("available", True)),
    )


def rental_from_dict(d: Optional[dict]) -> Optional[Rental]:
    """Map a stored rental row to a Rental."""
    if not d:
        return None
    return Rental(
        rental_id=d["rental_id"],
        tool_id=d["tool_id"],
        renter_name=d.get("renter_name", ""),
        start_date=d.get("start_date", ""),
        end_date=d.get("end_date", ""),
        days=int(d.get("days") or 0),
        total_amount=Decimal(d.get("total_amount") or 0),
        commission=Decimal(d.get("commission") or 0),
        created_at=d.get("created_at"),
    )
