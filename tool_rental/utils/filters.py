"""Jinja filters for money and date formatting."""
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

import pytz
from flask import current_app

from tool_rental.utils.constants import CENT, DATE_FMT


def fmt_money(value, currency: str | None = None) -> str:
    """Render an amount as '77.00 EUR'; non-numeric values are shown unchanged."""
    if value is None:
        return ""
    try:
        amount = Decimal(str(value)).quantize(CENT)
    except (InvalidOperation, ValueError):
        return str(value)
    currency = currency or current_app.config.get("CURRENCY", "")
    return f"{amount} {currency}".strip()


def fmt_local(value, tz_name: str | None = None) -> str:
    """
    Format a stored timestamp in the configured display timezone.
    Supports:
      - 'YYYY-MM-DD' (returned as a date, no conversion)
      - 'YYYY-MM-DDTHH:MM[:SS]' with or without offset / trailing 'Z'
    Naive timestamps are taken as UTC. On parse error the original value
    is returned so the page never goes blank.
    """
    if value is None:
        return ""
    s = str(value).strip()
    if not s:
        return ""

    if len(s) == 10:
        try:
            return datetime.strptime(s, DATE_FMT).strftime("%d/%m/%Y")
        except ValueError:
            return s

    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return s
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    try:
        tz = pytz.timezone(tz_name or current_app.config.get("DISPLAY_TIMEZONE", "UTC"))
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc
    return dt.astimezone(tz).strftime("%d/%m/%Y %H:%M")
