from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Optional

from tool_rental.models.rental import MonthlyCommission
from tool_rental.models.store import Store
from tool_rental.services.common import _store, as_datetime
from tool_rental.utils.constants import MONTH_FMT


class ReportService:
    """Aggregations for the association (commission) report."""

    def __init__(self, store: Optional[Store] = None):
        self.store = store if store is not None else _store()

    def monthly_commission_summary(self) -> list[MonthlyCommission]:
        """
        Rentals grouped by the calendar month of their start date:
        count and summed commission per month, most recent month first.
        """
        counts: dict[str, int] = defaultdict(int)
        commission: dict[str, Decimal] = defaultdict(Decimal)
        for r in self.store.list_rentals():
            month = as_datetime(r.get("start_date")).strftime(MONTH_FMT)
            counts[month] += 1
            commission[month] += Decimal(r.get("commission") or 0)

        return [
            MonthlyCommission(month=m, rental_count=counts[m], total_commission=commission[m])
            for m in sorted(counts, reverse=True)
        ]
