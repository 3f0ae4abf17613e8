"""Rental ledger: create and list rentals."""

import logging
from typing import Optional

from tool_rental.exceptions import ValidationError
from tool_rental.models.rental import Rental, RentalView
from tool_rental.models.store import Store
from tool_rental.services.common import _clean, _store, as_datetime, rental_from_dict
from tool_rental.services.pricing import rental_total
from tool_rental.services.tool_service import ToolService

logger = logging.getLogger(__name__)


class RentalService:
    """
    Book tools and read back the ledger.
    Charges come from services.pricing and are frozen on the rental row.
    """

    def __init__(self, store: Optional[Store] = None, tools: Optional[ToolService] = None):
        self.store = store if store is not None else _store()
        self.tools = tools or ToolService(self.store)

    def create_rental(self, tool_id, renter_name, start_date, end_date) -> Rental:
        """
        Rent a tool for [start_date, end_date).

        The rental row and the availability flip are written in one store
        transaction: if marking the tool unavailable fails, the rental row
        is rolled back and the error propagates.

        Raises:
            NotFound: the tool does not exist.
            ValidationError: blank renter, unparseable dates, or end <= start.
            StoreError: the rows could not be written.
        """
        tool = self.tools.get_tool(tool_id)

        renter_name = _clean(renter_name)
        if not renter_name:
            raise ValidationError("Renter name is required")
        start = as_datetime(start_date)
        end = as_datetime(end_date)

        quote = rental_total(start, end, tool.daily_rate)
        if quote.days <= 0:
            raise ValidationError("End date must be after start date")

        if not tool.available:
            # no double-booking guard: the booking goes through, but leave a trace
            logger.warning("Tool %s is already rented; booking it again for %s", tool.tool_id, renter_name)

        with self.store.transaction():
            rid = self.store.create_rental({
                "tool_id": tool.tool_id,
                "renter_name": renter_name,
                "start_date": _clean(str(start_date)),
                "end_date": _clean(str(end_date)),
                "days": quote.days,
                "total_amount": quote.total,
                "commission": quote.commission,
            })
            try:
                self.tools.mark_unavailable(tool.tool_id)
            except Exception:
                logger.exception(
                    "Rental %s for tool %s rolled back: could not mark the tool unavailable",
                    rid, tool.tool_id,
                )
                raise

        logger.info("Rental %s: tool %s to %s, %s days, total %s (commission %s)",
                    rid, tool.tool_id, renter_name, quote.days, quote.total, quote.commission)
        return rental_from_dict(self.store.get_rental(rid))

    def list_rentals(self) -> list[RentalView]:
        """Every rental with the name of its tool attached."""
        out = []
        for r in self.store.list_rentals():
            tool = self.store.get_tool(r.get("tool_id")) or {}
            out.append(RentalView(rental=rental_from_dict(r), tool_name=tool.get("name", "")))
        return out
