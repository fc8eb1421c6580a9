# logic/bill.py
from __future__ import annotations
import logging
from datetime import date
from typing import List, Optional

from bill_maker.config import DEFAULT_NIGHT_RATE
from bill_maker.exceptions import EmptyBillError
from bill_maker.logic.rates import compute_rate
from bill_maker.models.bill import BILL_TYPES, TIFFIN, EXECUTIVE, SUPPLY_OFFICER, BillItem, FinalizedBill
from bill_maker.utils.date_helper import format_bill_date

logger = logging.getLogger(__name__)


def designation_priority(designation: str) -> int:
    # executive first, then S/O, then everyone else
    if designation == EXECUTIVE:
        return 0
    if designation == SUPPLY_OFFICER:
        return 1
    return 2


class Bill:
    """
    The bill being assembled in the current session.

    bill_type / night_rate are bill-wide: changing either goes through
    set_bill_type / set_night_rate, which recompute every item's amount.
    """

    def __init__(self, directory=None, bill_type: str = TIFFIN,
                 bill_date: Optional[date] = None, night_rate: int = DEFAULT_NIGHT_RATE):
        if bill_type not in BILL_TYPES:
            raise ValueError(f"Unknown bill type: {bill_type!r}")
        self.directory = directory
        self.bill_type = bill_type
        self.bill_date = bill_date or date.today()
        self.night_rate = night_rate
        self.items: List[BillItem] = []

    def __len__(self):
        return len(self.items)

    def rate_for(self, designation: str) -> int:
        return compute_rate(self.bill_type, designation, self.night_rate)

    # ---------- items ----------
    def add_item(self, name: str, card_no: str, designation: str, remarks: str = "") -> Optional[BillItem]:
        name = (name or "").strip()
        card_no = (card_no or "").strip()
        if not name or not card_no:
            return None

        taka = self.rate_for(designation)
        item = BillItem(name=name, card_no=card_no, designation=designation,
                        taka=taka, remarks=remarks or "")
        self.items.append(item)
        # list.sort is stable: insertion order is kept inside a tier
        self.items.sort(key=lambda it: designation_priority(it.designation))

        if self.directory is not None:
            self.directory.upsert(name, card_no, designation, taka)
        return item

    def remove_item(self, item_id: str) -> None:
        self.items = [it for it in self.items if it.id != item_id]

    def clear_all(self) -> None:
        self.items = []

    # ---------- bill-wide parameters ----------
    def set_bill_type(self, bill_type: str) -> None:
        if bill_type not in BILL_TYPES:
            raise ValueError(f"Unknown bill type: {bill_type!r}")
        self.bill_type = bill_type
        self.recompute()

    def set_night_rate(self, rate: int) -> None:
        self.night_rate = int(rate)
        self.recompute()

    def recompute(self) -> None:
        for it in self.items:
            it.taka = self.rate_for(it.designation)
        logger.debug("Recomputed %d items for %s (night rate %s)",
                     len(self.items), self.bill_type, self.night_rate)

    # ---------- totals / output ----------
    def total(self) -> int:
        return sum(it.taka for it in self.items)

    def finalize(self) -> FinalizedBill:
        if not self.items:
            raise EmptyBillError()
        return FinalizedBill(
            bill_type=self.bill_type,
            date=format_bill_date(self.bill_date),
            items=list(self.items),
            total=self.total(),
        )
