# logic/entry_form.py
from __future__ import annotations
from typing import List, Optional

from bill_maker.models.bill import EXECUTIVE, LABOUR, SUPPLY_OFFICER, BillItem
from bill_maker.models.employee import Employee

# card 418 always belongs to the supply chain executive
SPECIAL_CARD_NO = "418"


def normalize_designation(designation: str) -> str:
    # the form only offers LABOUR / S/O for directory hits
    return LABOUR if designation == LABOUR else SUPPLY_OFFICER


class EntryForm:
    """
    State of the 'new entry' form.

    Typing a card number can rewrite the designation:
      - "418"                        -> executive title
      - leaving "418" while executive -> back to S/O
      - known card (not 418)         -> name filled, designation LABOUR / S/O
    """

    def __init__(self):
        self.name = ""
        self.card_no = ""
        self.designation = SUPPLY_OFFICER
        self.remarks = ""

    def set_card_no(self, value: str, directory=None) -> Optional[Employee]:
        trimmed = value.strip()
        previous = self.card_no.strip()
        self.card_no = value

        if trimmed == SPECIAL_CARD_NO:
            self.designation = EXECUTIVE
        elif previous == SPECIAL_CARD_NO and self.designation == EXECUTIVE:
            self.designation = SUPPLY_OFFICER

        found = directory.find(trimmed) if (directory is not None and trimmed) else None
        if found is not None:
            self.name = found.name
            if trimmed != SPECIAL_CARD_NO:
                self.designation = normalize_designation(found.designation)
        return found

    def select_employee(self, emp: Employee) -> None:
        self.name = emp.name
        self.card_no = emp.card_no
        if emp.card_no == SPECIAL_CARD_NO:
            self.designation = EXECUTIVE
        else:
            self.designation = normalize_designation(emp.designation)
        self.remarks = ""

    def suggestions(self, query: str, directory) -> List[Employee]:
        return directory.search(query)

    def current_rate(self, bill) -> int:
        return bill.rate_for(self.designation)

    def submit(self, bill) -> Optional[BillItem]:
        item = bill.add_item(self.name, self.card_no, self.designation, self.remarks)
        if item is not None:
            self.name = ""
            self.card_no = ""
            self.remarks = ""
        return item
