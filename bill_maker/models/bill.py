# models/bill.py
from dataclasses import dataclass, field
from typing import List

from bill_maker.models.employee import new_id

TIFFIN = "TIFFIN BILL"
HOLIDAY = "HOLIDAY BILL"
DAILY_LABOUR = "DAILY LABOUR BILL"
NIGHT_ENTERTAINMENT = "NIGHT ENTERTAINMENT BILL"
BILL_TYPES = [TIFFIN, HOLIDAY, DAILY_LABOUR, NIGHT_ENTERTAINMENT]

LABOUR = "LABOUR"
SUPPLY_OFFICER = "S/O"
EXECUTIVE = "JR. SUPPLY CHAIN EXECUTIVE"
DESIGNATION_OPTIONS = [SUPPLY_OFFICER, LABOUR, EXECUTIVE]


@dataclass
class BillItem:
    name: str
    card_no: str
    designation: str
    taka: int
    remarks: str = ""
    id: str = field(default_factory=new_id)


@dataclass(frozen=True)
class FinalizedBill:
    bill_type: str
    date: str                      # "DD-MM-YY"
    items: List[BillItem]
    total: int
