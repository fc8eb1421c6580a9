# logic/rates.py
from bill_maker.config import DEFAULT_NIGHT_RATE
from bill_maker.models.bill import TIFFIN, HOLIDAY, DAILY_LABOUR, NIGHT_ENTERTAINMENT, LABOUR


def is_labour(designation: str) -> bool:
    return LABOUR in (designation or "")


def compute_rate(bill_type: str, designation: str, night_rate: int = DEFAULT_NIGHT_RATE) -> int:
    """
    Per-entry amount in Taka.

    TIFFIN               50 for everyone
    DAILY LABOUR        600 for everyone
    HOLIDAY             600 labour / 800 others (S/O, executives, ...)
    NIGHT ENTERTAINMENT 150 labour / night_rate others
    Unknown bill types are worth 0.
    """
    if bill_type == TIFFIN:
        return 50
    if bill_type == DAILY_LABOUR:
        return 600
    if bill_type == HOLIDAY:
        return 600 if is_labour(designation) else 800
    if bill_type == NIGHT_ENTERTAINMENT:
        return 150 if is_labour(designation) else night_rate
    return 0


def rate_summary(bill_type: str, night_rate: int = DEFAULT_NIGHT_RATE) -> str:
    if bill_type == TIFFIN:
        return "Fixed Rate: 50 Tk"
    if bill_type == DAILY_LABOUR:
        return "Fixed Rate: 600 Tk"
    if bill_type == HOLIDAY:
        return "S/O & Exec: 800 Tk | Labour: 600 Tk"
    if bill_type == NIGHT_ENTERTAINMENT:
        return f"S/O: {night_rate} Tk | Labour: 150 Tk"
    return "Manual Entry Mode"
