# utils/date_helper.py
from datetime import date, datetime


def format_bill_date(d: date) -> str:
    """date(2025, 8, 3) -> '03-08-25'"""
    return d.strftime("%d-%m-%y")


def parse_iso_date(text: str) -> date:
    return datetime.strptime(text.strip(), "%Y-%m-%d").date()
