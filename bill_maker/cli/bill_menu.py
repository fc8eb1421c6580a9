# cli/bill_menu.py
from pathlib import Path

from bill_maker import config
from bill_maker.exceptions import EmptyBillError
from bill_maker.logic.entry_form import EntryForm
from bill_maker.logic.rates import rate_summary
from bill_maker.models.bill import BILL_TYPES, DESIGNATION_OPTIONS
from bill_maker.pdf.renderer import save_bill
from bill_maker.utils.date_helper import parse_iso_date
from bill_maker.utils.input_handler import get_choice, get_input
from bill_maker.utils.parse_utils import parse_serials


def show_bill(bill):
    print(f"\n[{bill.bill_type}]  {bill.bill_date.isoformat()}  ({rate_summary(bill.bill_type, bill.night_rate)})")
    if not bill.items:
        print("  (no entries)")
        return
    for i, it in enumerate(bill.items, start=1):
        print(f"{i:>3} | {it.name} | {it.card_no} | {it.designation} | {it.taka} | {it.remarks}")
    print(f"TOTAL = {bill.total()} Tk")


def add_entry(bill, directory):
    form = EntryForm()
    card = get_input("Card No")
    found = form.set_card_no(card, directory)
    if found is not None:
        print(f"  found: {found.name} ({found.designation})")
    form.name = get_input("Name", default=form.name or None)
    form.designation = get_choice("Designation", DESIGNATION_OPTIONS, form.designation)
    form.remarks = get_input("Remarks", allow_empty=True)

    item = form.submit(bill)
    if item is None:
        print("Name and card number are required.")
        return
    print(f"Added {item.name} ({item.card_no}) - {item.taka} Tk")


def remove_entries(bill):
    show_bill(bill)
    serials = parse_serials(get_input("Serial numbers to remove (e.g. 1,3-5)"), len(bill.items))
    ids = [bill.items[n - 1].id for n in serials]
    for item_id in ids:
        bill.remove_item(item_id)
    print(f"{len(ids)} entries removed.")


def change_bill_type(bill):
    bill.set_bill_type(get_choice("Bill type", BILL_TYPES, bill.bill_type))
    print(rate_summary(bill.bill_type, bill.night_rate))


def change_night_rate(bill):
    rate = get_choice("Night S/O rate", config.NIGHT_RATE_OPTIONS, bill.night_rate)
    bill.set_night_rate(rate)
    print(rate_summary(bill.bill_type, bill.night_rate))


def change_date(bill):
    text = get_input("Bill date (YYYY-MM-DD)", default=bill.bill_date.isoformat())
    try:
        bill.bill_date = parse_iso_date(text)
    except ValueError:
        print("Invalid date.")


def export_pdf(bill):
    try:
        final = bill.finalize()
    except EmptyBillError as exc:
        print(exc)
        return
    out_dir = get_input("Output folder", default=str(Path.cwd()))
    try:
        path = save_bill(final, out_dir)
    except OSError as exc:
        print(f"Could not save the PDF: {exc}")
        return
    print(f"Saved {path}")
