from datetime import date

import pytest

from bill_maker.cli import bill_menu
from bill_maker.exceptions import CancelAction
from bill_maker.logic.bill import Bill
from bill_maker.models.bill import HOLIDAY
from bill_maker.utils.date_helper import format_bill_date, parse_iso_date
from bill_maker.utils.input_handler import get_choice, get_input
from bill_maker.utils.parse_utils import parse_serials


@pytest.fixture
def answers(monkeypatch):
    queue = []
    monkeypatch.setattr("builtins.input", lambda prompt="": queue.pop(0))
    return queue


def test_parse_serials():
    assert parse_serials("1, 2,3", 5) == [1, 2, 3]
    assert parse_serials("3,x,3,,1", 5) == [1, 3]
    assert parse_serials("2-4", 10) == [2, 3, 4]
    assert parse_serials("5-3, 9", 4) == [3, 4]
    assert parse_serials("0, 7, 1-", 6) == []
    assert parse_serials("  ", 3) == []


def test_dates():
    assert format_bill_date(date(2025, 8, 3)) == "03-08-25"
    assert parse_iso_date("2025-12-31") == date(2025, 12, 31)


def test_get_input_default_and_cancel(answers):
    answers.extend(["", "cancel"])
    assert get_input("Name", default="x") == "x"
    with pytest.raises(CancelAction):
        get_input("Name")


def test_add_entry_from_menu(directory, answers, capsys):
    bill = Bill(directory)
    answers.extend(["101", "John Doe", "", "late"])
    bill_menu.add_entry(bill, directory)

    assert [(i.name, i.card_no, i.designation, i.taka, i.remarks) for i in bill.items] == [
        ("John Doe", "101", "S/O", 50, "late")
    ]
    assert directory.find("101") is not None
    assert "Added John Doe" in capsys.readouterr().out


def test_remove_entries_by_serial(answers):
    bill = Bill()
    for n in range(3):
        bill.add_item(f"W{n}", str(n + 1), "S/O")
    answers.append("1,3,9")
    bill_menu.remove_entries(bill)
    assert [i.name for i in bill.items] == ["W1"]


def test_change_bill_type(answers):
    bill = Bill()
    bill.add_item("John", "101", "S/O")
    answers.append("2")
    bill_menu.change_bill_type(bill)
    assert bill.bill_type == HOLIDAY
    assert bill.total() == 800


def test_export_pdf_empty_bill(capsys):
    bill_menu.export_pdf(Bill())
    assert "Please add at least one entry." in capsys.readouterr().out


def test_get_choice_asks_again_on_bad_pick(answers, capsys):
    answers.extend(["x", "9", "2"])
    assert get_choice("Night S/O rate", [350, 250], 350) == 250
    assert capsys.readouterr().out.count("Pick a number from 1 to 2.") == 2


def test_get_choice_enter_keeps_current(answers):
    answers.append("")
    assert get_choice("Designation", ["S/O", "LABOUR"], "LABOUR") == "LABOUR"


def test_remove_entries_by_range(answers):
    bill = Bill()
    for n in range(5):
        bill.add_item(f"W{n}", str(n + 1), "S/O")
    answers.append("2-4")
    bill_menu.remove_entries(bill)
    assert [i.name for i in bill.items] == ["W0", "W4"]


def test_export_pdf_unwritable_folder(answers, tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    bill = Bill()
    bill.add_item("John", "101", "S/O")
    answers.append(str(blocker / "sub"))
    bill_menu.export_pdf(bill)
    assert "Could not save the PDF" in capsys.readouterr().out
