from bill_maker.logic.bill import Bill
from bill_maker.logic.entry_form import EntryForm
from bill_maker.models.bill import EXECUTIVE, HOLIDAY


def test_card_418_forces_executive(directory):
    form = EntryForm()
    form.designation = "LABOUR"
    form.set_card_no("418", directory)
    assert form.designation == EXECUTIVE


def test_leaving_418_resets_to_so(directory):
    form = EntryForm()
    form.set_card_no("41", directory)
    form.set_card_no("418", directory)
    form.set_card_no("41", directory)
    assert form.designation == "S/O"


def test_leaving_418_keeps_a_changed_designation(directory):
    form = EntryForm()
    form.set_card_no("418", directory)
    form.designation = "LABOUR"
    form.set_card_no("41", directory)
    assert form.designation == "LABOUR"


def test_directory_hit_fills_and_normalizes(directory):
    directory.upsert("Rahim", "102", "LABOUR")
    directory.upsert("Karim", "103", "SUPERVISOR")

    form = EntryForm()
    form.set_card_no("102 ", directory)
    assert (form.name, form.designation) == ("Rahim", "LABOUR")

    form.set_card_no("103", directory)
    assert (form.name, form.designation) == ("Karim", "S/O")


def test_directory_hit_on_418_keeps_executive(directory):
    directory.upsert("Exec", "418", "S/O")
    form = EntryForm()
    form.set_card_no("418", directory)
    assert (form.name, form.designation) == ("Exec", EXECUTIVE)


def test_select_employee(directory):
    form = EntryForm()
    form.remarks = "old"
    form.select_employee(directory.upsert("Exec", "418", "S/O"))
    assert (form.card_no, form.designation, form.remarks) == ("418", EXECUTIVE, "")

    form.select_employee(directory.upsert("Foreman", "7", "FOREMAN"))
    assert form.designation == "S/O"


def test_submit_resets_form_but_keeps_designation(directory):
    bill = Bill(directory, bill_type=HOLIDAY)
    form = EntryForm()
    form.name = "Rahim"
    form.set_card_no("102", directory)
    form.designation = "LABOUR"
    assert form.current_rate(bill) == 600

    item = form.submit(bill)
    assert item.taka == 600
    assert (form.name, form.card_no, form.remarks) == ("", "", "")
    assert form.designation == "LABOUR"


def test_submit_incomplete_form_is_noop(directory):
    bill = Bill(directory)
    form = EntryForm()
    form.name = "Rahim"
    assert form.submit(bill) is None
    assert form.name == "Rahim"
