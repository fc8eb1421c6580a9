# cli/menu.py
from bill_maker.cli.bill_menu import (
    show_bill, add_entry, remove_entries,
    change_bill_type, change_night_rate, change_date,
    export_pdf
)
from bill_maker.cli.employee_menu import employee_menu
from bill_maker.exceptions import CancelAction, GoBackAction
from bill_maker.utils.input_handler import get_input


def main_menu(bill, directory):
    while True:
        print(f"\n[Bill Maker - {bill.bill_type} - {len(bill)} entries, {bill.total()} Tk]")
        print("1. Add entry")
        print("2. Show bill")
        print("3. Remove entries")
        print("4. Clear bill")
        print("5. Bill type")
        print("6. Night S/O rate")
        print("7. Bill date")
        print("8. Generate PDF")
        print("9. Employee database")
        print("0. Quit")

        try:
            choice = get_input("Choice")
            if choice == "1":
                add_entry(bill, directory)
            elif choice == "2":
                show_bill(bill)
            elif choice == "3":
                remove_entries(bill)
            elif choice == "4":
                bill.clear_all()
                print("Bill cleared.")
            elif choice == "5":
                change_bill_type(bill)
            elif choice == "6":
                change_night_rate(bill)
            elif choice == "7":
                change_date(bill)
            elif choice == "8":
                export_pdf(bill)
            elif choice == "9":
                employee_menu(directory)
            elif choice == "0":
                print("Bye.")
                break
            else:
                print("Invalid choice.")
        except GoBackAction:
            print("Back to main menu")
        except CancelAction:
            print("Cancelled")
