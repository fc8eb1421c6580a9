# cli/employee_menu.py
from pathlib import Path

from bill_maker.data.directory import backup_filename
from bill_maker.utils.input_handler import get_input


def employee_menu(directory):
    while True:
        print("\n[Employee Database]")
        print("1. List employees")
        print("2. Search")
        print("3. Export CSV")
        print("4. Import CSV")
        print("5. Clear database")
        print("0. Back")

        choice = input("Choice: ").strip()

        if choice == "1":
            show_employees(directory)
        elif choice == "2":
            search_employees(directory)
        elif choice == "3":
            export_employees(directory)
        elif choice == "4":
            import_employees(directory)
        elif choice == "5":
            clear_employees(directory)
        elif choice == "0":
            break
        else:
            print("Invalid choice.")


def show_employees(directory):
    print(f"\n[Employees: {len(directory)}]")
    for emp in directory:
        print(f"{emp.card_no} | {emp.name} | {emp.designation} | {emp.default_taka}")


def search_employees(directory):
    query = get_input("Name or card no")
    for emp in directory.search(query):
        print(f"{emp.card_no} | {emp.name} | {emp.designation}")


def export_employees(directory):
    path = Path(get_input("Export to", default=backup_filename()))
    try:
        path.write_text(directory.export_csv(), encoding="utf-8")
    except OSError as exc:
        print(f"Could not write {path}: {exc}")
        return
    print(f"{len(directory)} profiles exported to {path}")


def import_employees(directory):
    path = Path(get_input("CSV file"))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Could not read {path}: {exc}")
        return
    count = directory.import_merge(text)
    print(f"Database updated! Total profiles: {count}")


def clear_employees(directory):
    if get_input("Type YES to delete every profile", allow_empty=True) == "YES":
        directory.clear()
        print("Database cleared.")
