# data/directory.py
from __future__ import annotations
import json
import logging
from datetime import date
from typing import List, Optional

from bill_maker import config
from bill_maker.models.employee import Employee, new_id

logger = logging.getLogger(__name__)

CSV_HEADER = "Name,CardNo,Designation,DefaultTaka"


def backup_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"tusuka_db_backup_{today.isoformat()}.csv"


def _parse_taka(raw: str) -> int:
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        return 0


class EmployeeDirectory:
    """
    Known employees keyed by card number, mirrored to a key-value store.

    Every mutating call saves before returning (write-through); there is
    no batching and no dirty flag.
    """

    def __init__(self, store, key: str = config.EMPLOYEE_STORE_KEY):
        self.store = store
        self.key = key
        self.employees: List[Employee] = []
        self.load_from_store()

    def __len__(self):
        return len(self.employees)

    def __iter__(self):
        return iter(self.employees)

    # ---------- persistence ----------
    def load_from_store(self) -> None:
        raw = self.store.get(self.key)
        if not raw:
            self.employees = []
            return
        try:
            data = json.loads(raw)
            self.employees = [Employee.from_dict(item) for item in data]
        except (ValueError, TypeError, AttributeError):
            logger.warning("Employee store %r is unreadable, starting empty", self.key, exc_info=True)
            self.employees = []

    def save_to_store(self) -> bool:
        """False when the store refused the write; memory stays authoritative."""
        payload = [e.to_dict() for e in self.employees]
        try:
            self.store.set(self.key, json.dumps(payload, ensure_ascii=False))
        except OSError:
            logger.warning("Could not save employee store %r", self.key, exc_info=True)
            return False
        return True

    # ---------- lookup ----------
    def find(self, card_no: str) -> Optional[Employee]:
        card_no = card_no.strip()
        return next((e for e in self.employees if e.card_no.strip() == card_no), None)

    def search(self, query: str) -> List[Employee]:
        if not query:
            return []
        lower = query.lower()
        matches = [e for e in self.employees
                   if lower in e.name.lower() or lower in e.card_no]

        def is_exact(e):
            return e.card_no == query or e.name.lower() == lower

        # sorted() is stable: exact matches first, otherwise directory order
        matches = sorted(matches, key=lambda e: 0 if is_exact(e) else 1)
        return matches[:config.SUGGESTION_LIMIT]

    # ---------- mutation ----------
    def upsert(self, name: str, card_no: str, designation: str, default_taka: int = 0) -> Employee:
        card_no = card_no.strip()
        emp = self.find(card_no)
        if emp is None:
            emp = Employee(new_id(), name, card_no, designation, default_taka)
            self.employees.append(emp)
        else:
            emp.name = name
            emp.designation = designation
            emp.default_taka = default_taka
        self.save_to_store()
        return emp

    def clear(self) -> None:
        self.employees = []
        self.save_to_store()

    # ---------- CSV ----------
    def export_csv(self) -> str:
        rows = [CSV_HEADER]
        rows += [f"{e.name},{e.card_no},{e.designation},{e.default_taka}" for e in self.employees]
        return "\n".join(rows)

    def import_merge(self, text: str) -> int:
        """
        Merge CSV rows into the directory and return the new record count.

        The first line is treated as the header. Rows with fewer than three
        columns are skipped; an imported row replaces an existing record
        with the same card number but keeps its position.
        """
        imported = []
        for lineno, line in enumerate(text.split("\n")[1:], start=2):
            line = line.strip()
            if not line:
                continue
            cols = line.split(",")
            if len(cols) < 3:
                logger.debug("Skipping import line %d: %r", lineno, line)
                continue
            taka = _parse_taka(cols[3].strip()) if len(cols) > 3 and cols[3].strip() else 0
            imported.append(Employee(new_id(), cols[0].strip(), cols[1].strip(), cols[2].strip(), taka))

        merged = {e.card_no.strip(): e for e in self.employees}
        for e in imported:
            merged[e.card_no] = e
        self.employees = list(merged.values())
        self.save_to_store()
        logger.info("Imported %d rows, directory now holds %d", len(imported), len(self.employees))
        return len(self.employees)
