# gui/main_window.py
import logging
from datetime import date
from pathlib import Path

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QToolBar, QPushButton,
    QLabel, QTableWidget, QTableWidgetItem, QMessageBox, QLineEdit, QComboBox,
    QGroupBox, QGridLayout, QHeaderView, QAbstractItemView, QDateEdit,
    QListWidget, QListWidgetItem, QFileDialog, QSplitter
)
from PySide6.QtCore import Qt, QDate
from PySide6.QtGui import QAction

from bill_maker import config
from bill_maker.data.data_manager import JsonFileStore
from bill_maker.data.directory import EmployeeDirectory, backup_filename
from bill_maker.exceptions import EmptyBillError
from bill_maker.logic.bill import Bill
from bill_maker.logic.entry_form import EntryForm
from bill_maker.logic.rates import rate_summary
from bill_maker.models.bill import BILL_TYPES, DESIGNATION_OPTIONS, NIGHT_ENTERTAINMENT
from bill_maker.pdf.renderer import bill_filename, render_bill

logger = logging.getLogger(__name__)

ITEM_COLUMNS = ["SL", "NAME", "CARD/NO", "DESIGNATION", "TAKA", "REMARKS", ""]


class MainWindow(QMainWindow):
    def __init__(self, store=None):
        super().__init__()
        self.setWindowTitle("Bill Maker")
        self.resize(1180, 760)

        self.directory = EmployeeDirectory(store or JsonFileStore())
        self.bill = Bill(self.directory)
        self.form = EntryForm()
        self._syncing = False   # True while the form pushes values into widgets

        self._build_ui()
        self.refresh()

    # ---------------- UI ----------------
    def _build_ui(self):
        tb = QToolBar()
        self.addToolBar(tb)

        tb.addWidget(QLabel(" Bill Type "))
        self.bill_type_box = QComboBox()
        self.bill_type_box.addItems(BILL_TYPES)
        tb.addWidget(self.bill_type_box)

        tb.addWidget(QLabel(" Date "))
        self.date_edit = QDateEdit(QDate.currentDate())
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat("dd-MM-yyyy")
        tb.addWidget(self.date_edit)

        tb.addWidget(QLabel(" Night S/O Rate "))
        self.night_rate_box = QComboBox()
        for rate in config.NIGHT_RATE_OPTIONS:
            self.night_rate_box.addItem(f"{rate} Tk", userData=rate)
        tb.addWidget(self.night_rate_box)

        tb.addSeparator()
        btn_pdf = QPushButton("Generate PDF")
        btn_pdf.clicked.connect(self.generate_pdf)
        tb.addWidget(btn_pdf)

        # database tools stay hidden until toggled
        self.act_db_tools = QAction("Database", self)
        self.act_db_tools.setCheckable(True)
        self.act_db_tools.toggled.connect(self.toggle_db_tools)
        tb.addAction(self.act_db_tools)

        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        splitter = QSplitter(Qt.Horizontal)
        root.addWidget(splitter)

        # ----- left: entry form -----
        left_container = QWidget()
        left = QVBoxLayout(left_container)

        self.db_box = QGroupBox("Employee Database")
        db = QHBoxLayout(self.db_box)
        btn_export = QPushButton("Export CSV")
        btn_import = QPushButton("Import CSV")
        btn_export.clicked.connect(self.export_csv)
        btn_import.clicked.connect(self.import_csv)
        db.addWidget(btn_export); db.addWidget(btn_import)
        self.db_box.setVisible(False)
        left.addWidget(self.db_box)

        self.rate_info = QLabel("")
        self.rate_info.setStyleSheet("font-weight:600; padding:4px;")
        left.addWidget(self.rate_info)

        entry_box = QGroupBox("New Entry")
        form = QGridLayout(entry_box)
        r = 0
        self.name_edit = QLineEdit()
        form.addWidget(QLabel("Name*"), r, 0); form.addWidget(self.name_edit, r, 1); r += 1

        self.card_edit = QLineEdit()
        form.addWidget(QLabel("Card No*"), r, 0); form.addWidget(self.card_edit, r, 1); r += 1

        self.desig_box = QComboBox()
        self.desig_box.addItems(DESIGNATION_OPTIONS)
        form.addWidget(QLabel("Designation"), r, 0); form.addWidget(self.desig_box, r, 1); r += 1

        self.remarks_edit = QLineEdit()
        form.addWidget(QLabel("Remarks"), r, 0); form.addWidget(self.remarks_edit, r, 1); r += 1

        self.amount_label = QLabel("")
        form.addWidget(QLabel("Taka"), r, 0); form.addWidget(self.amount_label, r, 1); r += 1

        self.btn_add = QPushButton("+ Add")
        form.addWidget(self.btn_add, r, 1)
        left.addWidget(entry_box)

        # suggestions (name / card lookup)
        self.suggest_list = QListWidget()
        self.suggest_list.setVisible(False)
        left.addWidget(self.suggest_list)
        left.addStretch(1)
        left_container.setMinimumWidth(320)
        left_container.setMaximumWidth(380)

        # ----- right: bill items -----
        right_container = QWidget()
        right = QVBoxLayout(right_container)

        self.table = QTableWidget(0, len(ITEM_COLUMNS))
        self.table.setHorizontalHeaderLabels(ITEM_COLUMNS)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.verticalHeader().setVisible(False)
        right.addWidget(self.table)

        bottom = QHBoxLayout()
        btn_clear = QPushButton("Clear All")
        btn_clear.clicked.connect(self.clear_all)
        bottom.addWidget(btn_clear)
        bottom.addStretch(1)
        self.total_label = QLabel("")
        self.total_label.setStyleSheet("font-weight:700; font-size:15px;")
        bottom.addWidget(self.total_label)
        right.addLayout(bottom)

        splitter.addWidget(left_container)
        splitter.addWidget(right_container)
        splitter.setStretchFactor(1, 1)

        # signals
        self.bill_type_box.currentTextChanged.connect(self.on_bill_type_changed)
        self.night_rate_box.currentIndexChanged.connect(self.on_night_rate_changed)
        self.date_edit.dateChanged.connect(self.on_date_changed)
        self.name_edit.textEdited.connect(self.on_name_edited)
        self.card_edit.textEdited.connect(self.on_card_edited)
        self.desig_box.currentTextChanged.connect(self.on_designation_changed)
        self.remarks_edit.textEdited.connect(self.on_remarks_edited)
        self.suggest_list.itemClicked.connect(self.on_suggestion_clicked)
        self.btn_add.clicked.connect(self.add_entry)
        for w in (self.name_edit, self.card_edit, self.remarks_edit):
            w.returnPressed.connect(self.add_entry)

    # ---------------- form <-> widgets ----------------
    def _push_form(self, typing=None):
        """
        Copy EntryForm state into the widgets without re-triggering handlers.
        `typing` is the line edit the user is in; it is left alone so the
        cursor stays put.
        """
        self._syncing = True
        try:
            for edit, value in ((self.name_edit, self.form.name), (self.card_edit, self.form.card_no)):
                if edit is not typing and edit.text() != value:
                    edit.setText(value)
            if self.desig_box.findText(self.form.designation) < 0:
                self.desig_box.addItem(self.form.designation)
            self.desig_box.setCurrentText(self.form.designation)
            self.remarks_edit.setText(self.form.remarks)
        finally:
            self._syncing = False
        self.amount_label.setText(f"{self.form.current_rate(self.bill)} Tk")

    def _show_suggestions(self, query: str):
        self.suggest_list.clear()
        matches = self.form.suggestions(query, self.directory)
        for emp in matches:
            it = QListWidgetItem(f"{emp.name}  ({emp.card_no})  {emp.designation}")
            it.setData(Qt.UserRole, emp.card_no)
            self.suggest_list.addItem(it)
        self.suggest_list.setVisible(bool(matches))

    def on_name_edited(self, text):
        self.form.name = text
        self._show_suggestions(text)

    def on_card_edited(self, text):
        self.form.set_card_no(text, self.directory)
        self._push_form(typing=self.card_edit)
        self._show_suggestions(text)

    def on_designation_changed(self, text):
        if self._syncing:
            return
        self.form.designation = text
        self.amount_label.setText(f"{self.form.current_rate(self.bill)} Tk")

    def on_remarks_edited(self, text):
        self.form.remarks = text

    def on_suggestion_clicked(self, item):
        emp = self.directory.find(item.data(Qt.UserRole))
        if emp is None:
            return
        self.form.select_employee(emp)
        self.suggest_list.setVisible(False)
        self._push_form()

    # ---------------- bill actions ----------------
    def add_entry(self):
        item = self.form.submit(self.bill)
        if item is None:
            return
        self.suggest_list.setVisible(False)
        self._push_form()
        self.refresh_items()
        self.name_edit.setFocus()

    def remove_entry(self, item_id):
        self.bill.remove_item(item_id)
        self.refresh_items()

    def clear_all(self):
        if not len(self.bill):
            return
        if QMessageBox.question(self, "Confirm", "Remove all entries?") != QMessageBox.Yes:
            return
        self.bill.clear_all()
        self.refresh_items()

    def on_bill_type_changed(self, text):
        self.bill.set_bill_type(text)
        self.refresh()

    def on_night_rate_changed(self, _index):
        self.bill.set_night_rate(self.night_rate_box.currentData())
        self.refresh()

    def on_date_changed(self, qd: QDate):
        self.bill.bill_date = date(qd.year(), qd.month(), qd.day())

    def generate_pdf(self):
        try:
            final = self.bill.finalize()
        except EmptyBillError as exc:
            QMessageBox.warning(self, "Bill", str(exc))
            return

        suggested = bill_filename(final.bill_type, final.date)
        path, _ = QFileDialog.getSaveFileName(self, "Save Bill", suggested, "PDF (*.pdf)")
        if not path:
            return
        pdf = render_bill(final.bill_type, final.date, final.items)
        Path(path).write_bytes(pdf)
        logger.info("Saved %s", path)
        QMessageBox.information(self, "Bill", f"Saved: {path}")

    # ---------------- database ----------------
    def toggle_db_tools(self, checked: bool):
        self.db_box.setVisible(checked)

    def export_csv(self):
        path, _ = QFileDialog.getSaveFileName(self, "Export Database", backup_filename(), "CSV (*.csv)")
        if not path:
            return
        Path(path).write_text(self.directory.export_csv(), encoding="utf-8")
        QMessageBox.information(self, "Database", f"Exported {len(self.directory)} profiles.")

    def import_csv(self):
        path, _ = QFileDialog.getOpenFileName(self, "Import Database", "", "CSV (*.csv)")
        if not path:
            return
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            QMessageBox.warning(self, "Database", f"Could not read file: {exc}")
            return
        count = self.directory.import_merge(text)
        QMessageBox.information(self, "Database", f"Database updated! Total profiles: {count}")

    # ---------------- refresh ----------------
    def refresh(self):
        self.rate_info.setText(rate_summary(self.bill.bill_type, self.bill.night_rate))
        self.night_rate_box.setEnabled(self.bill.bill_type == NIGHT_ENTERTAINMENT)
        self._push_form()
        self.refresh_items()

    def refresh_items(self):
        items = self.bill.items
        self.table.setRowCount(len(items))
        for row, it in enumerate(items):
            values = [str(row + 1), it.name, it.card_no, it.designation, str(it.taka), it.remarks]
            for col, v in enumerate(values):
                cell = QTableWidgetItem(v)
                cell.setTextAlignment(Qt.AlignCenter)
                self.table.setItem(row, col, cell)
            btn = QPushButton("✕")
            btn.clicked.connect(lambda _=False, item_id=it.id: self.remove_entry(item_id))
            self.table.setCellWidget(row, len(ITEM_COLUMNS) - 1, btn)
        self.total_label.setText(f"TOTAL: {self.bill.total()} Tk")
