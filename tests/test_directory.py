import json
import logging

from bill_maker.data.data_manager import JsonFileStore, MemoryStore
from bill_maker.data.directory import CSV_HEADER, EmployeeDirectory, backup_filename
from bill_maker.config import EMPLOYEE_STORE_KEY
from bill_maker.logic.bill import Bill


def test_upsert_same_card_keeps_one_record(directory):
    directory.upsert("John Doe", "101", "S/O", 50)
    directory.upsert("John D.", " 101 ", "LABOUR", 600)

    assert len(directory) == 1
    emp = directory.find("101")
    assert (emp.name, emp.designation, emp.default_taka) == ("John D.", "LABOUR", 600)


def test_upsert_keeps_id_and_position(directory):
    first = directory.upsert("A", "1", "S/O", 50)
    directory.upsert("B", "2", "S/O", 50)
    again = directory.upsert("A2", "1", "S/O", 50)

    assert again.id == first.id
    assert [e.card_no for e in directory] == ["1", "2"]


def test_upsert_writes_through(store):
    d = EmployeeDirectory(store)
    d.upsert("John Doe", "101", "S/O", 50)

    data = json.loads(store.get(EMPLOYEE_STORE_KEY))
    assert data[0]["cardNo"] == "101"
    assert data[0]["defaultTaka"] == 50
    assert len(EmployeeDirectory(store)) == 1


def test_load_tolerates_corrupt_store():
    store = MemoryStore({EMPLOYEE_STORE_KEY: "{not json"})
    assert len(EmployeeDirectory(store)) == 0

    store = MemoryStore({EMPLOYEE_STORE_KEY: '{"a": 1}'})
    assert len(EmployeeDirectory(store)) == 0


def test_search_exact_first_and_limit(directory):
    directory.upsert("Karim Uddin", "2101", "S/O")
    directory.upsert("Abdul Karim", "21", "LABOUR")
    directory.upsert("Karim", "300", "S/O")

    names = [e.name for e in directory.search("karim")]
    assert names == ["Karim", "Karim Uddin", "Abdul Karim"]

    cards = [e.card_no for e in directory.search("21")]
    assert cards == ["21", "2101"]

    for i in range(20):
        directory.upsert(f"Worker {i}", f"9{i:02d}", "LABOUR")
    assert len(directory.search("worker")) == 10


def test_search_empty_query(directory):
    directory.upsert("A", "1", "S/O")
    assert directory.search("") == []


def test_export_csv(directory):
    directory.upsert("John Doe", "101", "S/O", 50)
    directory.upsert("Rahim", "102", "LABOUR", 600)

    assert directory.export_csv().split("\n") == [
        CSV_HEADER,
        "John Doe,101,S/O,50",
        "Rahim,102,LABOUR,600",
    ]


def test_import_merge_overwrites_and_skips_bad_rows(directory):
    directory.upsert("Old Name", "101", "S/O", 50)
    text = "\n".join([
        CSV_HEADER,
        "New Name,101,LABOUR,600",
        "",
        "broken,row",
        "Selim,205,S/O",
        "Jamal,206,S/O,abc",
        "  ",
    ])

    assert directory.import_merge(text) == 3
    assert directory.find("101").name == "New Name"
    assert directory.find("205").default_taka == 0
    assert directory.find("206").default_taka == 0
    assert directory.find("broken") is None


def test_export_import_round_trip(directory):
    directory.upsert("John Doe", "101", "S/O", 50)
    directory.upsert("Rahim", "102", "LABOUR", 600)
    directory.upsert("Exec", "418", "JR. SUPPLY CHAIN EXECUTIVE", 800)

    fresh = EmployeeDirectory(MemoryStore())
    assert fresh.import_merge(directory.export_csv()) == 3

    def fields(d):
        return [(e.name, e.card_no, e.designation, e.default_taka) for e in d]
    assert fields(fresh) == fields(directory)


def test_clear(directory, store):
    directory.upsert("A", "1", "S/O")
    directory.clear()
    assert len(directory) == 0
    assert json.loads(store.get(EMPLOYEE_STORE_KEY)) == []


def test_json_file_store(tmp_path):
    store = JsonFileStore(tmp_path / "db")
    assert store.get("k") is None

    store.set("k", "[1, 2]")
    assert store.get("k") == "[1, 2]"
    assert (tmp_path / "db" / "k.json").exists()
    assert not (tmp_path / "db" / "k.json.tmp").exists()


def test_json_file_store_corrupt_file(tmp_path):
    (tmp_path / f"{EMPLOYEE_STORE_KEY}.json").write_text("garbage[", encoding="utf-8")
    d = EmployeeDirectory(JsonFileStore(tmp_path))
    assert len(d) == 0

    d.upsert("A", "1", "S/O")
    assert len(EmployeeDirectory(JsonFileStore(tmp_path))) == 1


def test_backup_filename():
    from datetime import date
    assert backup_filename(date(2025, 8, 3)) == "tusuka_db_backup_2025-08-03.csv"


class ReadOnlyStore(MemoryStore):
    def set(self, key, value):
        raise OSError("disk full")


def test_write_failure_keeps_memory(caplog):
    d = EmployeeDirectory(ReadOnlyStore())
    with caplog.at_level(logging.WARNING):
        item = Bill(d).add_item("John", "101", "S/O")

    assert item is not None and item.taka == 50
    assert len(d) == 1 and d.find("101").name == "John"
    assert d.save_to_store() is False
    assert "Could not save employee store" in caplog.text


def test_null_fields_in_store_are_searchable(store):
    store.set(EMPLOYEE_STORE_KEY, json.dumps([
        {"id": "a", "name": None, "cardNo": "5", "designation": None},
        {"id": "b", "name": "Rahim", "cardNo": 6, "designation": "S/O", "defaultTaka": None},
    ]))
    d = EmployeeDirectory(store)

    assert [e.card_no for e in d.search("5")] == ["5"]
    assert [e.name for e in d.search("rah")] == ["Rahim"]
    assert (d.find("5").name, d.find("5").designation) == ("", "")
    assert d.find("6").default_taka == 0
