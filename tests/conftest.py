import pytest

from bill_maker.data.data_manager import MemoryStore
from bill_maker.data.directory import EmployeeDirectory


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def directory(store):
    return EmployeeDirectory(store)
