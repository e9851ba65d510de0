# tests/conftest.py
import pytest
from roster.store import StudentStore

@pytest.fixture
def empty_store() -> StudentStore:
    return StudentStore()

@pytest.fixture
def sample_store() -> StudentStore:
    """Фикстура с тремя студентами в порядке добавления (ID 3, 1, 2)."""
    store = StudentStore()
    store.add(3, "Петров Петр")
    store.add(1, "Иванов Иван")
    store.add(2, "Сидорова Анна")
    for grade in (92.0, 88.0, 95.0):
        store.append_grade(3, grade)
    for grade in (78.0, 85.0, 90.0):
        store.append_grade(1, grade)
    for grade in (65.0, 70.0):
        store.append_grade(2, grade)
    return store
