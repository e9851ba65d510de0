# roster/store.py
"""Хранилище студентов: единственный владелец записей.

Записи лежат в массиве слотов, который растёт удвоением (4, 8, 16...),
так что добавление в среднем стоит O(1). Поиск по ID всегда линейный,
вторичного индекса нет. Операции не бросают исключений: об успехе
сообщают True/False или None.
"""
import logging
from typing import Iterator, List, Optional

from .config import INITIAL_CAPACITY
from .locator import Extremes, binary_search_by_id, highest_lowest
from .models import Student
from .sorting import SortKey, SortMethod, sort_records


class StudentStore:
    """Упорядоченный набор студентов с индексами 0..count-1."""

    def __init__(self):
        self._slots: List[Optional[Student]] = []
        self._size = 0

    # --- служебное ---

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _ensure_capacity(self):
        if self._size < len(self._slots):
            return
        old_capacity = len(self._slots)
        new_capacity = INITIAL_CAPACITY if old_capacity == 0 else old_capacity * 2
        self._slots.extend([None] * (new_capacity - old_capacity))
        logging.debug("Ёмкость хранилища увеличена: %d -> %d", old_capacity, new_capacity)

    def _index_of(self, student_id: int) -> int:
        for i in range(self._size):
            if self._slots[i].id == student_id:
                return i
        return -1

    # --- изменение ---

    def add(self, student_id: int, name: str) -> bool:
        """Добавляет студента без оценок. False, если такой ID уже есть."""
        if self._index_of(student_id) != -1:
            return False
        self._ensure_capacity()
        self._slots[self._size] = Student(student_id, name)
        self._size += 1
        return True

    def delete(self, student_id: int) -> bool:
        """Удаляет студента, сдвигая следующие записи на одну позицию влево."""
        idx = self._index_of(student_id)
        if idx == -1:
            return False
        self._slots[idx].release()
        for i in range(idx, self._size - 1):
            self._slots[i] = self._slots[i + 1]
        self._size -= 1
        self._slots[self._size] = None
        return True

    def rename(self, student_id: int, new_name: str) -> bool:
        """Меняет имя; слишком длинное имя обрезается без ошибки."""
        idx = self._index_of(student_id)
        if idx == -1:
            return False
        self._slots[idx].rename(new_name)
        return True

    def append_grade(self, student_id: int, value: float) -> bool:
        """Добавляет оценку и пересчитывает средний балл. Диапазон не проверяется."""
        idx = self._index_of(student_id)
        if idx == -1:
            return False
        self._slots[idx].add_grade(value)
        return True

    def clear(self):
        """Освобождает все записи; хранилище остаётся пригодным для работы."""
        for i in range(self._size):
            self._slots[i].release()
        self._slots = []
        self._size = 0

    # --- чтение ---

    def count(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Student]:
        for i in range(self._size):
            yield self._slots[i]

    def get(self, index: int) -> Optional[Student]:
        """Студент по индексу или None, если индекс вне диапазона."""
        if index < 0 or index >= self._size:
            return None
        return self._slots[index]

    def highest_lowest(self) -> Optional[Extremes]:
        return highest_lowest(self._slots, self._size)

    # --- сортировка и поиск ---

    def sort(self, method: SortMethod, key: SortKey):
        """Сортирует записи на месте выбранным алгоритмом."""
        sort_records(self._slots, self._size, method, key)

    def search_by_id(self, target_id: int) -> Optional[int]:
        """Бинарный поиск по ID. Хранилище должно быть отсортировано по ID заранее."""
        return binary_search_by_id(target_id, self._slots, 0, self._size - 1)
