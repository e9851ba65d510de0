# roster/locator.py
"""Поиск по хранилищу: рекурсивный бинарный поиск по ID и поиск лучшего/худшего среднего."""
from typing import NamedTuple, Optional, Sequence

from .models import Student


class Extremes(NamedTuple):
    highest: float
    highest_index: int
    lowest: float
    lowest_index: int


def binary_search_by_id(target_id: int, records: Sequence[Optional[Student]],
                        left: int, right: int) -> Optional[int]:
    """Ищет студента с target_id на отрезке [left, right].

    Записи должны быть отсортированы по ID по возрастанию, иначе
    результат не определён. Возвращает индекс или None.
    """
    if left > right:
        return None
    mid = left + (right - left) // 2
    mid_id = records[mid].id
    if mid_id == target_id:
        return mid
    if mid_id > target_id:
        return binary_search_by_id(target_id, records, left, mid - 1)
    return binary_search_by_id(target_id, records, mid + 1, right)


def highest_lowest(records: Sequence[Optional[Student]], count: int) -> Optional[Extremes]:
    """Один линейный проход: максимальный и минимальный средний балл с индексами.

    При равенстве побеждает первое вхождение (для каждого экстремума отдельно).
    """
    if count == 0:
        return None
    highest = lowest = records[0].average
    h_idx = l_idx = 0
    for i in range(1, count):
        avg = records[i].average
        if avg > highest:
            highest, h_idx = avg, i
        if avg < lowest:
            lowest, l_idx = avg, i
    return Extremes(highest, h_idx, lowest, l_idx)
