# roster/sorting.py
"""Алгоритмы сортировки студентов: пузырьком, вставками и слиянием.

Все три сортируют переданный список на месте и трогают только первые
count элементов: хранилище передаёт сюда свой собственный массив слотов,
копия данных не создаётся. Для одного ключа все три дают одинаковый
неубывающий порядок, отличаются только стоимостью и перемещениями.
"""
from enum import Enum
from typing import List, Optional

from .models import Student


class SortKey(Enum):
    ID = 0
    AVERAGE = 1


class SortMethod(Enum):
    BUBBLE = 1
    INSERTION = 2
    MERGE = 3


Slots = List[Optional[Student]]


def compare(a: Student, b: Student, key: SortKey) -> int:
    """Сравнивает двух студентов по ключу: -1, 0 или 1."""
    if key == SortKey.ID:
        left, right = a.id, b.id
    else:
        left, right = a.average, b.average
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def bubble_sort(records: Slots, count: int, key: SortKey):
    """Сортировка пузырьком. Останавливается, если за проход не было обменов.

    O(n^2) в среднем и худшем случае, O(n) на уже отсортированных данных.
    """
    for i in range(count - 1):
        swapped = False
        for j in range(count - 1 - i):
            if compare(records[j], records[j + 1], key) > 0:
                records[j], records[j + 1] = records[j + 1], records[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(records: Slots, count: int, key: SortKey):
    """Сортировка вставками: отсортированный префикс растёт на один элемент за шаг."""
    for i in range(1, count):
        current = records[i]
        j = i - 1
        while j >= 0 and compare(records[j], current, key) > 0:
            records[j + 1] = records[j]
            j -= 1
        records[j + 1] = current


def merge_range(records: Slots, left: int, mid: int, right: int, key: SortKey):
    """Сливает отсортированные отрезки [left, mid] и [mid+1, right].

    При равенстве ключей берётся элемент из левой половины, поэтому
    сортировка слиянием устойчива.
    """
    left_part = records[left:mid + 1]
    right_part = records[mid + 1:right + 1]

    i = j = 0
    k = left
    while i < len(left_part) and j < len(right_part):
        if compare(left_part[i], right_part[j], key) <= 0:
            records[k] = left_part[i]
            i += 1
        else:
            records[k] = right_part[j]
            j += 1
        k += 1

    while i < len(left_part):
        records[k] = left_part[i]
        i += 1
        k += 1
    while j < len(right_part):
        records[k] = right_part[j]
        j += 1
        k += 1


def merge_sort(records: Slots, left: int, right: int, key: SortKey):
    """Рекурсивная сортировка слиянием отрезка [left, right]. O(n log n)."""
    if left >= right:
        return
    mid = left + (right - left) // 2
    merge_sort(records, left, mid, key)
    merge_sort(records, mid + 1, right, key)
    merge_range(records, left, mid, right, key)


def sort_records(records: Slots, count: int, method: SortMethod, key: SortKey):
    """Сортирует первые count записей выбранным методом."""
    if count <= 1:
        return
    if method == SortMethod.BUBBLE:
        bubble_sort(records, count, key)
    elif method == SortMethod.INSERTION:
        insertion_sort(records, count, key)
    else:
        merge_sort(records, 0, count - 1, key)
