# roster/grade_math.py
"""Подсчёт суммы и среднего балла.

Сумма считается рекурсивно методом «разделяй и властвуй»: массив делится
пополам, половины суммируются отдельно, результаты складываются. Глубина
рекурсии растёт как log2(n), а не линейно.
"""
from typing import Optional, Sequence


def sum_grades(grades: Sequence[float], start: int = 0, end: Optional[int] = None) -> float:
    """Рекурсивно суммирует оценки grades[start:end] без копирования среза."""
    if end is None:
        end = len(grades)
    n = end - start
    if n <= 0:
        return 0.0
    if n == 1:
        return float(grades[start])
    mid = start + n // 2
    left = sum_grades(grades, start, mid)
    right = sum_grades(grades, mid, end)
    return left + right


def average(grades: Sequence[float]) -> float:
    """Средний балл. Возвращает 0.0, если оценок нет."""
    if not grades:
        return 0.0
    return sum_grades(grades) / len(grades)
