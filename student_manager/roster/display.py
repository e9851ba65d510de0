# roster/display.py
"""Форматирование данных хранилища для вывода. Только чтение, хранилище не меняется."""
from typing import Optional

import pandas as pd

from .models import Student
from .store import StudentStore

EMPTY_MESSAGE = "ℹ️ Список студентов пуст."


def format_grades(student: Student) -> str:
    return ", ".join(f"{g:.2f}" for g in student.grades)


def format_summary(store: StudentStore) -> str:
    """Краткая таблица: ID, имя, средний балл и количество оценок."""
    if store.count() == 0:
        return EMPTY_MESSAGE
    lines = [
        f"{'ID':<6}{'Имя':<20}{'Ср. балл':>10}{'Оценок':>8}",
        "-" * 44,
    ]
    for s in store:
        lines.append(f"{s.id:<6}{s.name:<20}{s.average:>10.2f}{s.grade_count:>8}")
    return "\n".join(lines)


def format_grade_matrix(store: StudentStore) -> str:
    """Подробная матрица оценок: одна строка на студента."""
    if store.count() == 0:
        return EMPTY_MESSAGE
    lines = ["Матрица оценок (строка = студент):"]
    for i, s in enumerate(store):
        if s.grades:
            body = f"{format_grades(s)}  (ср.: {s.average:.2f})"
        else:
            body = "(нет оценок)"
        lines.append(f"[{i}] {s.id} {s.name:<12} | {body}")
    return "\n".join(lines)


def format_student_detail(student: Student) -> str:
    text = (f"Найден: ID={student.id} Имя={student.name} "
            f"Ср. балл={student.average:.2f} Оценок={student.grade_count}")
    if student.grades:
        text += f"\nОценки: {format_grades(student)}"
    return text


def format_statistics(store: StudentStore) -> Optional[str]:
    """Строки про лучший и худший средний балл или None для пустого хранилища."""
    extremes = store.highest_lowest()
    if extremes is None:
        return None
    best = store.get(extremes.highest_index)
    worst = store.get(extremes.lowest_index)
    return (f"Лучший средний балл: ID={best.id} Имя={best.name} ({extremes.highest:.2f})\n"
            f"Худший средний балл: ID={worst.id} Имя={worst.name} ({extremes.lowest:.2f})")


def roster_to_dataframe(store: StudentStore) -> pd.DataFrame:
    """Таблица pandas со всеми студентами в текущем порядке хранилища."""
    rows = [
        {
            "id": s.id,
            "name": s.name,
            "average": s.average,
            "grades": " ".join(f"{g:.2f}" for g in s.grades),
        }
        for s in store
    ]
    df = pd.DataFrame(rows, columns=["id", "name", "average", "grades"])
    return df.astype({"id": "int64", "average": "float64"})
