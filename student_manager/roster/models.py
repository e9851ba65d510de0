# roster/models.py
"""Модуль, определяющий основную модель данных: запись о студенте."""
from typing import List, Optional

from . import grade_math
from .config import MAX_NAME_LENGTH


def clip_name(name: Optional[str]) -> str:
    """Обрезает имя до MAX_NAME_LENGTH символов. None превращается в пустую строку."""
    return (name or "")[:MAX_NAME_LENGTH]


class Student:
    """Представляет студента с его ID, именем, оценками и средним баллом.

    Средний балл хранится в поле и пересчитывается сразу при добавлении
    оценки, поэтому никогда не бывает устаревшим.
    """
    def __init__(self, student_id: int, name: str):
        self.id = student_id
        self.name = clip_name(name)
        self.grades: List[float] = []
        self.average = 0.0

    @property
    def grade_count(self) -> int:
        return len(self.grades)

    def add_grade(self, value: float):
        """Добавляет оценку в конец списка и пересчитывает средний балл."""
        self.grades.append(float(value))
        self.recalc_average()

    def recalc_average(self):
        self.average = grade_math.average(self.grades)

    def rename(self, new_name: str):
        self.name = clip_name(new_name)

    def release(self):
        """Освобождает список оценок (вызывается хранилищем при удалении)."""
        self.grades = []
        self.average = 0.0

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(id={self.id}, name='{self.name}', average={self.average:.2f})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        grades_str = ", ".join(f"{g:.2f}" for g in self.grades) if self.grades else "Нет оценок"
        return f"ID: {self.id:<3} | Имя: {self.name:<20} | Средний балл: {self.average:<6.2f} | Оценки: [{grades_str}]"
