# roster/io_utils.py
"""Модуль для операций ввода/вывода: сохранение и загрузка списка студентов, экспорт в CSV."""
import json
import logging
import os
import re
from typing import List, Optional, Tuple

from .config import MAX_NAME_LENGTH
from .display import roster_to_dataframe
from .errors import FileProcessingError
from .store import StudentStore

# (id, имя, оценки) одной записи из файла
RawRecord = Tuple[int, str, List[float]]

_ID_RE = re.compile(r'"id"\s*:\s*(-?\d+)')
_NAME_RE = re.compile(r'"name"\s*:\s*"((?:[^"\\]|\\.)*)"')


def save_students_to_file(filepath: str, store: StudentStore):
    """Перезаписывает файл целиком текущим содержимым хранилища.

    Формат построчный: каждое поле записи на своей строке, все оценки
    одной строкой с двумя знаками после запятой. Это валидный JSON.
    """
    lines = ["{", '  "students": [']
    count = store.count()
    for i, s in enumerate(store):
        grades = ", ".join(f"{g:.2f}" for g in s.grades)
        lines.append("    {")
        lines.append(f'      "id": {s.id},')
        lines.append(f'      "name": {json.dumps(s.name, ensure_ascii=False)},')
        lines.append(f'      "grades": [{grades}],')
        lines.append(f'      "average": {s.average:.2f}')
        lines.append("    }," if i + 1 < count else "    }")
    lines.append("  ]")
    lines.append("}")

    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filepath, mode='w', encoding='utf-8') as file:
            file.write("\n".join(lines) + "\n")
    except OSError as e:
        raise FileProcessingError(f"Ошибка записи в файл {filepath}: {e}")
    logging.info("Сохранено %d студентов в %s", count, filepath)


def load_students_from_file(filepath: str, store: StudentStore) -> int:
    """Загружает студентов из файла в хранилище и возвращает число добавленных.

    Отсутствие файла ошибкой не считается (первый запуск). Средний балл из
    файла не используется: он пересчитывается по оценкам.
    """
    if not os.path.exists(filepath):
        logging.info("Файл %s не найден, начинаем с пустого списка", filepath)
        return 0

    try:
        with open(filepath, mode='r', encoding='utf-8') as file:
            text = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileProcessingError(f"Не удалось прочитать файл {filepath}: {e}")

    try:
        records = parse_json_records(json.loads(text))
    except json.JSONDecodeError as e:
        logging.warning("Файл %s не является корректным JSON (%s), читаем построчно", filepath, e)
        records = scan_records(text)

    added = 0
    for student_id, name, grades in records:
        if not store.add(student_id, name):
            logging.warning("Повторный ID %d в файле %s пропущен", student_id, filepath)
            continue
        for grade in grades:
            store.append_grade(student_id, grade)
        added += 1
    logging.info("Загружено %d студентов из %s", added, filepath)
    return added


def parse_json_records(data) -> List[RawRecord]:
    """Достаёт записи из разобранного JSON. Некорректные объекты пропускаются."""
    items = data.get("students", []) if isinstance(data, dict) else data
    if not isinstance(items, list):
        return []

    records = []
    for item in items:
        try:
            student_id = item["id"]
            name = item["name"]
            raw_grades = item.get("grades", [])
            if not isinstance(raw_grades, list):
                raise TypeError(f"grades должен быть списком, а не {type(raw_grades).__name__}")
            grades = [float(g) for g in raw_grades]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logging.warning("Пропущена некорректная запись %r: %s", item, e)
            continue
        if isinstance(student_id, bool) or not isinstance(student_id, int) \
                or not isinstance(name, str) or not name:
            logging.warning("Пропущена некорректная запись %r", item)
            continue
        records.append((student_id, name[:MAX_NAME_LENGTH], grades))
    return records


def decode_name(literal: str) -> str:
    """Раскодирует содержимое JSON-строки (\\" и \\\\). Битая строка возвращается как есть."""
    try:
        return json.loads('"' + literal + '"')
    except json.JSONDecodeError:
        return literal


def scan_records(text: str) -> List[RawRecord]:
    """Построчный разбор повреждённого файла: берём всё, что удаётся распознать.

    Запись собирается из строк "id", "name" и "grades"; строка с "}"
    закрывает текущую запись.
    """
    records = []
    current_id: Optional[int] = None
    current_name = ""

    for line in text.splitlines():
        if '"id":' in line:
            match = _ID_RE.search(line)
            if match:
                current_id = int(match.group(1))
        elif '"name":' in line:
            match = _NAME_RE.search(line)
            if match:
                current_name = decode_name(match.group(1))[:MAX_NAME_LENGTH]
        elif '"grades":' in line:
            if current_id is None or not current_name:
                continue
            start, end = line.find("["), line.find("]")
            grades = []
            if start != -1 and end > start:
                for token in line[start + 1:end].split(","):
                    try:
                        grades.append(float(token))
                    except ValueError:
                        continue
            records.append((current_id, current_name, grades))
        elif "}" in line:
            current_id = None
            current_name = ""
    return records


def export_top_n_to_csv(filepath: str, store: StudentStore, n: int) -> int:
    """Экспортирует ТОП-N студентов по среднему баллу в CSV. Возвращает число строк."""
    df = roster_to_dataframe(store)
    top = df.nlargest(max(n, 0), "average", keep="first")
    try:
        top.to_csv(filepath, index=False, float_format="%.2f")
    except OSError as e:
        raise FileProcessingError(f"Ошибка экспорта в файл {filepath}: {e}")
    logging.info("Экспортировано %d студентов в %s", len(top), filepath)
    return len(top)
