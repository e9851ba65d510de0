# roster/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для управления студентами."""
import logging
import math
import sys
import traceback
from typing import Optional

from . import display, errors, io_utils
from .config import DATA_FILE, GRADE_MAX, GRADE_MIN, LOG_LEVEL
from .input_utils import read_float, read_int, read_line
from .sorting import SortKey, SortMethod
from .store import StudentStore


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("      МЕНЮ УПРАВЛЕНИЯ")
    print("="*30)
    print("1. Добавить студента")
    print("2. Добавить оценку студенту")
    print("3. Показать всех студентов (кратко)")
    print("4. Показать матрицу оценок")
    print("5. Сортировать (выбор метода и ключа)")
    print("6. Найти студента по ID (бинарный поиск)")
    print("7. Статистика (лучший/худший средний балл)")
    print("8. Удалить студента по ID")
    print("9. Изменить имя студента")
    print("10. Экспорт ТОП-N студентов в CSV")
    print("h. Показать меню")
    print("0. Выход")
    print("="*30)


def require_name(name: str) -> str:
    if not name:
        raise errors.DataValidationError("Имя студента не может быть пустым.")
    return name


def require_grade(grade: float) -> float:
    if not math.isfinite(grade) or grade < GRADE_MIN or grade > GRADE_MAX:
        raise errors.DataValidationError(
            f"Оценка {grade} недопустима. Разрешен диапазон {GRADE_MIN:g}-{GRADE_MAX:g}.")
    return grade


def save_quietly(store: StudentStore, data_file: str):
    """Сохраняет хранилище; ошибка записи сообщается, но работа продолжается."""
    try:
        io_utils.save_students_to_file(data_file, store)
    except errors.FileProcessingError as e:
        logging.error("Не удалось сохранить %s: %s", data_file, e)
        print(f"⚠️ Не удалось сохранить данные: {e}")


def sort_menu(store: StudentStore):
    print("Метод сортировки: 1 - пузырьком, 2 - вставками, 3 - слиянием")
    m = read_int("Выберите метод: ")
    method = {1: SortMethod.BUBBLE, 2: SortMethod.INSERTION}.get(m, SortMethod.MERGE)
    print("Ключ сортировки: 1 - ID, 2 - средний балл")
    k = read_int("Выберите ключ: ")
    key = SortKey.ID if k == 1 else SortKey.AVERAGE
    store.sort(method, key)
    print(f"✅ Отсортировано ({method.name.lower()}, {key.name.lower()}).")


def search_menu(store: StudentStore):
    stud_id = read_int("Введите ID для поиска: ")
    # бинарный поиск требует порядка по ID
    store.sort(SortMethod.MERGE, SortKey.ID)
    idx = store.search_by_id(stud_id)
    if idx is None:
        print(f"❌ Студент с ID {stud_id} не найден.")
    else:
        print(display.format_student_detail(store.get(idx)))


def main_cli(store: Optional[StudentStore] = None, data_file: str = DATA_FILE):
    """Основной цикл консольного приложения."""
    if store is None:
        store = StudentStore()

    try:
        loaded = io_utils.load_students_from_file(data_file, store)
        if loaded:
            print(f"✅ Загружено {loaded} студентов из {data_file}.")
    except errors.FileProcessingError as e:
        print(f"⚠️ Не удалось загрузить данные: {e}")

    print_menu()
    while True:
        choice = read_line("\nВыберите пункт меню (h - помощь): ").lower()

        try:
            if choice == '1':
                stud_id = read_int("Введите ID нового студента: ")
                name = require_name(read_line("Введите имя студента: "))
                if store.add(stud_id, name):
                    print(f"✅ Студент {name} успешно добавлен.")
                    save_quietly(store, data_file)
                else:
                    print(f"❌ Студент с ID {stud_id} уже существует.")

            elif choice == '2':
                stud_id = read_int("Введите ID студента: ")
                grade = require_grade(read_float("Введите оценку (0-100): "))
                if store.append_grade(stud_id, grade):
                    print("✅ Оценка добавлена, средний балл пересчитан.")
                    save_quietly(store, data_file)
                else:
                    print(f"❌ Студент с ID {stud_id} не найден.")

            elif choice == '3':
                print(display.format_summary(store))

            elif choice == '4':
                print(display.format_grade_matrix(store))

            elif choice == '5':
                sort_menu(store)

            elif choice == '6':
                search_menu(store)

            elif choice == '7':
                stats = display.format_statistics(store)
                print(stats if stats is not None else display.EMPTY_MESSAGE)

            elif choice == '8':
                stud_id = read_int("Введите ID студента для удаления: ")
                if store.delete(stud_id):
                    print(f"✅ Студент с ID {stud_id} успешно удален.")
                    save_quietly(store, data_file)
                else:
                    print(f"❌ Студент с ID {stud_id} не найден.")

            elif choice == '9':
                stud_id = read_int("Введите ID студента: ")
                name = require_name(read_line("Введите новое имя: "))
                if store.rename(stud_id, name):
                    print("✅ Имя обновлено.")
                    save_quietly(store, data_file)
                else:
                    print(f"❌ Студент с ID {stud_id} не найден.")

            elif choice == '10':
                n = read_int("Введите количество студентов для экспорта (ТОП-N): ")
                filepath = read_line("Введите путь к файлу для экспорта: ").strip('"').strip("'")
                exported = io_utils.export_top_n_to_csv(filepath, store, n)
                print(f"✅ Экспортировано {exported} студентов в {filepath}.")

            elif choice == 'h':
                print_menu()

            elif choice == '0':
                save_quietly(store, data_file)
                store.clear()
                print("👋 До свидания!")
                break

            else:
                print("❌ Неверный выбор. Введите число от 0 до 10 или 'h'.")

        except errors.RosterAppError as e:
            print(f"❌ Ошибка: {e}")


def run():
    """Точка входа: настройка логирования и запуск меню."""
    try:
        logging.basicConfig(level=LOG_LEVEL)
        main_cli()
    except (KeyboardInterrupt, EOFError):
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА !!!")
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    run()
