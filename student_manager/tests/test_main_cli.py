import json
import logging

import pytest
from roster.main import main_cli, run
from roster.store import StudentStore

def run_cli(monkeypatch, inputs, data_file, store=None):
    """Запускает меню с подменённым вводом. Если ввод закончился, выходим через '0'."""
    input_sequence = iter(inputs)

    def mock_input(prompt=""):
        try:
            return next(input_sequence)
        except StopIteration:
            return "0"

    monkeypatch.setattr('builtins.input', mock_input)
    if store is None:
        store = StudentStore()
    main_cli(store, str(data_file))
    return store

def test_cli_add_grade_and_show(monkeypatch, capsys, tmp_path):
    data_file = tmp_path / "students.json"
    run_cli(monkeypatch, [
        '1', '5', 'Анна Котова',
        '2', '5', '100',
        '2', '5', '95',
        '3',
        '0',
    ], data_file)

    output = capsys.readouterr().out
    assert "Студент Анна Котова успешно добавлен" in output
    assert "97.50" in output
    assert "До свидания!" in output

    data = json.loads(data_file.read_text(encoding="utf-8"))
    assert data["students"][0]["grades"] == [100.0, 95.0]

def test_cli_validation_errors(monkeypatch, capsys, tmp_path):
    store = run_cli(monkeypatch, [
        '1', '1', '',
        '1', 'abc', '1', 'Анна',
        '1', '1', 'Другая',
        '2', '1', '150',
        '2', '99', '50',
        '42',
    ], tmp_path / "students.json")

    output = capsys.readouterr().out
    assert "Имя студента не может быть пустым" in output
    assert "Нужно целое число" in output
    assert "Студент с ID 1 уже существует" in output
    assert "Оценка 150.0 недопустима" in output
    assert "Студент с ID 99 не найден" in output
    assert "Неверный выбор" in output
    # выход очищает хранилище
    assert store.count() == 0

def test_cli_search_sorts_by_id(monkeypatch, capsys, tmp_path):
    data_file = tmp_path / "students.json"
    store = StudentStore()
    for student_id in (30, 10, 20):
        store.add(student_id, f"Студент {student_id}")
    store.append_grade(20, 77.0)
    run_cli(monkeypatch, ['6', '20', '6', '25', '8', '10', '9', '30', 'Новое', '7'], data_file, store)

    output = capsys.readouterr().out
    assert "Найден: ID=20" in output
    assert "Оценки: 77.00" in output
    assert "Студент с ID 25 не найден" in output
    assert "Студент с ID 10 успешно удален" in output
    assert "Имя обновлено" in output
    assert "Лучший средний балл: ID=20" in output

    data = json.loads(data_file.read_text(encoding="utf-8"))
    assert [(s["id"], s["name"]) for s in data["students"]] == [(20, "Студент 20"), (30, "Новое")]

def test_cli_sort_menu(monkeypatch, capsys, tmp_path):
    store = StudentStore()
    for student_id, grade in [(1, 90.0), (2, 50.0), (3, 70.0)]:
        store.add(student_id, f"s{student_id}")
        store.append_grade(student_id, grade)
    seen = []
    original_sort = store.sort

    def spy_sort(method, key):
        original_sort(method, key)
        seen.append([s.id for s in store])

    monkeypatch.setattr(store, "sort", spy_sort)
    run_cli(monkeypatch, ['5', '2', '2', '5', '1', '1'], tmp_path / "students.json", store)

    assert seen == [[2, 3, 1], [1, 2, 3]]
    assert "Отсортировано" in capsys.readouterr().out

def test_cli_loads_existing_file_and_exports(monkeypatch, capsys, tmp_path):
    data_file = tmp_path / "students.json"
    data_file.write_text(json.dumps({"students": [
        {"id": 1, "name": "Анна", "grades": [60.0]},
        {"id": 2, "name": "Борис", "grades": [90.0]},
    ]}), encoding="utf-8")
    export_file = tmp_path / "top.csv"

    run_cli(monkeypatch, ['10', '1', f'"{export_file}"', '4'], data_file)

    output = capsys.readouterr().out
    assert "Загружено 2 студентов" in output
    assert "Экспортировано 1 студентов" in output
    assert "Матрица оценок" in output
    assert export_file.read_text(encoding="utf-8").splitlines()[1].startswith("2,Борис,90.00")

def test_cli_save_failure_is_not_fatal(monkeypatch, capsys, caplog, tmp_path):
    caplog.set_level(logging.ERROR)
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    run_cli(monkeypatch, ["1", "1", "Анна", "3"], blocker / "students.json")

    output = capsys.readouterr().out
    assert "Не удалось сохранить данные" in output
    assert any("Не удалось сохранить" in r.getMessage() for r in caplog.records)
    assert "Анна" in output
    assert "До свидания!" in output

def test_cli_rejects_non_finite_grade(monkeypatch, capsys, tmp_path):
    data_file = tmp_path / "students.json"
    store = StudentStore()
    store.add(2, "Борис")
    store.append_grade(2, 50.0)
    seen = []
    original_clear = store.clear

    def spy_clear():
        seen.extend((s.id, list(s.grades), s.average) for s in store)
        original_clear()

    monkeypatch.setattr(store, "clear", spy_clear)
    run_cli(monkeypatch, ['2', '2', 'nan', '2', '2', 'inf', '2', '2', '-inf'], data_file, store)

    output = capsys.readouterr().out
    assert "Оценка добавлена" not in output
    assert output.count("недопустима") == 3
    assert seen == [(2, [50.0], 50.0)]
    # файл остаётся корректным JSON
    data = json.loads(data_file.read_text(encoding="utf-8"))
    assert data["students"][0]["grades"] == [50.0]

def test_run_reports_bad_logging_config(monkeypatch, capsys):
    def broken_config(**kwargs):
        raise ValueError("Unknown level: 'BOGUS'")

    monkeypatch.setattr("roster.main.logging.basicConfig", broken_config)
    with pytest.raises(SystemExit) as exc_info:
        run()

    assert exc_info.value.code == 1
    assert "КРИТИЧЕСКАЯ ОШИБКА" in capsys.readouterr().out
