# roster/config.py
"""Настройки приложения: пути, лимиты и уровень логирования."""
import os

# --- ХРАНЕНИЕ ---
DATA_FILE = os.environ.get("ROSTER_DATA_FILE", os.path.join("data", "students.json"))

# --- ОГРАНИЧЕНИЯ ЗАПИСИ ---
NAME_LEN = 50
MAX_NAME_LENGTH = NAME_LEN - 1

# Начальная ёмкость хранилища, дальше удваивается: 4, 8, 16...
INITIAL_CAPACITY = 4

# Допустимый диапазон оценки (проверяется в меню, а не в хранилище)
GRADE_MIN = 0.0
GRADE_MAX = 100.0

# --- ЛОГИРОВАНИЕ ---
LOG_LEVEL = os.environ.get("ROSTER_LOG_LEVEL", "WARNING").upper()
