# roster/errors.py
"""Модуль для определения пользовательских исключений приложения.

Ядро (хранилище, сортировки, поиск) исключений не бросает: о неудаче
сообщают возвращаемые True/False и None. Исключения нужны только
внешним слоям: меню и работе с файлами.
"""

class RosterAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(RosterAppError):
    """Исключение, связанное с некорректным вводом (пустое имя, оценка вне диапазона)."""
    pass

class FileProcessingError(RosterAppError):
    """Исключение, связанное с ошибками файловых операций."""
    pass
