# roster/input_utils.py
"""Чтение ввода пользователя с проверкой. Конец ввода (EOFError) пробрасывается вызывающему."""


def read_line(prompt: str = "") -> str:
    """Читает строку и обрезает пробелы по краям."""
    return input(prompt).strip()


def read_int(prompt: str) -> int:
    """Запрашивает целое число, пока не будет введено корректное значение."""
    while True:
        text = read_line(prompt)
        try:
            return int(text)
        except ValueError:
            print("❌ Нужно целое число, попробуйте ещё раз.")


def read_float(prompt: str) -> float:
    """Запрашивает число (можно дробное), пока не будет введено корректное значение."""
    while True:
        text = read_line(prompt)
        try:
            return float(text)
        except ValueError:
            print("❌ Нужно число, попробуйте ещё раз.")
