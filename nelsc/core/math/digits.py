"""
Decimal Digits: разбор одиночных ASCII цифр

Общий помощник сканеров григорианской даты и записи NELSC. Принимаются
только ASCII цифры 0-9; остальные цифры Unicode (например, "٣") отвергаются,
в отличие от str.isdigit().
"""

from typing import Optional


def decimal_digit_value(char: str) -> Optional[int]:
    """Значение одиночной ASCII десятичной цифры или None."""
    if len(char) == 1 and "0" <= char <= "9":
        return ord(char) - ord("0")
    return None
