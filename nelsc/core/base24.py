"""
Base24: кодек base-24 цифр и знаковых пар

Алфавит из 24 символов: "0123456789ABCDEFGMPRTVXY".
- Цифра: беззнаковое значение 0..23, один символ
- Пара: две цифры, знаковое значение -96..479

Знаковая пара кодируется смещением: беззнаковое значение d0*24 + d1 лежит в
0..575; значения 480..575 представляют -96..-1 (unsigned - 576).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Чтение регистронезависимо, запись всегда в верхнем регистре
2. Чтение не выходит за конец строки (короткий ввод → None)
3. Запись значения вне домена → ContractViolation (вызывающий код
   обязан валидировать заранее)
4. pair_to_value(value_to_pair(v)) == v для всех v в [-96, 479]
"""

from typing import Final, Optional, TextIO

from nelsc.core.math.safeguards import require_in_range
from nelsc.core.sink import write_exact

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Цифры base-24 в верхнем регистре
BASE24_ALPHABET: Final[str] = "0123456789ABCDEFGMPRTVXY"

# Основание системы
BASE24_RADIX: Final[int] = 24

# Максимальное значение беззнаковой цифры
BASE24_DIGIT_MAX: Final[int] = 23

# Диапазон знаковой пары
BASE24_PAIR_MIN: Final[int] = -96
BASE24_PAIR_MAX: Final[int] = 479

# Число беззнаковых значений пары (24 * 24)
BASE24_PAIR_SPAN: Final[int] = 576

# Число символов в паре
BASE24_PAIR_LENGTH: Final[int] = 2

_DIGIT_VALUES: Final[dict[str, int]] = {
    digit: value for value, digit in enumerate(BASE24_ALPHABET)
}


# =============================================================================
# ЦИФРЫ
# =============================================================================


def digit_to_value(char: str) -> Optional[int]:
    """
    Значение base-24 цифры.

    Args:
        char: Один символ (регистр не важен)

    Returns:
        0..23, или None если символ не является base-24 цифрой

    Examples:
        >>> digit_to_value("Y")
        23
        >>> digit_to_value("m")
        17
        >>> digit_to_value("Z") is None
        True
    """
    return _DIGIT_VALUES.get(char.upper()) if len(char) == 1 else None


def value_to_digit(value: int) -> str:
    """
    Base-24 цифра для значения 0..23 (верхний регистр).

    Raises:
        ContractViolation: если value вне [0, 23]

    Examples:
        >>> value_to_digit(10)
        'A'
        >>> value_to_digit(23)
        'Y'
    """
    require_in_range(value, "base-24 digit value", 0, BASE24_DIGIT_MAX)
    return BASE24_ALPHABET[value]


# =============================================================================
# ЗНАКОВЫЕ ПАРЫ
# =============================================================================


def pair_to_value(text: str, pos: int = 0) -> Optional[int]:
    """
    Значение знаковой base-24 пары, начинающейся с позиции pos.

    Пробелы не пропускаются: пробел на позиции pos → None. Символы после
    пары игнорируются.

    Args:
        text: Строка, содержащая пару
        pos: Позиция первого символа пары

    Returns:
        -96..479, или None если символов меньше двух или цифра невалидна

    Examples:
        >>> pair_to_value("T0")
        -96
        >>> pair_to_value("RY")
        479
        >>> pair_to_value("yy")
        -1
        >>> pair_to_value("3") is None
        True
    """
    if pos < 0 or len(text) - pos < BASE24_PAIR_LENGTH:
        return None

    most = digit_to_value(text[pos])
    least = digit_to_value(text[pos + 1])
    if most is None or least is None:
        return None

    value = most * BASE24_RADIX + least
    if value > BASE24_PAIR_MAX:
        value -= BASE24_PAIR_SPAN

    return value


def value_to_pair(value: int) -> str:
    """
    Знаковая base-24 пара для значения -96..479.

    Raises:
        ContractViolation: если value вне [-96, 479]

    Examples:
        >>> value_to_pair(-1)
        'YY'
        >>> value_to_pair(0)
        '00'
        >>> value_to_pair(93)
        '3V'
    """
    require_in_range(value, "base-24 pair value", BASE24_PAIR_MIN, BASE24_PAIR_MAX)

    if value < 0:
        value += BASE24_PAIR_SPAN

    most, least = divmod(value, BASE24_RADIX)
    return value_to_digit(most) + value_to_digit(least)


def print_pair(sink: TextIO, value: int) -> None:
    """
    Запись знаковой пары в sink.

    Raises:
        ContractViolation: если value вне диапазона или sink is None
        OutputWriteError: если запись не удалась
    """
    write_exact(sink, value_to_pair(value))
