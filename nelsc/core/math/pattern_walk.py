"""
Pattern Walk: декомпозиция индекса по повторяющемуся паттерну long/short

Оба уровня циклов NELSC (day ↔ month и month ↔ year) описываются строкой
паттерна из символов "S" (short unit) и "L" (long unit). Модуль даёт два
примитива над такой строкой:
- walk_pattern: пройти паттерн с остатком до единицы, содержащей остаток
- sum_pattern: длина первых N единиц паттерна в под-единицах

Остаток всегда неотрицательный: отрицательные индексы переводятся в
неотрицательный домен вызывающим кодом (boost/sink) до обращения к паттерну.
Число шагов ограничено длиной паттерна (32 для месяцев, 11 для лет).
"""

from typing import Final, NamedTuple

from nelsc.core.math.safeguards import ContractViolation, require, require_non_negative

# =============================================================================
# СИМВОЛЫ ПАТТЕРНА
# =============================================================================

# Long unit (35-дневный месяц, 13-месячный год)
LONG_UNIT: Final[str] = "L"

# Short unit (28-дневный месяц, 12-месячный год)
SHORT_UNIT: Final[str] = "S"


# =============================================================================
# TYPES
# =============================================================================


class PatternPosition(NamedTuple):
    """Результат прохода по паттерну."""

    units: int  # Число полностью пройденных единиц паттерна
    remainder: int  # Смещение внутри текущей единицы (в под-единицах)


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def is_long_unit(symbol: str) -> bool:
    """
    Интерпретация символа паттерна.

    Args:
        symbol: "L" или "S" (регистр важен)

    Returns:
        True для long unit, False для short unit

    Raises:
        ContractViolation: для любого другого символа

    Examples:
        >>> is_long_unit("L")
        True
        >>> is_long_unit("S")
        False
    """
    if symbol == LONG_UNIT:
        return True
    if symbol == SHORT_UNIT:
        return False
    raise ContractViolation(f"Pattern symbol must be 'L' or 'S', got {symbol!r}")


def unit_length(symbol: str, short_length: int, long_length: int) -> int:
    """Длина единицы паттерна в под-единицах."""
    return long_length if is_long_unit(symbol) else short_length


def walk_pattern(
    pattern: str,
    remainder: int,
    short_length: int,
    long_length: int,
) -> PatternPosition:
    """
    Проход по паттерну до единицы, содержащей остаток.

    Идём по паттерну единица за единицей, вычитая длину каждой пройденной
    единицы, пока остаток не поместится в текущую.

    Args:
        pattern: Строка паттерна из "S"/"L"
        remainder: Неотрицательный остаток в под-единицах
        short_length: Длина short unit
        long_length: Длина long unit

    Returns:
        PatternPosition(units, remainder)

    Raises:
        ContractViolation: если remainder < 0 или выходит за длину паттерна

    Examples:
        >>> walk_pattern("SSL", 0, 28, 35)
        PatternPosition(units=0, remainder=0)
        >>> walk_pattern("SSL", 60, 28, 35)
        PatternPosition(units=2, remainder=4)
    """
    require_non_negative(remainder, "remainder")

    units = 0
    while remainder > 0:
        require(
            units < len(pattern),
            f"remainder exceeds total length of pattern {pattern!r}",
        )

        length = unit_length(pattern[units], short_length, long_length)
        if remainder < length:
            break

        units += 1
        remainder -= length

    return PatternPosition(units=units, remainder=remainder)


def sum_pattern(
    pattern: str,
    count: int,
    short_length: int,
    long_length: int,
) -> int:
    """
    Суммарная длина первых count единиц паттерна.

    Args:
        pattern: Строка паттерна из "S"/"L"
        count: Число единиц (0 <= count <= len(pattern))
        short_length: Длина short unit
        long_length: Длина long unit

    Returns:
        Сумма длин в под-единицах

    Examples:
        >>> sum_pattern("SSL", 3, 28, 35)
        91
        >>> sum_pattern("SSL", 0, 28, 35)
        0
    """
    require(
        0 <= count <= len(pattern),
        f"count must be in range [0, {len(pattern)}], got {count}",
    )
    return sum(
        unit_length(symbol, short_length, long_length) for symbol in pattern[:count]
    )
