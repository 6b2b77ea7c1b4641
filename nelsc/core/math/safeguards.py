"""
Contract Safeguards: проверки предусловий движка

Два непересекающихся класса отказов:
- Contract violation: вызывающий код передал значение, уже нарушающее
  документированное предусловие (индекс вне таблицы паттерна, месяц вне
  диапазона). Это ошибка программиста → ContractViolation, без восстановления.
- Validation/parse failure: некорректный пользовательский ввод → явный
  результат-сентинел (None) на уровне ядра, CalendarInputError на уровне отчётов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ContractViolation никогда не перехватывается в коде библиотеки
2. Проверки не отключаются флагом -O (явный raise, не assert)
3. Все проверки детерминированы и не имеют побочных эффектов
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(AssertionError):
    """
    Нарушение предусловия вызова (ошибка программиста).

    Наследуется от AssertionError: `except ValueError` его не перехватывает.
    После ContractViolation валидного внутреннего состояния не существует.
    """
    pass


# =============================================================================
# ПРОВЕРКИ ПРЕДУСЛОВИЙ
# =============================================================================


def require(condition: bool, message: str) -> None:
    """
    Безусловная проверка предусловия.

    Args:
        condition: Проверяемое условие
        message: Сообщение для ContractViolation

    Raises:
        ContractViolation: если condition ложно

    Examples:
        >>> require(True, "never raised")
        >>> require(False, "boom")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ContractViolation: boom
    """
    if not condition:
        raise ContractViolation(message)


def is_in_range(value: int, min_value: int, max_value: int) -> bool:
    """
    Проверка попадания в замкнутый диапазон [min_value, max_value].

    Examples:
        >>> is_in_range(0, -96, 479)
        True
        >>> is_in_range(480, -96, 479)
        False
    """
    return min_value <= value <= max_value


def require_in_range(
    value: int,
    name: str,
    min_value: int,
    max_value: int,
) -> None:
    """
    Валидация предусловия: значение в замкнутом диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (включительно)
        max_value: Максимальное допустимое значение (включительно)

    Raises:
        ContractViolation: если value вне [min_value, max_value]
    """
    if not is_in_range(value, min_value, max_value):
        raise ContractViolation(
            f"{name} must be in range [{min_value}, {max_value}], got {value}"
        )


def require_non_negative(value: int, name: str) -> None:
    """
    Валидация предусловия: значение неотрицательное.

    Raises:
        ContractViolation: если value < 0
    """
    if value < 0:
        raise ContractViolation(f"{name} must be non-negative, got {value}")
