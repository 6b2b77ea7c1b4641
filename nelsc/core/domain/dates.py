"""
Dates: value types календарных дат

Immutable Pydantic модели результатов декомпозиции:
- GregorianDate: (year, month 1..12, day 1..31), январская нумерация
- NelscDate: (year, month, day) NELSC с нуль-базированными month/day

Модели проверяют только поля по отдельности. Согласованность комбинации
(существует ли 30 февраля, есть ли 13-й месяц в коротком году) проверяют
конвертеры gregorian/date_format.
"""

from pydantic import BaseModel, Field

from nelsc.core.cycle import YEAR_MAX, YEAR_MIN


# =============================================================================
# GREGORIAN DATE
# =============================================================================


class GregorianDate(BaseModel):
    """
    Дата пролептического григорианского календаря.

    Immutable модель (frozen=True). Месяц и день один-базированные.
    """

    year: int = Field(..., ge=1, le=9999, description="Год (январская нумерация)")
    month: int = Field(..., ge=1, le=12, description="Месяц года (1 = январь)")
    day: int = Field(..., ge=1, le=31, description="День месяца (1 = первый)")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[int, int, int]:
        """(year, month, day)"""
        return (self.year, self.month, self.day)

    def month_day(self) -> str:
        """MM-DD, нулевое дополнение до двух символов."""
        return f"{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


# =============================================================================
# NELSC DATE
# =============================================================================


class NelscDate(BaseModel):
    """
    Дата NELSC.

    Immutable модель (frozen=True). month и day нуль-базированные:
    month 0..12 (13-й месяц только в длинном году), day 0..34
    (пятая неделя только в длинном месяце).
    """

    year: int = Field(..., ge=YEAR_MIN, le=YEAR_MAX, description="Год NELSC")
    month: int = Field(..., ge=0, le=12, description="Месяц года (0 = первый)")
    day: int = Field(..., ge=0, le=34, description="День месяца (0 = первый)")

    model_config = {"frozen": True}

    @property
    def week(self) -> int:
        """Неделя месяца (1-базированная)."""
        return self.day // 7 + 1

    @property
    def day_of_week(self) -> int:
        """День недели (1-базированный)."""
        return self.day % 7 + 1
