"""
Reports: модели отчётов поверх движка

Immutable Pydantic модели, которые строит слой отчётов (nelsc.reports).
Полная совместимость с JSON Schema (nelsc/core/contracts/schema/*.json).
"""

from typing import List

from pydantic import BaseModel, Field, model_validator

from nelsc.core.cycle import DAY_MAX, DAY_MIN, MONTH_MAX, MONTH_MIN, YEAR_MAX, YEAR_MIN


# =============================================================================
# DAY INFO
# =============================================================================


class DayInfo(BaseModel):
    """
    Сводка по одному absolute day offset.

    Immutable модель (frozen=True).
    """

    day_offset: int = Field(..., ge=DAY_MIN, le=DAY_MAX, description="Absolute day offset")
    absolute_month: int = Field(..., ge=MONTH_MIN, le=MONTH_MAX, description="Absolute month offset")
    nelsc_date: str = Field(
        ..., min_length=7, max_length=7, description="Дата NELSC в формате YY:MW-D"
    )
    year: int = Field(..., ge=YEAR_MIN, le=YEAR_MAX, description="Год NELSC")
    month_of_year: int = Field(..., ge=0, le=12, description="Месяц года (0 = первый)")
    day_of_month: int = Field(..., ge=0, le=34, description="День месяца (0 = первый)")
    long_month: bool = Field(..., description="Месяц long (35 дней)")
    long_year: bool = Field(..., description="Год long (13 месяцев)")
    gregorian_date: str = Field(
        ..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Григорианская дата YYYY-MM-DD"
    )

    model_config = {"frozen": True}


# =============================================================================
# FULL MOON WEEK
# =============================================================================


class FullMoonWeek(BaseModel):
    """
    Неделя полнолуния одного месяца NELSC в григорианских датах.

    Полнолуние не обязательно приходится на эту неделю: это приближение.
    """

    absolute_month: int = Field(..., ge=MONTH_MIN, le=MONTH_MAX, description="Absolute month offset")
    begin: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Первый день недели")
    end: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Последний день недели")

    model_config = {"frozen": True}

    @property
    def begin_year(self) -> int:
        """Григорианский год первого дня недели."""
        return int(self.begin[:4])


# =============================================================================
# NEW YEAR CHART
# =============================================================================


class NewYearEntry(BaseModel):
    """Строка таблицы новых годов."""

    year: int = Field(..., ge=YEAR_MIN, le=YEAR_MAX, description="Год NELSC")
    year_pair: str = Field(
        ..., min_length=2, max_length=2, description="Год NELSC base-24 парой"
    )
    first_day: str = Field(
        ..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Григорианская дата первого дня"
    )
    equinox_month_offset: int = Field(
        ..., description="Месяц равноденствия минус первый месяц года"
    )

    model_config = {"frozen": True}


class NewYearChart(BaseModel):
    """
    Таблица первых дней всех годов NELSC.

    Равноденствие аппроксимируется фиксированной григорианской датой.
    """

    entries: List[NewYearEntry] = Field(..., min_length=1, description="Строки по годам")
    earliest_first_day: str = Field(
        ..., pattern=r"^\d{2}-\d{2}$", description="Самый ранний первый день MM-DD"
    )
    latest_first_day: str = Field(
        ..., pattern=r"^\d{2}-\d{2}$", description="Самый поздний первый день MM-DD"
    )
    min_equinox_month_offset: int = Field(..., description="Минимальный сдвиг равноденствия")
    max_equinox_month_offset: int = Field(..., description="Максимальный сдвиг равноденствия")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_ranges(self) -> "NewYearChart":
        """Границы диапазонов упорядочены."""
        if self.earliest_first_day > self.latest_first_day:
            raise ValueError(
                f"earliest_first_day {self.earliest_first_day} after "
                f"latest_first_day {self.latest_first_day}"
            )
        if self.min_equinox_month_offset > self.max_equinox_month_offset:
            raise ValueError(
                f"min_equinox_month_offset {self.min_equinox_month_offset} exceeds "
                f"max_equinox_month_offset {self.max_equinox_month_offset}"
            )
        return self
