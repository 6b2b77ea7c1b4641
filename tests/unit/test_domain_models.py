"""
Тесты для Pydantic моделей (даты и отчёты)

Проверяет:
1. Immutability (frozen)
2. Валидацию диапазонов полей
3. Производные свойства (week, day_of_week, month_day, begin_year)
4. Model validator таблицы новых годов
"""

import pytest
from pydantic import ValidationError

from nelsc.core.cycle import DAY_MAX, DAY_MIN, MONTH_MAX, MONTH_MIN, YEAR_MAX, YEAR_MIN
from nelsc.core.domain import (
    DayInfo,
    FullMoonWeek,
    GregorianDate,
    NelscDate,
    NewYearChart,
    NewYearEntry,
)


class TestGregorianDate:
    """Тесты GregorianDate"""

    def test_str_and_month_day(self) -> None:
        date = GregorianDate(year=1925, month=2, day=2)
        assert str(date) == "1925-02-02"
        assert date.month_day() == "02-02"
        assert date.as_tuple() == (1925, 2, 2)

    def test_frozen(self) -> None:
        date = GregorianDate(year=1925, month=2, day=2)
        with pytest.raises(ValidationError):
            date.day = 3

    @pytest.mark.parametrize(
        "year, month, day",
        [(0, 1, 1), (10000, 1, 1), (2000, 0, 1), (2000, 13, 1), (2000, 1, 0), (2000, 1, 32)],
    )
    def test_field_ranges(self, year: int, month: int, day: int) -> None:
        with pytest.raises(ValidationError):
            GregorianDate(year=year, month=month, day=day)


class TestNelscDate:
    """Тесты NelscDate"""

    @pytest.mark.parametrize(
        "day, week, day_of_week",
        [(0, 1, 1), (6, 1, 7), (7, 2, 1), (14, 3, 1), (34, 5, 7)],
    )
    def test_week_fields(self, day: int, week: int, day_of_week: int) -> None:
        date = NelscDate(year=0, month=0, day=day)
        assert date.week == week
        assert date.day_of_week == day_of_week

    @pytest.mark.parametrize(
        "year, month, day",
        [(-97, 0, 0), (480, 0, 0), (0, 13, 0), (0, -1, 0), (0, 0, 35)],
    )
    def test_field_ranges(self, year: int, month: int, day: int) -> None:
        with pytest.raises(ValidationError):
            NelscDate(year=year, month=month, day=day)


class TestReportModels:
    """Тесты моделей отчётов"""

    def test_day_info_rejects_bad_gregorian(self) -> None:
        with pytest.raises(ValidationError):
            DayInfo(
                day_offset=0,
                absolute_month=0,
                nelsc_date="00:B3-1",
                year=0,
                month_of_year=10,
                day_of_month=14,
                long_month=False,
                long_year=False,
                gregorian_date="1925-2-2",
            )

    def test_full_moon_begin_year(self) -> None:
        week = FullMoonWeek(absolute_month=12, begin="1925-12-28", end="1926-01-03")
        assert week.begin_year == 1925

    def test_new_year_chart_ordering_enforced(self) -> None:
        entry = NewYearEntry(year=0, year_pair="00", first_day="1925-03-30", equinox_month_offset=0)
        with pytest.raises(ValidationError):
            NewYearChart(
                entries=[entry],
                earliest_first_day="04-07",
                latest_first_day="03-20",
                min_equinox_month_offset=0,
                max_equinox_month_offset=0,
            )
        with pytest.raises(ValidationError):
            NewYearChart(
                entries=[entry],
                earliest_first_day="03-20",
                latest_first_day="04-07",
                min_equinox_month_offset=1,
                max_equinox_month_offset=0,
            )

    def test_new_year_chart_requires_entries(self) -> None:
        with pytest.raises(ValidationError):
            NewYearChart(
                entries=[],
                earliest_first_day="03-20",
                latest_first_day="04-07",
                min_equinox_month_offset=0,
                max_equinox_month_offset=0,
            )


class TestModelBounds:
    """Границы полей моделей совпадают с диапазонами движка"""

    @pytest.mark.parametrize("year", [YEAR_MIN, YEAR_MAX])
    def test_year_bounds_accepted(self, year: int) -> None:
        assert NelscDate(year=year, month=0, day=0).year == year

    @pytest.mark.parametrize("year", [YEAR_MIN - 1, YEAR_MAX + 1])
    def test_year_bounds_rejected(self, year: int) -> None:
        with pytest.raises(ValidationError):
            NelscDate(year=year, month=0, day=0)
        with pytest.raises(ValidationError):
            NewYearEntry(year=year, year_pair="00", first_day="1925-03-30", equinox_month_offset=0)

    @pytest.mark.parametrize("month", [MONTH_MIN - 1, MONTH_MAX + 1])
    def test_month_bounds_rejected(self, month: int) -> None:
        with pytest.raises(ValidationError):
            FullMoonWeek(absolute_month=month, begin="1925-02-02", end="1925-02-08")

    def test_day_bounds_follow_engine(self) -> None:
        field = DayInfo.model_fields["day_offset"]
        bounds = {type(item).__name__: item for item in field.metadata}
        assert bounds["Ge"].ge == DAY_MIN
        assert bounds["Le"].le == DAY_MAX
