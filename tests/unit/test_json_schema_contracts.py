"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных (из Pydantic моделей отчётов)
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/pattern)
"""

import json

import pytest
from jsonschema import ValidationError

from nelsc.core.contracts import (
    ContractValidator,
    SchemaLoader,
    contract_for,
    report_payload,
    validate_day_info,
    validate_full_moon_week,
    validate_new_year_chart,
)
from nelsc.reports.day_info import build_day_info
from nelsc.reports.full_moon import full_moon_week
from nelsc.reports.new_year import new_year_entry


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_day_info():
    """Валидный day_info (день 0)."""
    return build_day_info(0).model_dump(mode="json")


@pytest.fixture
def valid_full_moon_week():
    """Валидная неделя полнолуния (месяц 0)."""
    return full_moon_week(0).model_dump(mode="json")


@pytest.fixture
def valid_new_year_chart():
    """Валидная таблица новых годов из двух строк."""
    entries = [new_year_entry(-96).model_dump(mode="json"), new_year_entry(-95).model_dump(mode="json")]
    return {
        "entries": entries,
        "earliest_first_day": "03-20",
        "latest_first_day": "04-07",
        "min_equinox_month_offset": -1,
        "max_equinox_month_offset": 0,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("name", ["day_info", "full_moon_week", "new_year_chart"])
    def test_schemas_load(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("day_info") is loader.load_schema("day_info")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# DAY INFO
# =============================================================================


class TestDayInfoContract:
    """Тесты day_info контракта"""

    def test_valid(self, valid_day_info) -> None:
        validate_day_info(valid_day_info)

    def test_boundary_days_valid(self) -> None:
        for day in (-35364, -14, 0, 14, 175020):
            assert report_payload(build_day_info(day))["day_offset"] == day

    def test_missing_required(self, valid_day_info) -> None:
        del valid_day_info["gregorian_date"]
        with pytest.raises(ValidationError):
            validate_day_info(valid_day_info)

    def test_wrong_type(self, valid_day_info) -> None:
        valid_day_info["long_month"] = "no"
        with pytest.raises(ValidationError):
            validate_day_info(valid_day_info)

    @pytest.mark.parametrize("text", ["00:B3 1", "00:B6-1", "00:B3-8", "00:E1-1", "0:B3-1"])
    def test_bad_nelsc_date_pattern(self, valid_day_info, text: str) -> None:
        valid_day_info["nelsc_date"] = text
        with pytest.raises(ValidationError):
            validate_day_info(valid_day_info)

    def test_day_offset_out_of_range(self, valid_day_info) -> None:
        valid_day_info["day_offset"] = 175021
        with pytest.raises(ValidationError) as excinfo:
            validate_day_info(valid_day_info)
        assert list(excinfo.value.path) == ["day_offset"]

    def test_additional_property(self, valid_day_info) -> None:
        valid_day_info["extra"] = 1
        with pytest.raises(ValidationError):
            validate_day_info(valid_day_info)


# =============================================================================
# FULL MOON WEEK
# =============================================================================


class TestFullMoonWeekContract:
    """Тесты full_moon_week контракта"""

    def test_valid(self, valid_full_moon_week) -> None:
        validate_full_moon_week(valid_full_moon_week)

    def test_bad_date(self, valid_full_moon_week) -> None:
        valid_full_moon_week["begin"] = "1925-2-2"
        with pytest.raises(ValidationError):
            validate_full_moon_week(valid_full_moon_week)

    def test_month_out_of_range(self, valid_full_moon_week) -> None:
        valid_full_moon_week["absolute_month"] = 5927
        with pytest.raises(ValidationError):
            validate_full_moon_week(valid_full_moon_week)


# =============================================================================
# NEW YEAR CHART
# =============================================================================


class TestNewYearChartContract:
    """Тесты new_year_chart контракта"""

    def test_valid(self, valid_new_year_chart) -> None:
        validate_new_year_chart(valid_new_year_chart)

    def test_empty_entries(self, valid_new_year_chart) -> None:
        valid_new_year_chart["entries"] = []
        with pytest.raises(ValidationError):
            validate_new_year_chart(valid_new_year_chart)

    def test_bad_entry_pair(self, valid_new_year_chart) -> None:
        valid_new_year_chart["entries"][0]["year_pair"] = "Z0"
        with pytest.raises(ValidationError):
            validate_new_year_chart(valid_new_year_chart)

    def test_bad_month_day(self, valid_new_year_chart) -> None:
        valid_new_year_chart["earliest_first_day"] = "1828-04-07"
        with pytest.raises(ValidationError):
            validate_new_year_chart(valid_new_year_chart)


# =============================================================================
# REPORT PAYLOAD
# =============================================================================


class TestReportPayload:
    """Тесты выбора контракта по типу отчёта"""

    def test_day_info(self) -> None:
        payload = report_payload(build_day_info(0))
        assert payload["nelsc_date"] == "00:B3-1"

    def test_full_moon_week(self) -> None:
        assert report_payload(full_moon_week(0)) == {
            "absolute_month": 0,
            "begin": "1925-02-02",
            "end": "1925-02-08",
        }

    def test_unknown_report_type(self) -> None:
        with pytest.raises(TypeError, match="No JSON contract for NewYearEntry"):
            report_payload(new_year_entry(0))

    def test_contract_cached(self) -> None:
        assert contract_for("day_info") is contract_for("day_info")

    def test_custom_loader(self, tmp_path) -> None:
        schema = {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "required": ["absolute_month"],
        }
        (tmp_path / "month_only.json").write_text(json.dumps(schema), encoding="utf-8")
        contract = ContractValidator("month_only", SchemaLoader(tmp_path))

        assert contract.dump(full_moon_week(1))["absolute_month"] == 1
        with pytest.raises(ValidationError):
            contract.validate({})
