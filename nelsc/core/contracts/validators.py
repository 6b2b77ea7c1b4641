"""
JSON Schema Contract Validators

JSON представление каждого отчёта NELSC проверяется по формальному
JSON Schema контракту перед выводом. Контракт выбирается по типу
pydantic модели отчёта.

Схемы (nelsc/core/contracts/schema/):
- day_info.json        <- DayInfo
- full_moon_week.json  <- FullMoonWeek
- new_year_chart.json  <- NewYearChart
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Optional, Type

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from nelsc.core.domain.reports import DayInfo, FullMoonWeek, NewYearChart


SCHEMA_BY_REPORT: Final[Dict[Type[BaseModel], str]] = {
    DayInfo: "day_info",
    FullMoonWeek: "full_moon_week",
    NewYearChart: "new_year_chart",
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает schema/ рядом с этим модулем (package data).
    Каждая схема проходит meta-validation по Draft 2020-12 один раз.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir if schema_dir is not None else Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения (например, 'day_info').

        Raises:
            FileNotFoundError: Нет файла схемы
            ValueError: Файл не является валидной JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.is_file():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Контракт одного типа отчёта."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or SchemaLoader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Данные нарушают контракт
        """
        self._validator.validate(data)

    def dump(self, report: BaseModel) -> Dict[str, Any]:
        """JSON представление отчёта, прошедшее проверку контракта."""
        data = report.model_dump(mode="json")
        self.validate(data)
        return data


@lru_cache(maxsize=None)
def contract_for(schema_name: str) -> ContractValidator:
    """Общий валидатор пакетной схемы; схема читается один раз за процесс."""
    return ContractValidator(schema_name)


def report_payload(report: BaseModel) -> Dict[str, Any]:
    """
    Проверенное JSON представление отчёта для вывода.

    Raises:
        TypeError: Для типа отчёта нет контракта
        jsonschema.ValidationError: Отчёт нарушает контракт
    """
    schema_name = SCHEMA_BY_REPORT.get(type(report))
    if schema_name is None:
        raise TypeError(f"No JSON contract for {type(report).__name__}")
    return contract_for(schema_name).dump(report)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_day_info(data: Dict[str, Any]) -> None:
    """Проверка day_info данных (jsonschema.ValidationError при нарушении)."""
    contract_for("day_info").validate(data)


def validate_full_moon_week(data: Dict[str, Any]) -> None:
    """Проверка full_moon_week данных (jsonschema.ValidationError при нарушении)."""
    contract_for("full_moon_week").validate(data)


def validate_new_year_chart(data: Dict[str, Any]) -> None:
    """Проверка new_year_chart данных (jsonschema.ValidationError при нарушении)."""
    contract_for("new_year_chart").validate(data)
