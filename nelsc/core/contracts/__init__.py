"""
Contract Validation Module

Модуль для валидации JSON контрактов отчётов NELSC.
"""

from .validators import (
    SCHEMA_BY_REPORT,
    ContractValidator,
    SchemaLoader,
    contract_for,
    report_payload,
    validate_day_info,
    validate_full_moon_week,
    validate_new_year_chart,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Registry
    "SCHEMA_BY_REPORT",
    "contract_for",
    "report_payload",
    # Functions
    "validate_day_info",
    "validate_full_moon_week",
    "validate_new_year_chart",
]
