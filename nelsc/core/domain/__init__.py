"""
Domain models and value objects.

Contains calendar value types (GregorianDate, NelscDate) and report models.
"""

from nelsc.core.domain.dates import GregorianDate, NelscDate
from nelsc.core.domain.reports import (
    DayInfo,
    FullMoonWeek,
    NewYearChart,
    NewYearEntry,
)

__all__ = [
    # Dates
    "GregorianDate",
    "NelscDate",
    # Reports
    "DayInfo",
    "FullMoonWeek",
    "NewYearChart",
    "NewYearEntry",
]
