"""
Core math modules для NELSC

Контрактные проверки и декомпозиция индексов по паттернам long/short.
"""

# Contract Safeguards
from nelsc.core.math.safeguards import (
    ContractViolation,
    is_in_range,
    require,
    require_in_range,
    require_non_negative,
)

# Decimal Digits
from nelsc.core.math.digits import decimal_digit_value

# Pattern Walk
from nelsc.core.math.pattern_walk import (
    LONG_UNIT,
    SHORT_UNIT,
    PatternPosition,
    is_long_unit,
    sum_pattern,
    unit_length,
    walk_pattern,
)

__all__ = [
    # Contract Safeguards: Exceptions
    "ContractViolation",
    # Contract Safeguards: Checks
    "is_in_range",
    "require",
    "require_in_range",
    "require_non_negative",
    # Decimal Digits
    "decimal_digit_value",
    # Pattern Walk: Constants
    "LONG_UNIT",
    "SHORT_UNIT",
    # Pattern Walk: Types
    "PatternPosition",
    # Pattern Walk: Functions
    "is_long_unit",
    "sum_pattern",
    "unit_length",
    "walk_pattern",
]
