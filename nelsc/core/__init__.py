"""
Core calendar engine, value types, and contracts.

This package contains the stateless conversion layers (base-24 codec,
Gregorian calendar, NELSC cycles, date notation) and is independent of
the report and CLI layers.
"""
