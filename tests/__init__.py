"""
Test suite for the NELSC calendar engine

Contains:
- tests/unit/          : Unit tests for the engine, reports and CLI
"""
