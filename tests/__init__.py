"""
Test suite for decimal-math

Contains:
- tests/unit/          : Unit tests, one suite per module of src/decimal_math
"""
