"""
decimal-strings — арифметика произвольной точности над десятичными строками

Публичная поверхность: add, sub, mul (а также negate, compare) принимают
десятичные литералы и возвращают литерал, либо "" при некорректном операнде.
"""

from decimal_strings.core.math import (
    INVALID_OPERAND,
    MAX_OPERAND_LENGTH,
    add,
    compare,
    is_valid_number,
    is_valid_positive_number,
    mul,
    negate,
    sub,
)

__version__ = "1.0.0"

__all__ = [
    "INVALID_OPERAND",
    "MAX_OPERAND_LENGTH",
    "add",
    "compare",
    "is_valid_number",
    "is_valid_positive_number",
    "mul",
    "negate",
    "sub",
]
