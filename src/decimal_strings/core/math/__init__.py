"""
Core math modules для decimal-strings

Арифметика произвольной точности над десятичными строками: валидация
литералов, операции над модулями и знаковые add/sub/mul.
"""

# Validators
from decimal_strings.core.math.validators import (
    MAX_OPERAND_LENGTH,
    MINUS_SIGN,
    ZERO_LITERAL,
    is_ascii_digit,
    is_valid_number,
    is_valid_positive_number,
)

# Magnitude Arithmetic
from decimal_strings.core.math.magnitude import (
    add_magnitudes,
    compare_magnitudes,
    strip_leading_zeros,
    sub_magnitudes,
    to_little_endian,
)

# Multiplication
from decimal_strings.core.math.multiplication import mul_magnitudes

# Signed Arithmetic
from decimal_strings.core.math.signed_arithmetic import (
    INVALID_OPERAND,
    add,
    compare,
    mul,
    negate,
    sub,
)

__all__ = [
    # Validators — Constants
    "MAX_OPERAND_LENGTH",
    "MINUS_SIGN",
    "ZERO_LITERAL",
    # Validators — Functions
    "is_ascii_digit",
    "is_valid_number",
    "is_valid_positive_number",
    # Magnitude Arithmetic
    "add_magnitudes",
    "compare_magnitudes",
    "strip_leading_zeros",
    "sub_magnitudes",
    "to_little_endian",
    # Multiplication
    "mul_magnitudes",
    # Signed Arithmetic — Constants
    "INVALID_OPERAND",
    # Signed Arithmetic — Functions
    "add",
    "compare",
    "mul",
    "negate",
    "sub",
]
