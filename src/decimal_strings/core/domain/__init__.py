"""
Domain models and value objects.

Contains decimal literal value objects (sign, magnitude, limits) and the
request/result models of the evaluator.
"""

from decimal_strings.core.domain.literal import (
    ArithmeticLimits,
    DecimalSign,
    classify_sign,
    magnitude_of,
)
from decimal_strings.core.domain.operation import (
    SCHEMA_VERSION,
    ArithmeticOperation,
    ArithmeticRequest,
    ArithmeticResult,
    ResultStatus,
)

__all__ = [
    # Literal module
    "DecimalSign",
    "classify_sign",
    "magnitude_of",
    "ArithmeticLimits",
    # Operation models
    "SCHEMA_VERSION",
    "ArithmeticOperation",
    "ArithmeticRequest",
    "ArithmeticResult",
    "ResultStatus",
]
