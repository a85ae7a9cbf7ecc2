"""
ArithmeticOperation — Модели запроса и результата

Immutable Pydantic модели, совместимые с JSON Schema
(core/contracts/schema/arithmetic_request.json, arithmetic_result.json).
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, model_validator

from decimal_strings.core.math.validators import MAX_OPERAND_LENGTH, MINUS_SIGN

SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# ENUMS
# =============================================================================


class ArithmeticOperation(str, Enum):
    """Арифметическая операция"""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"


class ResultStatus(str, Enum):
    """Статус вычисления"""

    OK = "OK"
    INVALID_OPERAND = "INVALID_OPERAND"


# =============================================================================
# REQUEST MODEL
# =============================================================================


class ArithmeticRequest(BaseModel):
    """
    Запрос на вычисление n1 <op> n2.

    Операнды хранятся как есть: грамматику литерала проверяет арифметический
    слой, а не модель, и отказ выражается статусом INVALID_OPERAND.
    """

    schema_version: str = Field(
        default=SCHEMA_VERSION, pattern="^1$", description="Версия схемы"
    )
    request_id: str = Field(..., min_length=1, description="Идентификатор запроса")
    operation: ArithmeticOperation = Field(..., description="Операция (add/sub/mul)")
    n1: str = Field(..., description="Первый операнд (десятичный литерал)")
    n2: str = Field(..., description="Второй операнд (десятичный литерал)")

    model_config = {"frozen": True}


# =============================================================================
# RESULT MODEL
# =============================================================================


class ArithmeticResult(BaseModel):
    """
    Результат вычисления.

    Инвариант: value == "" тогда и только тогда, когда status == INVALID_OPERAND.
    """

    schema_version: str = Field(
        default=SCHEMA_VERSION, pattern="^1$", description="Версия схемы"
    )
    request_id: str = Field(..., min_length=1, description="Идентификатор запроса")
    operation: ArithmeticOperation = Field(..., description="Операция (add/sub/mul)")
    status: ResultStatus = Field(..., description="Статус вычисления")
    value: str = Field(
        ...,
        pattern="^(0|-?[1-9][0-9]*)?$",
        max_length=2 * MAX_OPERAND_LENGTH + 1,
        description="Результат (десятичный литерал) или '' при INVALID_OPERAND",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_status_consistency(self) -> "ArithmeticResult":
        """Пустое значение допустимо только для INVALID_OPERAND."""
        if (self.value == "") != (self.status == ResultStatus.INVALID_OPERAND):
            raise ValueError(
                f"value {self.value!r:.40} inconsistent with status {self.status.value}"
            )
        return self

    @property
    def digits(self) -> int:
        """Количество цифр модуля результата (0 для INVALID_OPERAND)."""
        return len(self.value.lstrip(MINUS_SIGN))

    @property
    def is_ok(self) -> bool:
        return self.status == ResultStatus.OK
