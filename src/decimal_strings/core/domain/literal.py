"""
DecimalLiteral — Знак, модуль и лимиты операндов

Value-объекты вокруг десятичного литерала:
- DecimalSign: POSITIVE / NEGATIVE / ZERO
- classify_sign / magnitude_of: разбор корректного литерала
- ArithmeticLimits: immutable конфигурация ограничений операндов

В отличие от знаковой арифметики (которая возвращает ""), эти хелперы
бросают ValueError на некорректный литерал: их вызывают только после
валидации.
"""

from enum import Enum

from pydantic import BaseModel, Field

from decimal_strings.core.math.validators import (
    MAX_OPERAND_LENGTH,
    MINUS_SIGN,
    ZERO_LITERAL,
    is_valid_number,
)


# =============================================================================
# ENUMS
# =============================================================================


class DecimalSign(str, Enum):
    """Знак десятичного литерала"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


# =============================================================================
# РАЗБОР ЛИТЕРАЛА
# =============================================================================


def classify_sign(literal: str) -> DecimalSign:
    """
    Определение знака литерала.

    Raises:
        ValueError: Если literal не является корректным десятичным литералом

    Examples:
        >>> classify_sign("-12")
        <DecimalSign.NEGATIVE: 'negative'>
        >>> classify_sign("0")
        <DecimalSign.ZERO: 'zero'>
    """
    if not is_valid_number(literal):
        raise ValueError(f"Invalid decimal literal: {literal!r:.40}")

    if literal == ZERO_LITERAL:
        return DecimalSign.ZERO
    if literal[0] == MINUS_SIGN:
        return DecimalSign.NEGATIVE
    return DecimalSign.POSITIVE


def magnitude_of(literal: str) -> str:
    """
    Модуль литерала (строка без знака).

    Raises:
        ValueError: Если literal не является корректным десятичным литералом

    Examples:
        >>> magnitude_of("-120")
        '120'
    """
    if classify_sign(literal) is DecimalSign.NEGATIVE:
        return literal[1:]
    return literal


# =============================================================================
# LIMITS
# =============================================================================


class ArithmeticLimits(BaseModel):
    """
    Ограничения для операндов.

    Immutable модель (frozen=True), создаётся явно и передаётся в evaluator.
    Лимит можно ужесточить, но не поднять выше MAX_OPERAND_LENGTH:
    умножение квадратично по длине операндов.
    """

    max_operand_length: int = Field(
        default=MAX_OPERAND_LENGTH,
        ge=1,
        le=MAX_OPERAND_LENGTH,
        description="Максимальная длина операнда в символах (включая знак)",
    )

    model_config = {"frozen": True}

    def admits(self, literal: str) -> bool:
        """Проверка, укладывается ли строка в лимит длины."""
        return len(literal) <= self.max_operand_length
