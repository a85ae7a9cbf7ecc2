"""
Signed Arithmetic — Знаковые add / sub / mul над десятичными литералами

Публичные операции:
- add(n1, n2), sub(n1, n2), mul(n1, n2)
- negate(n), compare(n1, n2)

Поток управления:
    validation → zero fast paths → классификация знаков →
    magnitude add/sub/mul → сборка результата (знак + нормализация)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операции тотальны: никакая комбинация операндов не бросает exception
2. Некорректный операнд (грамматика или длина) → INVALID_OPERAND ("")
3. Частичного успеха нет: либо полный корректный результат, либо ""
4. Результат — корректный литерал: без ведущих нулей, без "-0"

Длина ограничена только для входов: сумма двух операндов максимальной длины
может содержать на один разряд больше.
"""

import logging
from typing import Final, Optional

from decimal_strings.core.math.magnitude import (
    add_magnitudes,
    compare_magnitudes,
    sub_magnitudes,
)
from decimal_strings.core.math.multiplication import mul_magnitudes
from decimal_strings.core.math.validators import (
    MINUS_SIGN,
    ZERO_LITERAL,
    is_valid_number,
    is_valid_positive_number,
)

logger = logging.getLogger(__name__)

# Sentinel некорректного операнда. "" не является корректным литералом,
# поэтому не может быть спутан с числовым результатом.
INVALID_OPERAND: Final[str] = ""

# Сколько символов операнда показывать в логах
_LOG_PREVIEW_CHARS: Final[int] = 32


# =============================================================================
# ВНУТРЕННИЕ ХЕЛПЕРЫ
# =============================================================================


def _preview(value: object) -> str:
    if isinstance(value, str) and len(value) > _LOG_PREVIEW_CHARS:
        return f"{value[:_LOG_PREVIEW_CHARS]!r}... (len={len(value)})"
    return repr(value)


def _operands_valid(operation: str, n1: object, n2: object) -> bool:
    if is_valid_number(n1) and is_valid_number(n2):
        return True

    logger.debug(
        "%s rejected: invalid operand(s) n1=%s n2=%s",
        operation,
        _preview(n1),
        _preview(n2),
    )
    return False


def _signed_difference(m1: str, m2: str) -> str:
    """m1 - m2 для двух модулей, со знаком."""
    cmp = compare_magnitudes(m1, m2)
    if cmp > 0:
        return sub_magnitudes(m1, m2)
    if cmp < 0:
        return MINUS_SIGN + sub_magnitudes(m2, m1)
    return ZERO_LITERAL


# =============================================================================
# ADD
# =============================================================================


def add(n1: str, n2: str) -> str:
    """
    Сложение двух десятичных литералов.

    Таблица знаков:
        (+, +) → add(n1, n2)
        (+, -) → n1 - |n2|
        (-, +) → n2 - |n1|
        (-, -) → -(|n1| + |n2|)

    Args:
        n1: Первый литерал
        n2: Второй литерал

    Returns:
        Сумма как десятичный литерал, либо "" при некорректном операнде

    Examples:
        >>> add("999999999999999999999999999999", "1")
        '1000000000000000000000000000000'
        >>> add("3", "-10")
        '-7'
        >>> add("0", "-0")
        ''
    """
    if not _operands_valid("add", n1, n2):
        return INVALID_OPERAND

    if n1 == ZERO_LITERAL:
        return n2
    if n2 == ZERO_LITERAL:
        return n1

    n1_positive = is_valid_positive_number(n1)
    n2_positive = is_valid_positive_number(n2)

    if n1_positive and n2_positive:
        return add_magnitudes(n1, n2)

    if n1_positive:
        return _signed_difference(n1, n2[1:])

    if n2_positive:
        return _signed_difference(n2, n1[1:])

    return MINUS_SIGN + add_magnitudes(n1[1:], n2[1:])


# =============================================================================
# SUB
# =============================================================================


def sub(n1: str, n2: str) -> str:
    """
    Вычитание десятичных литералов: n1 - n2.

    Нулевые случаи асимметричны:
        sub("0", n) → negate(n)
        sub(n, "0") → n

    Таблица знаков:
        (+, +) → n1 - n2
        (+, -) → n1 + |n2|
        (-, +) → -(|n1| + n2)
        (-, -) → |n2| - |n1|

    Examples:
        >>> sub("3", "10")
        '-7'
        >>> sub("-3", "-10")
        '7'
        >>> sub("0", "5")
        '-5'
    """
    if not _operands_valid("sub", n1, n2):
        return INVALID_OPERAND

    if n2 == ZERO_LITERAL:
        return n1
    if n1 == ZERO_LITERAL:
        return negate(n2)

    n1_positive = is_valid_positive_number(n1)
    n2_positive = is_valid_positive_number(n2)

    if n1_positive and n2_positive:
        return _signed_difference(n1, n2)

    if n1_positive:
        return add_magnitudes(n1, n2[1:])

    if n2_positive:
        return MINUS_SIGN + add_magnitudes(n1[1:], n2)

    return _signed_difference(n2[1:], n1[1:])


# =============================================================================
# MUL
# =============================================================================


def mul(n1: str, n2: str) -> str:
    """
    Умножение десятичных литералов.

    Знак результата — произведение знаков операндов; модуль вычисляется
    через mul_magnitudes. Любой нулевой операнд → "0".

    Examples:
        >>> mul("123456789", "987654321")
        '121932631112635269'
        >>> mul("-2", "-3")
        '6'
        >>> mul("-100", "0")
        '0'
    """
    if not _operands_valid("mul", n1, n2):
        return INVALID_OPERAND

    if n1 == ZERO_LITERAL or n2 == ZERO_LITERAL:
        return ZERO_LITERAL

    n1_positive = is_valid_positive_number(n1)
    n2_positive = is_valid_positive_number(n2)

    m1 = n1 if n1_positive else n1[1:]
    m2 = n2 if n2_positive else n2[1:]

    product = mul_magnitudes(m1, m2)

    if n1_positive != n2_positive:
        return MINUS_SIGN + product
    return product


# =============================================================================
# NEGATE / COMPARE
# =============================================================================


def negate(n: str) -> str:
    """
    Смена знака литерала; "0" остаётся "0".

    Returns:
        -n как десятичный литерал, либо "" при некорректном операнде

    Examples:
        >>> negate("5")
        '-5'
        >>> negate("-5")
        '5'
        >>> negate("0")
        '0'
    """
    if not is_valid_number(n):
        logger.debug("negate rejected: invalid operand n=%s", _preview(n))
        return INVALID_OPERAND

    if n == ZERO_LITERAL:
        return ZERO_LITERAL

    if n[0] == MINUS_SIGN:
        return n[1:]
    return MINUS_SIGN + n


def compare(n1: str, n2: str) -> Optional[int]:
    """
    Знаковое сравнение двух литералов.

    Returns:
        1 если n1 > n2, -1 если n1 < n2, 0 если равны;
        None если любой операнд некорректен

    Examples:
        >>> compare("-10", "3")
        -1
        >>> compare("-3", "-10")
        1
        >>> compare("abc", "1") is None
        True
    """
    if not _operands_valid("compare", n1, n2):
        return None

    sign1 = _sign_of(n1)
    sign2 = _sign_of(n2)

    if sign1 != sign2:
        return 1 if sign1 > sign2 else -1

    if sign1 == 0:
        return 0

    if sign1 > 0:
        return compare_magnitudes(n1, n2)

    # Оба отрицательные: больший модуль → меньшее число
    return -compare_magnitudes(n1[1:], n2[1:])


def _sign_of(n: str) -> int:
    if n == ZERO_LITERAL:
        return 0
    return 1 if is_valid_positive_number(n) else -1
