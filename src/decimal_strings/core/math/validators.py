"""
Validators — Грамматика десятичных литералов

Модуль классифицирует строки как корректные знаковые десятичные литералы:
- "0" — единственное представление нуля
- D+ — положительное число без ведущих нулей
- -P — отрицательное число, где P — корректное положительное число

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Допускаются только ASCII цифры 0-9 (full-width и прочие Unicode цифры отвергаются)
2. Ведущие нули запрещены ("01", "00", "-01"), "-0" некорректен
3. Префикс "+" и пробелы запрещены
4. Длина литерала ограничена MAX_OPERAND_LENGTH
5. Валидаторы никогда не бросают exception (не-str вход → False)
"""

from typing import Final

# =============================================================================
# ОГРАНИЧЕНИЯ
# =============================================================================

# Максимальная длина операнда (включая знак)
# Защита от квадратичной сложности умножения: 10_000² = 10^8 digit-операций
MAX_OPERAND_LENGTH: Final[int] = 10_000

ZERO_LITERAL: Final[str] = "0"
MINUS_SIGN: Final[str] = "-"


# =============================================================================
# СИМВОЛЫ
# =============================================================================


def is_ascii_digit(ch: str) -> bool:
    """
    Проверка, является ли символ ASCII цифрой 0-9.

    str.isdigit() не подходит: он принимает full-width ("１") и
    надстрочные ("²") цифры.

    Examples:
        >>> is_ascii_digit("7")
        True
        >>> is_ascii_digit("７")
        False
    """
    return len(ch) == 1 and "0" <= ch <= "9"


# =============================================================================
# ЛИТЕРАЛЫ
# =============================================================================


def is_valid_positive_number(s: object) -> bool:
    """
    Проверка, является ли строка корректным положительным числом.

    Правила:
    - Не None, непустая строка
    - Первый символ не '0' (поэтому "0" НЕ является положительным числом)
    - Все символы — ASCII цифры

    Args:
        s: Проверяемое значение (любого типа)

    Returns:
        True если s — положительное число без ведущих нулей

    Examples:
        >>> is_valid_positive_number("123")
        True
        >>> is_valid_positive_number("0")
        False
        >>> is_valid_positive_number("012")
        False
        >>> is_valid_positive_number("-5")
        False
    """
    if not isinstance(s, str) or not s:
        return False

    # Ведущий ноль запрещён
    if s[0] == "0":
        return False

    return all(is_ascii_digit(ch) for ch in s)


def is_valid_number(s: object) -> bool:
    """
    Проверка, является ли строка корректным знаковым десятичным литералом.

    Args:
        s: Проверяемое значение (любого типа)

    Returns:
        True если s == "0", s — положительное число, либо "-" + положительное
        число; и длина s не превышает MAX_OPERAND_LENGTH

    Examples:
        >>> is_valid_number("0")
        True
        >>> is_valid_number("-42")
        True
        >>> is_valid_number("-0")
        False
        >>> is_valid_number("+42")
        False
    """
    if not isinstance(s, str) or not s:
        return False

    if len(s) > MAX_OPERAND_LENGTH:
        return False

    if s == ZERO_LITERAL:
        return True

    if s[0] == MINUS_SIGN:
        return is_valid_positive_number(s[1:])

    return is_valid_positive_number(s)
