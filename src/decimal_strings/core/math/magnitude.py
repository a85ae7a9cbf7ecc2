"""
Magnitude Arithmetic — Сравнение, сложение и вычитание модулей

Модуль работает только с модулями (magnitudes): строками ASCII цифр без знака
и без ведущих нулей (кроме самого "0"). Валидация выполняется вызывающей
стороной (signed_arithmetic), здесь предусловия не перепроверяются.

Представление:
- Little-endian список цифр: индекс 0 — младший разряд (единицы)
- Результат разворачивается обратно в most-significant-first строку

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не содержит ведущих нулей (кроме "0")
2. sub_magnitudes требует m1 >= m2
3. Все буферы локальны для вызова (нет общего изменяемого состояния)
"""

from decimal_strings.core.math.validators import ZERO_LITERAL


# =============================================================================
# ПРЕДСТАВЛЕНИЕ
# =============================================================================


def to_little_endian(magnitude: str) -> list[int]:
    """
    Конверсия модуля в little-endian список цифр.

    Examples:
        >>> to_little_endian("123")
        [3, 2, 1]
    """
    return [ord(ch) - ord("0") for ch in reversed(magnitude)]


def strip_leading_zeros(digits: str) -> str:
    """
    Удаление ведущих нулей; строка из одних нулей → "0".

    Examples:
        >>> strip_leading_zeros("000120")
        '120'
        >>> strip_leading_zeros("0000")
        '0'
    """
    stripped = digits.lstrip("0")
    return stripped if stripped else ZERO_LITERAL


def _from_little_endian(digits: list[int]) -> str:
    return "".join(chr(d + ord("0")) for d in reversed(digits))


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(m1: str, m2: str) -> int:
    """
    Сравнение двух модулей.

    Без ведущих нулей более короткая строка всегда меньше; при равной длине
    лексикографическое сравнение совпадает с числовым.

    Args:
        m1: Первый модуль
        m2: Второй модуль

    Returns:
        1 если m1 > m2, -1 если m1 < m2, 0 если равны

    Examples:
        >>> compare_magnitudes("100", "99")
        1
        >>> compare_magnitudes("123", "124")
        -1
        >>> compare_magnitudes("42", "42")
        0
    """
    if len(m1) != len(m2):
        return 1 if len(m1) > len(m2) else -1

    for d1, d2 in zip(m1, m2):
        if d1 != d2:
            return 1 if d1 > d2 else -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_magnitudes(m1: str, m2: str) -> str:
    """
    Сложение двух модулей поразрядно с переносом.

    Алгоритм:
        sum = d1[i] + d2[i] + carry
        digit = sum % 10, carry = sum // 10
        цикл продолжается пока есть цифры в любом операнде или carry != 0

    Examples:
        >>> add_magnitudes("999", "1")
        '1000'
        >>> add_magnitudes("123456789", "987654321")
        '1111111110'
    """
    a = to_little_endian(m1)
    b = to_little_endian(m2)

    result: list[int] = []
    carry = 0
    i = 0

    while i < len(a) or i < len(b) or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]

        result.append(total % 10)
        carry = total // 10
        i += 1

    return _from_little_endian(result)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub_magnitudes(m1: str, m2: str) -> str:
    """
    Вычитание модулей: m1 - m2 при условии m1 >= m2.

    Алгоритм:
        t = d1[i] - d2[i] + borrow   (borrow ∈ {0, -1})
        digit = (t + 10) % 10
        borrow = -1 если t < 0, иначе 0
    После разворота ведущие нули удаляются.

    Args:
        m1: Уменьшаемое (больший или равный модуль)
        m2: Вычитаемое

    Returns:
        Модуль разности без ведущих нулей

    Examples:
        >>> sub_magnitudes("1000", "1")
        '999'
        >>> sub_magnitudes("555", "555")
        '0'
    """
    a = to_little_endian(m1)
    b = to_little_endian(m2)

    result: list[int] = []
    borrow = 0

    for i, digit in enumerate(a):
        t = digit + borrow
        if i < len(b):
            t -= b[i]

        result.append((t + 10) % 10)
        borrow = -1 if t < 0 else 0

    return strip_leading_zeros(_from_little_endian(result))
