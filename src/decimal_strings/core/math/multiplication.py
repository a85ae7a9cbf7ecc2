"""
Multiplication — Умножение модулей через свёртку разрядов

Школьное умножение с отложенным переносом:
1. Аккумулятор длины len(m1) + len(m2), индекс = вес разряда
2. Для каждой пары (i, j): acc[i + j] += d1[i] * d2[j]
   (элементы временно выходят за пределы одной цифры)
3. Один проход переноса от младшего разряда к старшему:
   t += acc[k]; acc[k] = t % 10; t //= 10

Сложность O(len(m1) * len(m2)), поэтому длина каждого операнда ограничена
MAX_OPERAND_LENGTH (10_000² = 10^8 умножений цифр в худшем случае).
"""

from decimal_strings.core.math.magnitude import strip_leading_zeros, to_little_endian
from decimal_strings.core.math.validators import MAX_OPERAND_LENGTH


def mul_magnitudes(m1: str, m2: str) -> str:
    """
    Умножение двух ненулевых модулей.

    Args:
        m1: Первый модуль (ненулевой, длина <= MAX_OPERAND_LENGTH)
        m2: Второй модуль (ненулевой, длина <= MAX_OPERAND_LENGTH)

    Returns:
        Модуль произведения без ведущих нулей

    Raises:
        ValueError: Если длина операнда превышает MAX_OPERAND_LENGTH

    Examples:
        >>> mul_magnitudes("999", "999")
        '998001'
        >>> mul_magnitudes("123456789", "987654321")
        '121932631112635269'
    """
    if len(m1) > MAX_OPERAND_LENGTH or len(m2) > MAX_OPERAND_LENGTH:
        raise ValueError(
            f"operand length must be <= {MAX_OPERAND_LENGTH}, "
            f"got {len(m1)} and {len(m2)}"
        )

    a = to_little_endian(m1)
    b = to_little_endian(m2)

    acc = [0] * (len(a) + len(b))

    # Свёртка: сумма всех d_i * d_j в слот i + j
    for i, da in enumerate(a):
        if da == 0:
            continue
        for j, db in enumerate(b):
            acc[i + j] += da * db

    # Единственный проход переноса
    t = 0
    for k in range(len(acc)):
        t += acc[k]
        acc[k] = t % 10
        t //= 10

    digits = "".join(chr(d + ord("0")) for d in reversed(acc))

    # Нулевой результат невозможен при ненулевых операндах, но strip
    # всё равно возвращает "0" для строки из одних нулей
    return strip_leading_zeros(digits)
