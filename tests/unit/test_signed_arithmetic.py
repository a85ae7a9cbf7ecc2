"""
Тесты для Signed Arithmetic — add / sub / mul / negate / compare

Проверяемые инварианты:
1. Некорректный операнд → "" (никаких exception)
2. Таблица знаков для add/sub/mul
3. Нулевые fast paths (включая асимметрию sub)
4. Свойства: тождества, обратный элемент, коммутативность,
   согласованность sub и add(negate), совпадение с int
5. Отсутствие общего изменяемого состояния (параллельные вызовы)
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from decimal_strings.core.math.signed_arithmetic import (
    INVALID_OPERAND,
    add,
    compare,
    mul,
    negate,
    sub,
)
from decimal_strings.core.math.validators import MAX_OPERAND_LENGTH, is_valid_number


# =============================================================================
# STRATEGIES
# =============================================================================

BOUND = 10**80

literals = st.integers(min_value=-BOUND, max_value=BOUND).map(str)
positive_literals = st.integers(min_value=1, max_value=BOUND).map(str)

invalid_literals = st.one_of(
    st.text(max_size=20).filter(lambda s: not is_valid_number(s)),
    positive_literals.map(lambda p: "0" + p),
    positive_literals.map(lambda p: "-0" + p),
    positive_literals.map(lambda p: "+" + p),
    positive_literals.map(lambda p: p + " "),
    positive_literals.map(lambda p: p + ".0"),
    st.just("-0"),
    st.just(""),
    st.none(),
)

OPERATIONS = [add, sub, mul]


# =============================================================================
# ТЕСТЫ: Add
# =============================================================================


class TestAdd:
    """Тесты add: таблица знаков и граничные случаи."""

    @pytest.mark.parametrize(
        "n1,n2,expected",
        [
            # Положительное + положительное
            ("1", "2", "3"),
            ("999", "1", "1000"),
            ("123456789", "987654321", "1111111110"),
            ("999999999999999999999999999999", "1", "1000000000000000000000000000000"),
            ("1" + "9" * 99, "1", "2" + "0" * 99),
            (
                "12345678901234567890123456789012345678901234567890",
                "98765432109876543210987654321098765432109876543210",
                "111111111011111111101111111110111111111011111111100",
            ),
            ("9223372036854775807", "1", "9223372036854775808"),
            # Положительное + отрицательное (результат положительный)
            ("10", "-3", "7"),
            ("1000", "-1", "999"),
            ("500", "-499", "1"),
            ("1000000000000000000000000000000", "-999999999999999999999999999999", "1"),
            # Положительное + отрицательное (результат отрицательный)
            ("3", "-10", "-7"),
            ("1", "-999", "-998"),
            ("999999999999999999999999999999", "-1000000000000000000000000000000", "-1"),
            # Положительное + отрицательное (результат ноль)
            ("123", "-123", "0"),
            ("1", "-1", "0"),
            ("9223372036854775807", "-9223372036854775807", "0"),
            # Отрицательное + положительное
            ("-10", "3", "-7"),
            ("-1000", "1", "-999"),
            ("-1000000000000000000000000000000", "999999999999999999999999999999", "-1"),
            ("-3", "10", "7"),
            ("-1", "999", "998"),
            ("-999999999999999999999999999999", "1000000000000000000000000000000", "1"),
            ("-555", "555", "0"),
            ("-9223372036854775808", "9223372036854775808", "0"),
            # Отрицательное + отрицательное
            ("-1", "-2", "-3"),
            ("-999", "-1", "-1000"),
            ("-123456789", "-987654321", "-1111111110"),
            ("-999999999999999999999999999999", "-1", "-1000000000000000000000000000000"),
            ("-9223372036854775808", "-1", "-9223372036854775809"),
            # Ноль
            ("0", "0", "0"),
            ("0", "123", "123"),
            ("456", "0", "456"),
            ("0", "-789", "-789"),
            ("-100", "0", "-100"),
        ],
    )
    def test_add(self, n1, n2, expected):
        assert add(n1, n2) == expected

    @pytest.mark.parametrize(
        "n1,n2",
        [
            ("0", "-0"),
            ("", "123"),
            ("123", ""),
            ("abc", "123"),
            ("12a", "34"),
            ("-", "5"),
            ("01", "2"),
            ("-01", "2"),
            ("--5", "3"),
            ("+-5", "3"),
            (" ", "5"),
            ("123", "00"),
            ("0", "00"),
            (None, "123"),
            ("123", None),
            (None, None),
            ("１２３", "456"),
            ("123", "４５６"),
            ("1,234", "567"),
            ("123", "5,678"),
            ("123.45", "67"),
            ("123", "67.89"),
            (" 123 ", "45"),
            ("123", " 45 "),
            ("\t123", "45"),
            ("123", "\n45"),
            ("000123", "45"),
            ("123", "-00045"),
            ("+123", "45"),
            ("123", "+45"),
            ("0000", "1"),
            ("123_456", "78"),
            ("\0", "5"),
            ("123", "\0"),
            ("９９９", "888"),
            ("∞", "123"),
            ("123", "Ⅷ"),
            ("9223372036854775807a", "1"),
            ("-9223372036854775808-", "1"),
            ("0", "00000"),
        ],
    )
    def test_invalid_operands(self, n1, n2):
        """Любой некорректный операнд → ""."""
        assert add(n1, n2) == INVALID_OPERAND

    def test_long_carry_scenario(self):
        assert add("999999999999999999999999999999", "1") == "1000000000000000000000000000000"

    def test_negative_zero_is_invalid(self):
        """"-0" — не ноль, а некорректный операнд."""
        assert add("0", "-0") == ""


# =============================================================================
# ТЕСТЫ: Sub
# =============================================================================


class TestSub:
    """Тесты sub: таблица знаков и асимметричные нулевые случаи."""

    @pytest.mark.parametrize(
        "n1,n2,expected",
        [
            # Ноль
            ("0", "0", "0"),
            ("0", "5", "-5"),
            ("0", "-3", "3"),
            ("7", "0", "7"),
            ("-4", "0", "-4"),
            # Положительное - положительное
            ("10", "3", "7"),
            ("100", "1", "99"),
            ("999999999", "123456789", "876543210"),
            ("3", "10", "-7"),
            ("1", "100", "-99"),
            ("123456789", "999999999", "-876543210"),
            ("5", "5", "0"),
            ("999999999999", "999999999999", "0"),
            # Положительное - отрицательное
            ("5", "-3", "8"),
            ("100", "-1", "101"),
            ("123456789", "-987654321", "1111111110"),
            # Отрицательное - положительное
            ("-5", "3", "-8"),
            ("-100", "1", "-101"),
            ("-123456789", "987654321", "-1111111110"),
            # Отрицательное - отрицательное
            ("-10", "-3", "-7"),
            ("-1000", "-1", "-999"),
            ("-3", "-10", "7"),
            ("-1", "-100", "99"),
            ("-777", "-777", "0"),
            # Большие числа
            ("1000000000000000000000000000000", "1", "999999999999999999999999999999"),
            ("-1000000000000000000000000000000", "-1", "-999999999999999999999999999999"),
            (
                "123456789012345678901234567890",
                "98765432109876543210987654321",
                "24691356902469135690246913569",
            ),
        ],
    )
    def test_sub(self, n1, n2, expected):
        assert sub(n1, n2) == expected

    @pytest.mark.parametrize(
        "n1,n2",
        [
            ("abc", "1"),
            ("01", "2"),
            ("1", "-0"),
            ("-0", "1"),
            (None, "1"),
            ("123", ""),
            ("--5", "3"),
            ("12.3", "4"),
        ],
    )
    def test_invalid_operands(self, n1, n2):
        assert sub(n1, n2) == INVALID_OPERAND

    def test_sign_flip_scenario(self):
        assert sub("3", "10") == "-7"


# =============================================================================
# ТЕСТЫ: Mul
# =============================================================================


class TestMul:
    """Тесты mul: знак произведения, ноль и единица."""

    @pytest.mark.parametrize(
        "n1,n2,expected",
        [
            ("1", "1", "1"),
            ("2", "3", "6"),
            ("10", "10", "100"),
            ("999", "999", "998001"),
            ("123456789", "987654321", "121932631112635269"),
            (
                "99999999999999999999",
                "99999999999999999999",
                "9999999999999999999800000000000000000001",
            ),
            # Разные знаки
            ("5", "-3", "-15"),
            ("100", "-1", "-100"),
            ("123456789", "-987654321", "-121932631112635269"),
            ("999999999999999999999999999999", "-2", "-1999999999999999999999999999998"),
            ("-7", "8", "-56"),
            ("-1", "999", "-999"),
            ("-12345678901234567890", "10", "-123456789012345678900"),
            # Оба отрицательные
            ("-2", "-3", "6"),
            ("-100", "-50", "5000"),
            (
                "-99999999999999999999",
                "-99999999999999999999",
                "9999999999999999999800000000000000000001",
            ),
            # Ноль
            ("0", "0", "0"),
            ("0", "123", "0"),
            ("456", "0", "0"),
            ("0", "-789", "0"),
            ("-100", "0", "0"),
            ("9223372036854775807", "0", "0"),
            ("-9223372036854775808", "0", "0"),
            # Единица
            ("12345678901234567890", "1", "12345678901234567890"),
            ("-98765432109876543210", "1", "-98765432109876543210"),
            ("12345678901234567890", "-1", "-12345678901234567890"),
            ("-98765432109876543210", "-1", "98765432109876543210"),
        ],
    )
    def test_mul(self, n1, n2, expected):
        assert mul(n1, n2) == expected

    @pytest.mark.parametrize(
        "n1,n2",
        [
            ("", "123"),
            ("123", ""),
            ("abc", "123"),
            ("-", "5"),
            ("01", "2"),
            ("-01", "2"),
            ("+5", "3"),
            (" 123 ", "45"),
            ("123.45", "67"),
            ("1,234", "567"),
            ("00", "5"),
            (None, "123"),
            ("123", None),
            ("0", "-0"),
            ("123_456", "78"),
        ],
    )
    def test_invalid_operands(self, n1, n2):
        assert mul(n1, n2) == INVALID_OPERAND

    def test_invalid_operand_with_zero(self):
        """Zero fast path не обходит валидацию."""
        assert mul("0", "abc") == INVALID_OPERAND
        assert mul("-0", "0") == INVALID_OPERAND

    def test_99_nines_squared(self):
        nines = "9" * 99
        expected = "9" * 98 + "8" + "0" * 98 + "1"

        assert mul(nines, nines) == expected
        assert mul("-" + nines, nines) == "-" + expected


# =============================================================================
# ТЕСТЫ: Лимит длины
# =============================================================================


class TestLengthLimit:
    """Операнды длиннее MAX_OPERAND_LENGTH отвергаются всеми операциями."""

    @pytest.mark.parametrize("op", OPERATIONS)
    def test_over_limit_rejected(self, op):
        too_long = "1" * (MAX_OPERAND_LENGTH + 1)
        assert op(too_long, "1") == INVALID_OPERAND
        assert op("1", too_long) == INVALID_OPERAND
        assert op("0", too_long) == INVALID_OPERAND

    def test_negative_over_limit_rejected(self):
        """"-" + MAX_OPERAND_LENGTH цифр уже длиннее лимита."""
        too_long = "-" + "1" * MAX_OPERAND_LENGTH
        assert add(too_long, "1") == INVALID_OPERAND

    def test_at_limit_accepted(self):
        at_limit = "9" * MAX_OPERAND_LENGTH
        result = add(at_limit, "1")

        assert result == "1" + "0" * MAX_OPERAND_LENGTH
        assert len(result) == MAX_OPERAND_LENGTH + 1

    def test_at_limit_mul_single_digit(self):
        at_limit = "1" * MAX_OPERAND_LENGTH
        assert mul(at_limit, "-2") == "-" + "2" * MAX_OPERAND_LENGTH


# =============================================================================
# ТЕСТЫ: Negate / Compare
# =============================================================================


class TestNegate:
    """Тесты negate."""

    @pytest.mark.parametrize(
        "n,expected", [("0", "0"), ("5", "-5"), ("-5", "5"), ("1" + "0" * 40, "-1" + "0" * 40)]
    )
    def test_negate(self, n, expected):
        assert negate(n) == expected

    @pytest.mark.parametrize("n", ["-0", "", None, "01", "+1"])
    def test_invalid(self, n):
        assert negate(n) == INVALID_OPERAND


class TestCompare:
    """Тесты compare (знаковое сравнение)."""

    @pytest.mark.parametrize(
        "n1,n2,expected",
        [
            ("0", "0", 0),
            ("1", "0", 1),
            ("0", "1", -1),
            ("-1", "0", -1),
            ("0", "-1", 1),
            ("-10", "3", -1),
            ("3", "-10", 1),
            ("-3", "-10", 1),
            ("-10", "-3", -1),
            ("-7", "-7", 0),
            ("100", "99", 1),
            ("99", "100", -1),
        ],
    )
    def test_compare(self, n1, n2, expected):
        assert compare(n1, n2) == expected

    def test_invalid_returns_none(self):
        assert compare("abc", "1") is None
        assert compare("1", "-0") is None
        assert compare(None, None) is None


# =============================================================================
# ТЕСТЫ: Свойства (hypothesis)
# =============================================================================


class TestProperties:
    """Алгебраические свойства и сверка с int."""

    @given(s=invalid_literals, n=literals)
    def test_validity_gating(self, s, n):
        for op in OPERATIONS:
            assert op(s, n) == INVALID_OPERAND
            assert op(n, s) == INVALID_OPERAND

    @given(n=literals)
    def test_additive_identity(self, n):
        assert add(n, "0") == n
        assert add("0", n) == n

    @given(p=positive_literals)
    def test_additive_inverse(self, p):
        assert add(p, "-" + p) == "0"
        assert add("-" + p, p) == "0"

    @given(n1=literals, n2=literals)
    def test_commutativity(self, n1, n2):
        assert add(n1, n2) == add(n2, n1)
        assert mul(n1, n2) == mul(n2, n1)

    @given(n1=literals, n2=literals)
    def test_sub_is_add_of_negation(self, n1, n2):
        assert sub(n1, n2) == add(n1, negate(n2))

    @given(n=literals)
    def test_multiplicative_zero_and_identity(self, n):
        assert mul(n, "0") == "0"
        assert mul("0", n) == "0"
        assert mul(n, "1") == n
        assert mul("1", n) == n

    @settings(max_examples=200)
    @given(n1=literals, n2=literals)
    def test_matches_int_oracle(self, n1, n2):
        a, b = int(n1), int(n2)
        assert add(n1, n2) == str(a + b)
        assert sub(n1, n2) == str(a - b)
        assert mul(n1, n2) == str(a * b)

    @given(n1=literals, n2=literals)
    def test_results_are_valid_literals(self, n1, n2):
        for op in OPERATIONS:
            assert is_valid_number(op(n1, n2))

    @given(n1=literals, n2=literals)
    def test_compare_matches_int_oracle(self, n1, n2):
        a, b = int(n1), int(n2)
        assert compare(n1, n2) == (a > b) - (a < b)


# =============================================================================
# ТЕСТЫ: Параллельные вызовы и логирование
# =============================================================================


class TestConcurrencyAndLogging:
    """Операции не разделяют изменяемое состояние; отказы логируются."""

    def test_parallel_calls_are_independent(self):
        pairs = [(str(i * 7919), str(-i * 104729)) for i in range(1, 200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            products = list(pool.map(lambda p: mul(*p), pairs))

        assert products == [str(int(a) * int(b)) for a, b in pairs]

    def test_rejection_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="decimal_strings.core.math.signed_arithmetic"):
            assert add("01", "1") == INVALID_OPERAND

        assert "add rejected" in caplog.text

    def test_long_operand_truncated_in_log(self, caplog):
        too_long = "1" * (MAX_OPERAND_LENGTH + 1)
        with caplog.at_level(logging.DEBUG, logger="decimal_strings.core.math.signed_arithmetic"):
            mul(too_long, "2")

        assert f"len={MAX_OPERAND_LENGTH + 1}" in caplog.text
        assert too_long not in caplog.text
