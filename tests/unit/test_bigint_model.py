"""
Тесты для модели Bigint: представление, валидация, конструкторы из int

Проверяет:
1. Каноничную форму (нет отрицательного нуля, нет старших нулей)
2. Валидацию Pydantic при прямом создании
3. Immutability (frozen=True)
4. from_int / from_digits / coerce
5. Структурное равенство и hash
"""

import pytest
from pydantic import ValidationError

from src.bignum import Bigint, InvalidFormat


# =============================================================================
# ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestRepresentation:
    """Тесты каноничного представления"""

    def test_default_is_zero(self) -> None:
        """Bigint() создаёт ноль"""
        num = Bigint()
        assert num == 0
        assert num.negative is False
        assert num.magnitude == (0,)

    def test_zero_constructor(self) -> None:
        assert Bigint.zero() == Bigint()

    def test_magnitude_least_significant_first(self) -> None:
        """Младшая цифра по индексу 0"""
        assert Bigint.from_int(1234).magnitude == (4, 3, 2, 1)

    def test_direct_construction_valid(self) -> None:
        num = Bigint(negative=True, magnitude=(6, 5, 4))
        assert num == -456

    def test_direct_construction_accepts_list(self) -> None:
        """Pydantic приводит list к tuple"""
        num = Bigint(negative=False, magnitude=[1, 2])
        assert num.magnitude == (1, 2)

    def test_direct_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="negative zero"):
            Bigint(negative=True, magnitude=(0,))

    def test_direct_negative_default_magnitude_rejected(self) -> None:
        """Значение по умолчанию тоже валидируется"""
        with pytest.raises(ValidationError, match="negative zero"):
            Bigint(negative=True)

    def test_direct_leading_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="most-significant zero"):
            Bigint(negative=False, magnitude=(1, 0))

    def test_direct_empty_magnitude_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least one digit"):
            Bigint(negative=False, magnitude=())

    def test_direct_digit_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="outside"):
            Bigint(negative=False, magnitude=(10,))

    def test_immutable(self) -> None:
        """Модель frozen"""
        num = Bigint.from_int(5)
        with pytest.raises(ValidationError):
            num.negative = True


# =============================================================================
# FROM_INT
# =============================================================================


class TestFromInt:
    """Тесты для from_int"""

    def test_positive(self) -> None:
        num = Bigint.from_int(123)
        assert num.negative is False
        assert str(num) == "123"

    def test_negative(self) -> None:
        num = Bigint.from_int(-456)
        assert num.negative is True
        assert str(num) == "-456"

    def test_zero(self) -> None:
        num = Bigint.from_int(0)
        assert num.magnitude == (0,)
        assert num.negative is False

    def test_int64_bounds(self) -> None:
        """Крайние значения 64-битного диапазона"""
        assert str(Bigint.from_int(2**63 - 1)) == "9223372036854775807"
        assert str(Bigint.from_int(-(2**63))) == "-9223372036854775808"

    def test_beyond_int64(self) -> None:
        """Нативный int Python не ограничен 64 битами"""
        value = 10**40 + 1
        assert int(Bigint.from_int(value)) == value

    def test_non_int_rejected(self) -> None:
        with pytest.raises(TypeError, match="expected int"):
            Bigint.from_int(1.5)
        with pytest.raises(TypeError, match="expected int"):
            Bigint.from_int("12")


# =============================================================================
# FROM_DIGITS / COERCE
# =============================================================================


class TestFromDigits:
    """Тесты для from_digits (сырой вектор + нормализация)"""

    def test_trims_leading_zeros(self) -> None:
        num = Bigint.from_digits(False, [3, 2, 1, 0, 0])
        assert num.magnitude == (3, 2, 1)
        assert num == 123

    def test_negative_zero_normalized(self) -> None:
        num = Bigint.from_digits(True, [0, 0, 0])
        assert num.negative is False
        assert num == 0

    def test_empty_vector_is_zero(self) -> None:
        assert Bigint.from_digits(False, []) == 0

    def test_invalid_digit_rejected(self) -> None:
        with pytest.raises(InvalidFormat, match="outside"):
            Bigint.from_digits(False, [1, 12])
        with pytest.raises(InvalidFormat, match="must be int"):
            Bigint.from_digits(False, [1, "2"])


class TestCoerce:
    """Тесты для coerce"""

    def test_bigint_passthrough(self) -> None:
        num = Bigint.from_int(7)
        assert Bigint.coerce(num) is num

    def test_int_converted(self) -> None:
        assert Bigint.coerce(-42) == Bigint.from_int(-42)

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="cannot convert str"):
            Bigint.coerce("42")


# =============================================================================
# РАВЕНСТВО / HASH / ПРЕОБРАЗОВАНИЯ
# =============================================================================


class TestEqualityAndHash:
    """Тесты структурного равенства и hash"""

    def test_structural_equality(self) -> None:
        assert Bigint.from_int(12345) == Bigint.from_decimal_string("12345")
        assert Bigint.from_int(12345) != Bigint.from_int(-12345)

    def test_equality_with_int(self) -> None:
        assert Bigint.from_int(99) == 99
        assert 99 == Bigint.from_int(99)
        assert Bigint.from_int(99) != 98

    def test_equality_with_unsupported_type(self) -> None:
        assert Bigint.from_int(1) != "1"
        # float не поддерживается: сравнение не падает, но и не совпадает
        assert (Bigint.from_int(1) == 1.0) is False

    def test_hash_consistent_with_int(self) -> None:
        """a == b -> hash(a) == hash(b), в том числе для int"""
        for value in (0, 1, -1, 10**30, -(10**30)):
            assert hash(Bigint.from_int(value)) == hash(value)

    def test_usable_as_dict_key(self) -> None:
        table = {Bigint.from_int(5): "five"}
        assert table[Bigint.from_decimal_string("5")] == "five"

    def test_int_conversion(self) -> None:
        assert int(Bigint.from_decimal_string("-987654321987654321")) == -987654321987654321

    def test_bool(self) -> None:
        assert not Bigint.zero()
        assert Bigint.from_int(-1)

    def test_sign(self) -> None:
        assert Bigint.from_int(-3).sign == -1
        assert Bigint.zero().sign == 0
        assert Bigint.from_int(3).sign == 1

    def test_repr(self) -> None:
        assert repr(Bigint.from_int(-12)) == "Bigint('-12')"
