"""
Bigint — знаковое целое произвольной точности

Immutable Pydantic модель: знак + magnitude из десятичных цифр
(младшая цифра первой). Все операторы возвращают новый экземпляр;
x += y в Python перепривязывает имя к результату бинарного оператора.

Состав:
- Знаковый слой операторов (+, -, *, /, //, %, divmod, унарный -, abs)
- Сравнения (==, !=, <, <=, >, >=)
- Конструкторы: zero, from_int, from_decimal_string, from_based_string,
  from_digits
- Вывод: to_decimal_string / str, to_based_string

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль всегда положительный (нет отрицательного нуля)
2. magnitude непуст, цифры в [0, 9], без старших нулей
3. Равенство структурное: (negative, magnitude) однозначно задаёт число
4. Деление усекает к нулю; остаток имеет знак делимого:
   a == (a / b) * b + a % b
"""

import functools
import logging
from typing import Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from src.bignum.config import DEFAULT_CONFIG, BigintConfig
from src.bignum.errors import DivisionByZero, InvalidFormat
from src.bignum.math.digits import (
    LIMB_BASE,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    divmod_small,
    is_zero_magnitude,
    mul_magnitudes,
    normalize,
    sub_magnitudes,
)
from src.bignum.math.radix import char_to_digit, digit_to_char, validate_base

logger = logging.getLogger(__name__)


# =============================================================================
# BIGINT MODEL
# =============================================================================


class Bigint(BaseModel):
    """
    Целое произвольной точности в знаково-модульной форме.

    Прямое создание Bigint(negative=..., magnitude=...) валидирует
    каноничную форму и поднимает pydantic.ValidationError при нарушении.
    Для сырого вектора цифр используйте from_digits (с нормализацией).

    Immutable модель (frozen=True).
    """

    negative: bool = Field(default=False, description="Знак (True = отрицательное)")
    magnitude: Tuple[int, ...] = Field(
        default=(0,),
        validate_default=True,
        description="Десятичные цифры модуля, младшая первой",
    )

    model_config = {"frozen": True}

    @field_validator("magnitude")
    @classmethod
    def validate_magnitude(cls, v: Tuple[int, ...], info) -> Tuple[int, ...]:
        """Проверка каноничности magnitude и отсутствия отрицательного нуля"""
        if not v:
            raise ValueError("magnitude must contain at least one digit")
        for digit in v:
            if not 0 <= digit < LIMB_BASE:
                raise ValueError(f"digit {digit} outside [0, {LIMB_BASE - 1}]")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("magnitude has most-significant zero digits")
        if info.data.get("negative") and is_zero_magnitude(v):
            raise ValueError("negative zero is not a canonical value")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Bigint":
        """Ноль."""
        return _make(False, [0])

    @classmethod
    def from_int(cls, value: int) -> "Bigint":
        """
        Конверсия нативного int.

        Знак фиксируется отдельно, затем из модуля последовательно
        извлекаются value % 10 (младшие цифры первыми).

        Raises:
            TypeError: если value не int
        """
        if not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")

        negative = value < 0
        remaining = -value if negative else value
        digits = []
        while remaining > 0:
            digits.append(remaining % LIMB_BASE)
            remaining //= LIMB_BASE
        if not digits:
            digits.append(0)
        return _make(negative, digits)

    @classmethod
    def from_decimal_string(
        cls, text: str, config: BigintConfig | None = None
    ) -> "Bigint":
        """
        Разбор десятичной записи: необязательный '-' и цифры 0-9.

        Args:
            text: Строка вида "123", "-0042"
            config: Параметры парсинга (default: DEFAULT_CONFIG)

        Returns:
            Нормализованный Bigint ("0007" -> 7, "-0" -> 0)

        Raises:
            InvalidFormat: пустая строка, пустая часть цифр, любой
                не-цифровой символ после знака
        """
        config = config or DEFAULT_CONFIG
        negative, body = _split_sign(text, config)

        for char in body:
            if not "0" <= char <= "9":
                raise _invalid_format(text, f"invalid character {char!r}")

        digits = [ord(char) - ord("0") for char in reversed(body)]
        return _make(negative, digits)

    @classmethod
    def from_based_string(
        cls, text: str, base: int, config: BigintConfig | None = None
    ) -> "Bigint":
        """
        Разбор записи в системе счисления base (2..36).

        Цифры '0'-'9' -> 0..9, 'A'-'Z' / 'a'-'z' -> 10..35. Значение
        накапливается свёрткой acc * base + digit через знаковый слой;
        знак применяется в конце через отрицание.

        Raises:
            InvalidBase: base вне [2, 36] (проверяется первым)
            InvalidFormat: пустая запись, символ вне алфавита,
                цифра >= base
        """
        validate_base(base)
        config = config or DEFAULT_CONFIG
        negative, body = _split_sign(text, config)

        values = []
        for char in body:
            value = char_to_digit(char)
            if value is None:
                raise _invalid_format(text, f"invalid character {char!r}")
            if value >= base:
                raise _invalid_format(
                    text, f"digit {char!r} out of range for base {base}"
                )
            values.append(value)

        result = functools.reduce(
            lambda acc, digit: acc * base + digit, values, cls.zero()
        )
        return -result if negative else result

    @classmethod
    def from_digits(cls, negative: bool, digits) -> "Bigint":
        """
        Сборка из сырого вектора цифр (младшая первой) с нормализацией.

        Raises:
            InvalidFormat: элемент не int или вне [0, 9]
        """
        raw = list(digits)
        for digit in raw:
            if not isinstance(digit, int):
                raise InvalidFormat(f"digit must be int, got {type(digit).__name__}")
            if not 0 <= digit < LIMB_BASE:
                raise InvalidFormat(f"digit {digit} outside [0, {LIMB_BASE - 1}]")
        return _make(bool(negative), raw)

    @classmethod
    def coerce(cls, value: "IntoBigint") -> "Bigint":
        """
        Приведение операнда к Bigint.

        Raises:
            TypeError: для типов кроме Bigint и int
        """
        result = _coerce(value)
        if result is None:
            raise TypeError(f"cannot convert {type(value).__name__} to Bigint")
        return result

    # -------------------------------------------------------------------------
    # Вывод
    # -------------------------------------------------------------------------

    def to_decimal_string(self) -> str:
        """Десятичная запись: '-' для отрицательных, старшие цифры первыми."""
        sign = "-" if self.negative else ""
        return sign + "".join(str(digit) for digit in reversed(self.magnitude))

    def to_based_string(self, base: int, config: BigintConfig | None = None) -> str:
        """
        Запись в системе счисления base (2..36).

        Модуль последовательно делится на base (divmod_small), остатки
        отображаются через алфавит 0-9A-Z и разворачиваются.

        Raises:
            InvalidBase: base вне [2, 36]
        """
        validate_base(base)
        config = config or DEFAULT_CONFIG

        if self.is_zero():
            return "0"

        chars = []
        magnitude = list(self.magnitude)
        while not is_zero_magnitude(magnitude):
            magnitude, remainder = divmod_small(magnitude, base)
            chars.append(digit_to_char(remainder, config.uppercase_digits))
        if self.negative:
            chars.append("-")
        return "".join(reversed(chars))

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"Bigint('{self.to_decimal_string()}')"

    def __int__(self) -> int:
        value = functools.reduce(
            lambda acc, digit: acc * LIMB_BASE + digit, reversed(self.magnitude), 0
        )
        return -value if self.negative else value

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return is_zero_magnitude(self.magnitude)

    def is_negative(self) -> bool:
        return self.negative

    @property
    def sign(self) -> int:
        """-1, 0 или 1."""
        if self.is_zero():
            return 0
        return -1 if self.negative else 1

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.negative == other.negative and self.magnitude == other.magnitude

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Согласован с hash(int): Bigint.from_int(n) == n
        return hash(int(self))

    def __lt__(self, other: "IntoBigint") -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if self.negative != other.negative:
            return self.negative
        order = compare_magnitudes(self.magnitude, other.magnitude)
        # Для отрицательных больший модуль означает меньшее число
        return order > 0 if self.negative else order < 0

    def __le__(self, other: "IntoBigint") -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: "IntoBigint") -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self <= other

    def __ge__(self, other: "IntoBigint") -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self < other

    # -------------------------------------------------------------------------
    # Унарные операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Bigint":
        return _make(not self.negative, self.magnitude)

    def __pos__(self) -> "Bigint":
        return self

    def __abs__(self) -> "Bigint":
        return _make(False, self.magnitude)

    def increment(self) -> "Bigint":
        """self + 1"""
        return self + 1

    def decrement(self) -> "Bigint":
        """self - 1"""
        return self - 1

    # -------------------------------------------------------------------------
    # Бинарные операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "IntoBigint") -> "Bigint":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if self.negative == other.negative:
            return _make(self.negative, add_magnitudes(self.magnitude, other.magnitude))
        # Разные знаки: знак операнда с большим (или равным) модулем
        if compare_magnitudes(self.magnitude, other.magnitude) >= 0:
            return _make(self.negative, sub_magnitudes(self.magnitude, other.magnitude))
        return _make(other.negative, sub_magnitudes(other.magnitude, self.magnitude))

    def __radd__(self, other: int) -> "Bigint":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other: "IntoBigint") -> "Bigint":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if self.negative != other.negative:
            return _make(self.negative, add_magnitudes(self.magnitude, other.magnitude))
        if compare_magnitudes(self.magnitude, other.magnitude) >= 0:
            return _make(self.negative, sub_magnitudes(self.magnitude, other.magnitude))
        # |a| < |b|: результат пересекает ноль
        return _make(not self.negative, sub_magnitudes(other.magnitude, self.magnitude))

    def __rsub__(self, other: int) -> "Bigint":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: "IntoBigint") -> "Bigint":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _make(
            self.negative != other.negative,
            mul_magnitudes(self.magnitude, other.magnitude),
        )

    def __rmul__(self, other: int) -> "Bigint":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self

    def __truediv__(self, other: "IntoBigint") -> "Bigint":
        """
        Деление с усечением к нулю.

        Raises:
            DivisionByZero: если other == 0
        """
        other = _coerce(other)
        if other is None:
            return NotImplemented
        quotient, _ = _divmod_signed(self, other, "Division")
        return quotient

    def __rtruediv__(self, other: int) -> "Bigint":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    # Как у decimal.Decimal: // усекает к нулю, а не округляет вниз
    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: "IntoBigint") -> "Bigint":
        """
        Остаток со знаком делимого (ноль всегда положительный).

        Raises:
            DivisionByZero: если other == 0
        """
        other = _coerce(other)
        if other is None:
            return NotImplemented
        _, remainder = _divmod_signed(self, other, "Modulus")
        return remainder

    def __rmod__(self, other: int) -> "Bigint":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other % self

    def __divmod__(self, other: "IntoBigint") -> Tuple["Bigint", "Bigint"]:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return _divmod_signed(self, other, "Division")

    def __rdivmod__(self, other: int) -> Tuple["Bigint", "Bigint"]:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return divmod(other, self)


IntoBigint = Union[Bigint, int]


# =============================================================================
# HELPERS
# =============================================================================


def _make(negative: bool, digits) -> Bigint:
    """Нормализация и сборка без повторной валидации."""
    negative, magnitude = normalize(negative, digits)
    return Bigint.model_construct(negative=negative, magnitude=tuple(magnitude))


def _coerce(value: object) -> Optional[Bigint]:
    if isinstance(value, Bigint):
        return value
    if isinstance(value, int):
        return Bigint.from_int(value)
    return None


def _divmod_signed(
    dividend: Bigint, divisor: Bigint, operation: str
) -> Tuple[Bigint, Bigint]:
    """
    Знаковое деление поверх divmod_magnitudes.

    Частное: знак = XOR знаков. Остаток: знак делимого, ноль положителен.
    При |a| < |b| частное 0, остаток равен a.
    """
    if divisor.is_zero():
        logger.debug("%s by zero: dividend=%s", operation, dividend)
        raise DivisionByZero(f"{operation} by zero")

    if compare_magnitudes(dividend.magnitude, divisor.magnitude) < 0:
        return Bigint.zero(), dividend

    quotient, remainder = divmod_magnitudes(dividend.magnitude, divisor.magnitude)
    return (
        _make(dividend.negative != divisor.negative, quotient),
        _make(dividend.negative, remainder),
    )


def _invalid_format(text: str, reason: str) -> InvalidFormat:
    logger.debug("Rejected integer literal %r: %s", text, reason)
    return InvalidFormat(f"{reason} in {text!r}")


def _split_sign(text: str, config: BigintConfig) -> Tuple[bool, str]:
    """
    Отделение необязательного '-' от части цифр.

    Raises:
        TypeError: text не str
        InvalidFormat: пустая строка, пустая часть цифр, превышен max_digits
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if config.strip_whitespace:
        text = text.strip()
    if not text:
        raise _invalid_format(text, "string cannot be empty")

    negative = text[0] == "-"
    body = text[1:] if negative else text
    if not body:
        raise _invalid_format(text, "no digits after sign")
    if config.max_digits is not None and len(body) > config.max_digits:
        raise _invalid_format(
            text, f"{len(body)} digits exceed max_digits={config.max_digits}"
        )
    return negative, body
