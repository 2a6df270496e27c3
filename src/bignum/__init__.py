"""
bignum — arbitrary-precision signed integers.

Знаково-модульное представление на десятичных лимбах и schoolbook-алгоритмы
(сложение, вычитание, умножение, деление столбиком, смена основания).
"""

from src.bignum.config import DEFAULT_CONFIG, BigintConfig
from src.bignum.domain.accumulator import Accumulator
from src.bignum.domain.bigint import Bigint
from src.bignum.errors import BigintError, DivisionByZero, InvalidBase, InvalidFormat
from src.bignum.math.radix import DIGIT_ALPHABET, MAX_BASE, MIN_BASE

__all__ = [
    # Value type
    "Bigint",
    "Accumulator",
    # Configuration
    "BigintConfig",
    "DEFAULT_CONFIG",
    # Errors
    "BigintError",
    "InvalidFormat",
    "InvalidBase",
    "DivisionByZero",
    # Radix constants
    "DIGIT_ALPHABET",
    "MIN_BASE",
    "MAX_BASE",
]
