"""
Domain value types.

Bigint: неизменяемое целое произвольной точности; Accumulator: изменяемая
привязка для составного присваивания и ++/-- форм.
"""

from src.bignum.domain.accumulator import Accumulator
from src.bignum.domain.bigint import Bigint, IntoBigint

__all__ = [
    "Bigint",
    "IntoBigint",
    "Accumulator",
]
