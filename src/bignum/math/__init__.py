"""
Math primitives для bignum

Беззнаковая арифметика над десятичными digit-векторами и алфавит оснований.
"""

# Digit-vector primitives
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
    trim,
)

# Radix
from src.bignum.math.radix import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    char_to_digit,
    digit_to_char,
    validate_base,
)

__all__ = [
    # Digits — Constants
    "LIMB_BASE",
    # Digits — Normalization
    "normalize",
    "trim",
    "is_zero_magnitude",
    # Digits — Arithmetic
    "add_magnitudes",
    "sub_magnitudes",
    "compare_magnitudes",
    "mul_magnitudes",
    "divmod_magnitudes",
    "divmod_small",
    # Radix
    "DIGIT_ALPHABET",
    "MIN_BASE",
    "MAX_BASE",
    "char_to_digit",
    "digit_to_char",
    "validate_base",
]
