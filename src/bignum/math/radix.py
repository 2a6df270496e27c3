"""
Radix — алфавит цифр и границы оснований

Цифры: '0'-'9' -> 0..9, 'A'-'Z' / 'a'-'z' -> 10..35 (регистр не важен
при разборе). Допустимые основания: [MIN_BASE, MAX_BASE].
"""

from typing import Final, Optional

from src.bignum.errors import InvalidBase

DIGIT_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = len(DIGIT_ALPHABET)


def validate_base(base: int) -> int:
    """
    Проверка основания системы счисления.

    Raises:
        InvalidBase: если base не int или вне [MIN_BASE, MAX_BASE]
    """
    if not isinstance(base, int):
        raise InvalidBase(f"base must be an integer, got {type(base).__name__}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    return base


def char_to_digit(char: str) -> Optional[int]:
    """
    Значение символа-цифры без учёта регистра.

    Returns:
        0..35, либо None для символа вне алфавита
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    return None


def digit_to_char(value: int, uppercase: bool = True) -> str:
    """Символ для значения цифры 0..35."""
    char = DIGIT_ALPHABET[value]
    return char if uppercase else char.lower()
