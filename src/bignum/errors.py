"""
Errors — таксономия ошибок Bigint

Все ошибки локальные и немедленные: неудачный вызов не создаёт Bigint,
решение о восстановлении принимает вызывающий код.

- InvalidFormat: строка не является записью числа (пустая, чужой символ,
  цифра >= основания, превышен лимит длины)
- InvalidBase: основание вне [2, 36]
- DivisionByZero: делитель равен нулю (/, //, %, divmod)

Каждая ошибка наследует и стандартный builtin-класс, поэтому код,
ожидающий ValueError / ZeroDivisionError, продолжает работать.
"""


class BigintError(Exception):
    """Базовый класс всех ошибок bignum."""

    pass


class InvalidFormat(BigintError, ValueError):
    """
    Невалидная строковая запись числа.

    Возникает при:
    1. Пустой строке или пустой части цифр ("-")
    2. Символе вне алфавита (пробелы, буквы в decimal, спецсимволы)
    3. Цифре, значение которой >= основания
    4. Превышении BigintConfig.max_digits
    """

    pass


class InvalidBase(BigintError, ValueError):
    """Основание системы счисления вне диапазона [MIN_BASE, MAX_BASE]."""

    pass


class DivisionByZero(BigintError, ZeroDivisionError):
    """Деление или взятие остатка по нулевому делителю."""

    pass
