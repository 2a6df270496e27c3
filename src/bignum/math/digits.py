"""
Digits — примитивы над десятичными digit-векторами

Модуль содержит беззнаковую арифметику над magnitude:
- Нормализация (trim): удаление старших нулей, каноничный знак нуля
- Сложение с переносом и вычитание с заимствованием
- Сравнение модулей
- Умножение столбиком
- Деление столбиком повторным вычитанием
- Деление на малое число (один лимб) для смены основания

Представление: последовательность цифр 0..9, младшая цифра по индексу 0.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любого примитива непуст и не содержит старших нулей
   (кроме единственного 0)
2. sub_magnitudes требует |a| >= |b|; проверка на стороне вызывающего
3. Входные последовательности никогда не мутируются
"""

from typing import Final, List, Sequence, Tuple

# Основание лимба: одна десятичная цифра на элемент
LIMB_BASE: Final[int] = 10


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim(digits: List[int]) -> List[int]:
    """
    Удаление старших нулей in-place (минимум одна цифра остаётся).

    Args:
        digits: magnitude, младшая цифра первой

    Returns:
        Тот же список без старших нулей; пустой вход превращается в [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Нормализованный magnitude нуля: ровно одна цифра 0."""
    return len(digits) == 1 and digits[0] == 0


def normalize(negative: bool, digits: Sequence[int]) -> Tuple[bool, List[int]]:
    """
    Нормализация пары (sign, magnitude).

    Удаляет старшие нули и устраняет отрицательный ноль.

    Args:
        negative: Знак (True = отрицательное)
        digits: Сырой magnitude (может содержать старшие нули)

    Returns:
        (negative, magnitude) в каноничной форме

    Examples:
        >>> normalize(False, [7, 0, 0, 0])
        (False, [7])
        >>> normalize(True, [0, 0])
        (False, [0])
    """
    magnitude = trim(list(digits))
    if is_zero_magnitude(magnitude):
        negative = False
    return negative, magnitude


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ / СРАВНЕНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Сложение столбиком с переносом.

    Итерация продолжается, пока есть цифры хотя бы в одном операнде
    или ненулевой перенос. Длина результата <= max(len(a), len(b)) + 1.
    """
    result: List[int] = []
    carry = 0
    i = 0
    while i < len(a) or i < len(b) or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % LIMB_BASE)
        carry = total // LIMB_BASE
        i += 1
    return result


def sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Вычитание столбиком с заимствованием: |a| - |b|.

    ВАЖНО: предусловие |a| >= |b| не проверяется. Вызывающий код обязан
    сначала ветвиться по compare_magnitudes.

    Returns:
        Разность без старших нулей
    """
    result: List[int] = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return trim(result)


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение модулей.

    Больше цифр значит больше; при равной длине решает первая различающаяся
    цифра от старшей к младшей.

    Returns:
        1 если |a| > |b|, -1 если |a| < |b|, 0 если равны
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1
    return 0


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Умножение столбиком.

    Буфер длиной len(a) + len(b); произведение a_i * b_j накапливается
    в позицию i + j с распространением переноса. Единственный примитив,
    где реально возникает лишний старший ноль, поэтому результат
    обрезается.
    """
    product = [0] * (len(a) + len(b))
    for i, a_digit in enumerate(a):
        carry = 0
        j = 0
        while j < len(b) or carry:
            b_digit = b[j] if j < len(b) else 0
            current = product[i + j] + a_digit * b_digit + carry
            product[i + j] = current % LIMB_BASE
            carry = current // LIMB_BASE
            j += 1
    return trim(product)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_magnitudes(
    a: Sequence[int], b: Sequence[int]
) -> Tuple[List[int], List[int]]:
    """
    Деление столбиком повторным вычитанием: |a| / |b|.

    Текущий остаток наращивается по одной цифре от старшей цифры |a|.
    На каждом шаге |b| вычитается из остатка, пока это возможно;
    число вычитаний (0..9) даёт очередную цифру частного.

    Работа на цифру частного ограничена 9 вычитаниями, поэтому общая
    сложность линейна по числу цифр частного, умноженному на длину |b|.

    Args:
        a: Делимое (magnitude)
        b: Делитель (magnitude, ненулевой)

    Returns:
        (quotient, remainder), оба нормализованы

    Raises:
        ValueError: если b равен нулю (знаковый слой поднимает
            DivisionByZero раньше, до вызова примитива)
    """
    if is_zero_magnitude(b):
        raise ValueError("divisor magnitude must be non-zero")

    quotient: List[int] = []
    remainder: List[int] = [0]
    for i in range(len(a) - 1, -1, -1):
        # Сдвиг остатка на разряд и приписывание очередной цифры
        remainder = trim([a[i]] + remainder)
        count = 0
        while compare_magnitudes(remainder, b) >= 0:
            remainder = sub_magnitudes(remainder, b)
            count += 1
        quotient.append(count)

    quotient.reverse()
    return trim(quotient), remainder


def divmod_small(a: Sequence[int], divisor: int) -> Tuple[List[int], int]:
    """
    Деление magnitude на нативное число (один лимб).

    Используется при выводе в base-N: остаток всегда < divisor.

    Args:
        a: Делимое (magnitude)
        divisor: Делитель, >= 1

    Returns:
        (quotient magnitude, remainder int)
    """
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")

    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        remainder = remainder * LIMB_BASE + a[i]
        quotient[i] = remainder // divisor
        remainder -= quotient[i] * divisor
    return trim(quotient), remainder
