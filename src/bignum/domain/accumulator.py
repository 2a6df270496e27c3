"""
Accumulator — изменяемая привязка к Bigint

Bigint неизменяем; Accumulator хранит текущее значение в .value и
перепривязывает его при составном присваивании и инкременте/декременте.

Семантика:
- +=, -=, *=, /=, //=, %= : value = value <op> rhs
- pre_increment / pre_decrement: перепривязка, возврат нового значения
- post_increment / post_decrement: возврат прежнего значения, затем перепривязка

Результат вычисляется до присваивания: при DivisionByZero value
остаётся прежним.
"""

from src.bignum.domain.bigint import Bigint, IntoBigint


class Accumulator:
    """Изменяемая ячейка с Bigint-значением."""

    def __init__(self, initial: IntoBigint = 0):
        self.value = Bigint.coerce(initial)

    def __repr__(self) -> str:
        return f"Accumulator({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Accumulator):
            return self.value == other.value
        return self.value == other

    __hash__ = None

    # -------------------------------------------------------------------------
    # Составное присваивание
    # -------------------------------------------------------------------------

    def __iadd__(self, other: IntoBigint) -> "Accumulator":
        self.value = self.value + Bigint.coerce(other)
        return self

    def __isub__(self, other: IntoBigint) -> "Accumulator":
        self.value = self.value - Bigint.coerce(other)
        return self

    def __imul__(self, other: IntoBigint) -> "Accumulator":
        self.value = self.value * Bigint.coerce(other)
        return self

    def __itruediv__(self, other: IntoBigint) -> "Accumulator":
        self.value = self.value / Bigint.coerce(other)
        return self

    __ifloordiv__ = __itruediv__

    def __imod__(self, other: IntoBigint) -> "Accumulator":
        self.value = self.value % Bigint.coerce(other)
        return self

    # -------------------------------------------------------------------------
    # Инкремент / декремент
    # -------------------------------------------------------------------------

    def pre_increment(self) -> Bigint:
        """++x: увеличить и вернуть новое значение."""
        self.value = self.value.increment()
        return self.value

    def post_increment(self) -> Bigint:
        """x++: вернуть прежнее значение, затем увеличить."""
        previous = self.value
        self.value = previous.increment()
        return previous

    def pre_decrement(self) -> Bigint:
        """--x"""
        self.value = self.value.decrement()
        return self.value

    def post_decrement(self) -> Bigint:
        """x--"""
        previous = self.value
        self.value = previous.decrement()
        return previous
