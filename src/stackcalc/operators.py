"""Operator table and checked integer arithmetic."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stackcalc.exceptions import DivisionByZeroError, InvalidOperatorError, ModuloByZeroError
from stackcalc.validators import check_int

if TYPE_CHECKING:
    from collections.abc import Callable

LPAREN = "("
RPAREN = ")"


class Precedence(enum.IntEnum):
    """Binding strength of an operator."""

    LOW = 1
    HIGH = 2


class Associativity(enum.Enum):
    """Grouping order among operators of equal precedence."""

    LEFT = "left"
    RIGHT = "right"


def add(a: int, b: int) -> int:
    """
    Add two integers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        IntegerOverflowError: If the sum leaves the 64-bit range
    """
    return check_int(a + b, "addition", a, b)


def subtract(a: int, b: int) -> int:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        IntegerOverflowError: If the difference leaves the 64-bit range
    """
    return check_int(a - b, "subtraction", a, b)


def multiply(a: int, b: int) -> int:
    """Multiply two integers, raising IntegerOverflowError on overflow."""
    return check_int(a * b, "multiplication", a, b)


def divide(a: int, b: int) -> int:
    """
    Divide a by b, truncating toward zero.

    Python's ``//`` floors, so ``-7 // 2 == -4``; this returns ``-3``.

    Properties:
        - Sign symmetry: divide(-a, b) == -divide(a, b)
        - Reconstruction: a == divide(a, b) * b + modulo(a, b)

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero
        IntegerOverflowError: If the quotient leaves the 64-bit range
            (only INT_MIN / -1)
    """
    if b == 0:
        raise DivisionByZeroError(a)

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient

    return check_int(quotient, "division", a, b)


def modulo(a: int, b: int) -> int:
    """
    Remainder of truncating division; the sign follows the dividend.

    Properties:
        - Range: abs(modulo(a, b)) < abs(b)
        - Reconstruction: a == divide(a, b) * b + modulo(a, b)

    Raises:
        ModuloByZeroError: If b is zero
    """
    if b == 0:
        raise ModuloByZeroError(a)

    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def power(base: int, exponent: int) -> int:
    """
    Multiply 1 by base, exponent times.

    A zero or negative exponent runs the loop zero times, so the result is 1.
    Bases 0, 1 and -1 are computed directly; any other base overflows within
    64 multiplications.

    Properties:
        - Zero exponent: power(a, 0) == 1
        - Negative exponent: power(a, n) == 1 for n < 0
        - One base: power(1, n) == 1

    Raises:
        IntegerOverflowError: If an intermediate product leaves the 64-bit range
    """
    if exponent <= 0:
        return 1

    if base in (0, 1):
        return base

    if base == -1:
        return -1 if exponent % 2 else 1

    result = 1
    for _ in range(exponent):
        result = check_int(result * base, "exponentiation", base, exponent)

    return result


@dataclass(frozen=True)
class Operator:
    """A binary operator: symbol, precedence class, associativity and function."""

    symbol: str
    precedence: Precedence
    associativity: Associativity
    function: Callable[[int, int], int]

    @property
    def reduces_before_push(self) -> bool:
        """Left-associative operators reduce the stack before being pushed."""
        return self.associativity is Associativity.LEFT

    def __call__(self, a: int, b: int) -> int:
        return self.function(a, b)

    def __str__(self) -> str:
        return self.symbol


OPERATORS: dict[str, Operator] = {
    op.symbol: op
    for op in (
        Operator("+", Precedence.LOW, Associativity.LEFT, add),
        Operator("-", Precedence.LOW, Associativity.LEFT, subtract),
        Operator("*", Precedence.HIGH, Associativity.LEFT, multiply),
        Operator("/", Precedence.HIGH, Associativity.LEFT, divide),
        Operator("%", Precedence.HIGH, Associativity.LEFT, modulo),
        Operator("^", Precedence.HIGH, Associativity.RIGHT, power),
    )
}


def get_operator(symbol: str) -> Operator:
    """
    Look up an operator by symbol.

    Raises:
        InvalidOperatorError: If symbol is not one of ``+ - * / % ^``
    """
    try:
        return OPERATORS[symbol]
    except KeyError:
        raise InvalidOperatorError(symbol) from None


def apply(a: int, b: int, symbol: str) -> int:
    """
    Apply the binary operator ``symbol`` to a and b.

    Raises:
        InvalidOperatorError: If symbol is not in the operator table
        DivisionByZeroError: For ``/`` with b == 0
        ModuloByZeroError: For ``%`` with b == 0
        IntegerOverflowError: If the result leaves the 64-bit range
    """
    return get_operator(symbol)(a, b)


def has_precedence(incoming: str, top: str) -> bool:
    """
    Whether ``top`` must be applied before ``incoming`` is pushed.

    Never reduces across a parenthesis. A HIGH incoming operator does not
    force a LOW one off the stack. Everything else reduces, which makes
    equal precedence evaluate left to right.
    """
    if top in (LPAREN, RPAREN):
        return False

    if (
        get_operator(incoming).precedence is Precedence.HIGH
        and get_operator(top).precedence is Precedence.LOW
    ):
        return False

    return True
