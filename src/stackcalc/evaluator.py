"""
Shunting-yard evaluation of integer arithmetic expressions.

Expressions use the operators ``+ - * / % ^`` and parentheses over signed
64-bit integers. ``* / % ^`` bind tighter than ``+ -``. Operators of equal
precedence group left to right, except ``^`` which groups right to left.

Unary minus is recognized in two positions only: at index 0 and directly
after ``(``. Anywhere else a ``-`` is the binary operator, so ``"3 + -5"``
fails with StackUnderflowError instead of evaluating to -2.
"""

from __future__ import annotations

import logging

from stackcalc.exceptions import EvaluationError, MalformedResultError
from stackcalc.operators import LPAREN, OPERATORS, RPAREN, apply, has_precedence
from stackcalc.stack import Stack
from stackcalc.validators import check_int, validate_expression

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class _ShuntingYard:
    """Per-call evaluation state: the two stacks and the reduction log."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.operands: Stack[int] = Stack("operand")
        self.operators: Stack[str] = Stack("operator")
        self.steps: list[str] = []

    def run(self) -> int:
        text = self.expression
        i = 0
        while i < len(text):
            ch = text[i]

            if ch.isspace():
                i += 1
            elif ch == "-" and (i == 0 or text[i - 1] == LPAREN):
                i = self._read_number(i + 1, negative=True)
            elif ch == LPAREN:
                self.operators.push(ch)
                i += 1
            elif ch == RPAREN:
                self._close_paren()
                i += 1
            elif ch in OPERATORS:
                self._push_operator(ch)
                i += 1
            else:
                i = self._read_number(i)

        while self.operators:
            if self.operators.peek() == LPAREN:
                raise MalformedResultError("Unmatched '('", self.operators.items())
            self._reduce()

        if len(self.operands) != 1:
            raise MalformedResultError(
                "Expected exactly one value after reduction", self.operands.items()
            )

        return self.operands.pop()

    def _read_number(self, start: int, negative: bool = False) -> int:
        """Push the literal starting at ``start`` and return the next index."""
        text = self.expression
        end = start
        value = 0
        while end < len(text) and text[end] in DIGITS:
            value = check_int(value * 10 + DIGITS.index(text[end]), "literal", value)
            end += 1

        # An unrecognized character counts as a literal 0 and is consumed.
        if end == start and not negative:
            end += 1

        self.operands.push(-value if negative else value)
        return end

    def _push_operator(self, symbol: str) -> None:
        if OPERATORS[symbol].reduces_before_push:
            while self.operators and has_precedence(symbol, self.operators.peek()):
                self._reduce()
        self.operators.push(symbol)

    def _close_paren(self) -> None:
        while self.operators.peek() != LPAREN:
            self._reduce()
        self.operators.pop()

    def _reduce(self) -> None:
        b = self.operands.pop()
        a = self.operands.pop()
        symbol = self.operators.pop()
        result = apply(a, b, symbol)
        step = f"{a} {symbol} {b} = {result}"
        logger.debug("reduce %s", step)
        self.steps.append(step)
        self.operands.push(result)


def evaluate(expression: str) -> int:
    """
    Evaluate an integer arithmetic expression.

    Example:
        >>> evaluate("2 ^ 3 ^ 2")
        512
        >>> evaluate("-7 / 2")
        -3

    Args:
        expression: Text made of digits, ``+ - * / % ^``, parentheses and spaces

    Returns:
        The value of the expression

    Raises:
        InvalidInputError: If expression is not a str
        StackUnderflowError: If an operator lacks operands or a ``)`` is unmatched
        DivisionByZeroError: If ``/`` has a zero right operand
        ModuloByZeroError: If ``%`` has a zero right operand
        MalformedResultError: If a ``(`` is unmatched or operands are left over
        IntegerOverflowError: If a literal or result leaves the 64-bit range
    """
    value, _ = evaluate_with_trace(expression)
    return value


def evaluate_with_trace(expression: str) -> tuple[int, list[str]]:
    """
    Evaluate an expression and return the reductions performed.

    Each step reads ``"<a> <op> <b> = <result>"`` in the order applied. If
    evaluation fails, the raised EvaluationError carries the steps recorded
    before the failure in its ``steps`` attribute.
    """
    validate_expression(expression)

    state = _ShuntingYard(expression)
    try:
        value = state.run()
    except EvaluationError as e:
        e.steps = tuple(state.steps)
        logger.debug("evaluation of %r failed: %s", expression, e)
        raise

    logger.debug("evaluated %r = %d", expression, value)
    return value, state.steps
