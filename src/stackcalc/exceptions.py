"""Custom exceptions for the stackcalc package."""

from typing import Any


class StackCalcError(Exception):
    """Base exception for all stackcalc errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class InvalidInputError(StackCalcError):
    """Raised when an input has the wrong type."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OverflowError(StackCalcError):
    """Raised when a value leaves its declared integer width."""

    def __init__(self, operation: str, *operands: int) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands


class EvaluationError(StackCalcError):
    """Base exception for failures while evaluating an expression.

    ``steps`` holds the reductions performed before the failure, filled in
    by :func:`stackcalc.evaluator.evaluate_with_trace`.
    """

    steps: tuple[str, ...] = ()


class StackUnderflowError(EvaluationError):
    """Raised when a reduction pops from an empty stack."""

    def __init__(self, stack_name: str) -> None:
        super().__init__(f"Pop from empty {stack_name} stack")
        self.stack_name = stack_name


class DivisionByZeroError(EvaluationError):
    """Raised when the right operand of ``/`` is zero."""

    def __init__(self, numerator: int) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class ModuloByZeroError(EvaluationError):
    """Raised when the right operand of ``%`` is zero."""

    def __init__(self, numerator: int) -> None:
        super().__init__("Modulo by zero", numerator)
        self.numerator = numerator


class InvalidOperatorError(EvaluationError):
    """Raised when a symbol outside the operator table reaches the executor."""

    def __init__(self, symbol: str) -> None:
        super().__init__("Invalid operator", symbol)
        self.symbol = symbol


class MalformedResultError(EvaluationError):
    """Raised when evaluation does not end with exactly one operand."""

    def __init__(self, reason: str, remaining: Any = None) -> None:
        super().__init__(reason, remaining)
        self.reason = reason


class IntegerOverflowError(EvaluationError, OverflowError):
    """Raised when checked integer arithmetic leaves the signed 64-bit range."""
