"""Calculator session keeping a history of evaluated expressions."""

from __future__ import annotations

from dataclasses import dataclass

from stackcalc.evaluator import evaluate
from stackcalc.exceptions import StackCalcError


@dataclass(frozen=True)
class CalculationRecord:
    """One evaluated expression and its value."""

    expression: str
    value: int

    def __str__(self) -> str:
        return f"{self.expression} = {self.value}"


class Calculator:
    """
    Evaluates expressions one at a time and remembers the results.

    Every call goes through the stateless :func:`stackcalc.evaluate`; the
    session only keeps the history. A failed evaluation leaves the history
    untouched.

    Example:
        >>> calc = Calculator()
        >>> calc.evaluate("2 + 3")
        5
        >>> calc.evaluate("10 / 4")
        2
        >>> calc.undo().value
        5
    """

    def __init__(self) -> None:
        self._history: list[CalculationRecord] = []

    @property
    def value(self) -> int | None:
        """Value of the last evaluation, or None if the history is empty."""
        if not self._history:
            return None
        return self._history[-1].value

    @property
    def history(self) -> list[CalculationRecord]:
        """List of all evaluations performed."""
        return self._history.copy()

    def evaluate(self, expression: str) -> int:
        """
        Evaluate expression and record it.

        Raises:
            EvaluationError: If the expression cannot be evaluated
        """
        value = evaluate(expression)
        self._history.append(CalculationRecord(expression=expression, value=value))
        return value

    def undo(self) -> Calculator:
        """
        Drop the last evaluation.

        Raises:
            StackCalcError: If the history is empty
        """
        if not self._history:
            raise StackCalcError("Nothing to undo")

        self._history.pop()
        return self

    def clear(self) -> Calculator:
        """Forget all evaluations."""
        self._history.clear()
        return self

    def copy(self) -> Calculator:
        """Create an independent copy of this calculator."""
        new_calc = Calculator()
        new_calc._history = self._history.copy()
        return new_calc

    def __len__(self) -> int:
        return len(self._history)

    def __repr__(self) -> str:
        return f"Calculator(value={self.value}, history_len={len(self._history)})"
