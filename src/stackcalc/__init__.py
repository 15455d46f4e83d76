"""
Integer expression evaluator and digit-run extractor.

This package provides:
- Shunting-yard evaluation of ``+ - * / % ^`` expressions with parentheses
- Checked signed 64-bit arithmetic
- Extraction of small unsigned integers from digit runs in byte strings
- A calculator session with history
"""

from stackcalc.core import CalculationRecord, Calculator
from stackcalc.evaluator import evaluate, evaluate_with_trace
from stackcalc.exceptions import (
    DivisionByZeroError,
    EvaluationError,
    IntegerOverflowError,
    InvalidInputError,
    InvalidOperatorError,
    MalformedResultError,
    ModuloByZeroError,
    OverflowError,
    StackCalcError,
    StackUnderflowError,
)
from stackcalc.extractor import DIGIT_RUN_MAX, extract_digit_runs
from stackcalc.operators import (
    OPERATORS,
    Associativity,
    Operator,
    Precedence,
    apply,
    has_precedence,
)
from stackcalc.stack import Stack
from stackcalc.validators import INT_MAX, INT_MIN

__all__ = [
    "DIGIT_RUN_MAX",
    "INT_MAX",
    "INT_MIN",
    "OPERATORS",
    "Associativity",
    "CalculationRecord",
    "Calculator",
    "DivisionByZeroError",
    "EvaluationError",
    "IntegerOverflowError",
    "InvalidInputError",
    "InvalidOperatorError",
    "MalformedResultError",
    "ModuloByZeroError",
    "Operator",
    "OverflowError",
    "Precedence",
    "Stack",
    "StackCalcError",
    "StackUnderflowError",
    "apply",
    "evaluate",
    "evaluate_with_trace",
    "extract_digit_runs",
    "has_precedence",
]

__version__ = "0.1.0"
