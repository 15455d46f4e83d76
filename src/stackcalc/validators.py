"""Input validation and integer range checks."""

from stackcalc.exceptions import IntegerOverflowError, InvalidInputError

BytesLike = bytes | bytearray | memoryview

# Signed 64-bit range used by checked arithmetic
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def validate_expression(value: str) -> str:
    """
    Validate that an expression is a text string.

    Args:
        value: The expression to validate

    Returns:
        The validated expression

    Raises:
        InvalidInputError: If value is not a str
    """
    if not isinstance(value, str):
        raise InvalidInputError(value, f"Expected str, got {type(value).__name__}")

    return value


def validate_bytes(value: BytesLike) -> bytes:
    """
    Validate that a value is bytes-like and return it as bytes.

    Raises:
        InvalidInputError: If value is not bytes, bytearray or memoryview
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidInputError(value, f"Expected bytes, got {type(value).__name__}")

    return bytes(value)


def check_int(value: int, operation: str, *operands: int) -> int:
    """
    Check that an integer fits in the signed 64-bit range.

    Args:
        value: The computed value
        operation: Name of the operation that produced it, for the error
        operands: Inputs of that operation, for the error

    Returns:
        The value, unchanged

    Raises:
        IntegerOverflowError: If value is outside [INT_MIN, INT_MAX]
    """
    if value < INT_MIN or value > INT_MAX:
        raise IntegerOverflowError(operation, *operands)

    return value
