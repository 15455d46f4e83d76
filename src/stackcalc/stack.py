"""LIFO stack used for operands and pending operators."""

from __future__ import annotations

from typing import Generic, TypeVar

from stackcalc.exceptions import StackUnderflowError

T = TypeVar("T")


class Stack(Generic[T]):
    """
    A growable last-in-first-out stack backed by a list.

    Example:
        >>> s = Stack("operand")
        >>> s.push(1)
        >>> s.push(2)
        >>> s.pop()
        2
        >>> len(s)
        1
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """
        Remove and return the top item.

        Raises:
            StackUnderflowError: If the stack is empty
        """
        if not self._items:
            raise StackUnderflowError(self.name)
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError(self.name)
        return self._items[-1]

    def items(self) -> list[T]:
        """Items from bottom to top."""
        return self._items.copy()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack(name={self.name!r}, items={self._items!r})"
