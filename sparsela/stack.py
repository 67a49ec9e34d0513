"""Double stacks tuned for graph traversals in sparse solves and factorizations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Enter(Generic[T]):
    """Marks a node being entered during a traversal."""

    value: Any = 0


@dataclass(frozen=True)
class Exit(Generic[T]):
    """Marks a node being left during a traversal."""

    value: Any = 0


StackVal = Union[Enter, Exit]


def extract_stack_val(stack_val: StackVal) -> Any:
    """Return the value carried by an Enter or Exit marker."""
    if isinstance(stack_val, (Enter, Exit)):
        return stack_val.value
    raise TypeError(f"expected Enter or Exit, got {type(stack_val).__name__}")


class DStack(Generic[T]):
    """A double stack of fixed capacity.

    The left stack grows from the start of the storage towards the end and
    the right stack grows from the end towards the start. The two parts are
    never allowed to overlap.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 1:
            raise ValueError("a double stack needs a capacity of at least 2")
        self._stacks: list[Optional[T]] = [None] * capacity
        self._left_head: Optional[int] = None
        self._right_head: int = capacity

    def __repr__(self) -> str:
        return (
            f"DStack(capacity={self.capacity()}, "
            f"left={self._left_items()!r}, right={list(self.iter_right())!r})"
        )

    def _left_items(self) -> list[Optional[T]]:
        if self._left_head is None:
            return []
        return self._stacks[: self._left_head + 1]

    def capacity(self) -> int:
        """Total number of slots shared by both stacks."""
        return len(self._stacks)

    def is_left_empty(self) -> bool:
        """True when the left stack holds nothing."""
        return self._left_head is None

    def is_right_empty(self) -> bool:
        """True when the right stack holds nothing."""
        return self._right_head == self.capacity()

    def push_left(self, value: T) -> None:
        """Push a value on the left stack."""
        head = 0 if self._left_head is None else self._left_head + 1
        if head >= self._right_head:
            raise IndexError("left push would overlap the right stack")
        self._stacks[head] = value
        self._left_head = head

    def push_right(self, value: T) -> None:
        """Push a value on the right stack."""
        head = self._right_head - 1
        if head < 0:
            raise IndexError("right push exceeds the stack capacity")
        if self._left_head is not None and head <= self._left_head:
            raise IndexError("right push would overlap the left stack")
        self._right_head = head
        self._stacks[head] = value

    def pop_left(self) -> Optional[T]:
        """Pop a value from the left stack, or None if it is empty."""
        if self._left_head is None:
            return None
        value = self._stacks[self._left_head]
        self._left_head = self._left_head - 1 if self._left_head > 0 else None
        return value

    def pop_right(self) -> Optional[T]:
        """Pop a value from the right stack, or None if it is empty."""
        if self._right_head >= len(self._stacks):
            return None
        value = self._stacks[self._right_head]
        self._right_head += 1
        return value

    def len_right(self) -> int:
        """Number of values in the right stack."""
        return len(self._stacks) - self._right_head

    def clear_right(self) -> None:
        """Empty the right stack."""
        self._right_head = len(self._stacks)

    def clear_left(self) -> None:
        """Empty the left stack."""
        self._left_head = None

    def iter_right(self) -> Iterator[T]:
        """Iterate over the right stack, top first, without removing items."""
        return iter(self._stacks[self._right_head :])

    def push_left_on_right(self) -> None:
        """Move every value of the left stack onto the right stack."""
        while not self.is_left_empty():
            self.push_right(self.pop_left())

    def push_right_on_left(self) -> None:
        """Move every value of the right stack onto the left stack."""
        while not self.is_right_empty():
            self.push_left(self.pop_right())