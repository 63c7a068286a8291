"""The integer stacks of the sorting puzzle and their cost queries."""

from __future__ import annotations

from typing import Iterable, Iterator, List

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class Stack:
    """A stack of integers whose top is index 0.

    ``max`` and ``min`` read INT_MIN and INT_MAX while the stack is empty.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values: List[int] = list(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __repr__(self) -> str:
        return f"Stack({self._values!r})"

    @property
    def max(self) -> int:
        return max(self._values) if self._values else INT_MIN

    @property
    def min(self) -> int:
        return min(self._values) if self._values else INT_MAX

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self._values) >= 2:
            self._values[0], self._values[1] = self._values[1], self._values[0]

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if self._values:
            self._values.append(self._values.pop(0))

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if self._values:
            self._values.insert(0, self._values.pop())

    def push_to(self, other: "Stack") -> None:
        """Move the top element onto ``other``; does nothing when empty."""
        if self._values:
            other._values.insert(0, self._values.pop(0))

    def index_of(self, nb: int) -> int:
        """Position of ``nb`` counted from the top; ValueError if absent."""
        try:
            return self._values.index(nb)
        except ValueError:
            raise ValueError(f"{nb} is not in the stack") from None

    def is_sorted(self) -> bool:
        """True when the values never decrease from top to bottom."""
        values = self._values
        return all(x <= y for x, y in zip(values, values[1:]))


def _rotation_cost(index: int, size: int) -> int:
    return size - index if index > size // 2 else index


def find_pos_b(stack_b: Stack, nb: int) -> int:
    """Rotations needed to bring ``stack_b`` to where ``nb`` belongs.

    ``stack_b`` is kept in descending circular order; ``nb`` belongs just
    below the smallest element larger than it.
    """
    size = len(stack_b)
    if size == 0:
        return 0
    if nb > stack_b.max or nb < stack_b.min:
        index = stack_b.index_of(stack_b.min)
    else:
        index = next(
            (
                i
                for i in range(size)
                if stack_b[i] > nb and stack_b[(i + 1) % size] < nb
            ),
            size,
        )
    return _rotation_cost(index, size)


def find_lcost_nb(a: Stack, b: Stack) -> int:
    """The value of ``a`` that is cheapest to move into place on ``b``.

    Ties go to the value nearest the top of ``a``.
    """
    if len(a) == 0:
        raise ValueError("stack a is empty")
    size = len(a)
    best_value = a[0]
    best_cost = None
    for i, value in enumerate(a):
        cost = find_pos_b(b, value) + _rotation_cost(i, size)
        if best_cost is None or cost < best_cost:
            best_cost = cost
            best_value = value
    return best_value