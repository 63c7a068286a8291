"""The sorting strategy: produce the operations that sort stack a."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from pushswap.stack import Stack, find_lcost_nb


class Sorter:
    """Sorts a stack of distinct integers with a helper stack, recording
    every operation it performs in :attr:`operations`."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        values = list(values)
        if len(set(values)) != len(values):
            raise ValueError("values must be distinct")
        self.a = Stack(values)
        self.b = Stack()
        self.operations: List[str] = []
        a, b = self.a, self.b

        def rotate_both() -> None:
            a.rotate()
            b.rotate()

        def reverse_rotate_both() -> None:
            a.reverse_rotate()
            b.reverse_rotate()

        self._actions: Dict[str, Callable[[], None]] = {
            "sa": a.swap,
            "ra": a.rotate,
            "rra": a.reverse_rotate,
            "rb": b.rotate,
            "rrb": b.reverse_rotate,
            "rr": rotate_both,
            "rrr": reverse_rotate_both,
            "pa": lambda: b.push_to(a),
            "pb": lambda: a.push_to(b),
        }
        self._push_sources = {"pa": b, "pb": a}

    def _do(self, op: str) -> None:
        source = self._push_sources.get(op)
        if source is not None and len(source) == 0:
            return
        self._actions[op]()
        self.operations.append(op)

    def sort(self) -> List[str]:
        """Sort stack a and return every operation recorded so far."""
        if not self.a.is_sorted():
            if len(self.a) < 4:
                self.sort_three()
            else:
                self.sort_big()
        return list(self.operations)

    def sort_three(self) -> None:
        """Sort a stack a of at most three values in place."""
        a = self.a
        if len(a) > 3:
            raise ValueError("sort_three handles at most three values")
        if a.is_sorted():
            return
        if len(a) == 2:
            self._do("sa")
        elif a[0] < a[1]:
            self._do("rra")
            if not a.is_sorted():
                self._do("sa")
        elif a[1] < a[2]:
            self._do("sa" if a[0] < a[2] else "ra")
        else:
            self._do("ra")
            self._do("sa")

    def sort_big(self) -> None:
        """Move values to b in descending order, sort the last three on a,
        then bring everything back."""
        self._do("pb")
        self._do("pb")
        while len(self.a) >= 4:
            self.set_stack(find_lcost_nb(self.a, self.b))
            self._do("pb")
        self.sort_three()
        self.push_a_phase()

    def push_a_phase(self) -> None:
        """Return every value of b to its place on a, then rotate a sorted."""
        a, b = self.a, self.b
        while len(b):
            top = b[0]
            if (
                len(a) == 0
                or (a[0] > top and a[-1] < top)
                or (top < a.min and a.min == a[0])
                or (top > a.max and a.max == a[-1])
            ):
                self._do("pa")
            else:
                self._do("rra")
        if len(a) == 0:
            return
        op = "ra" if a.index_of(a.min) < len(a) // 2 else "rra"
        while not a.is_sorted():
            self._do(op)

    def set_stack(self, a_nb: int) -> None:
        """Rotate both stacks so that ``a_nb`` tops a and pushing it keeps b
        in descending circular order."""
        b = self.b
        size = len(b)
        if size == 0:
            self.set_a_head(a_nb)
            return
        if a_nb < b.min or a_nb > b.max:
            target = b.min
        else:
            target = next(
                (
                    b[i]
                    for i in range(size)
                    if b[i] > a_nb and b[(i + 1) % size] < a_nb
                ),
                None,
            )
            if target is None:
                return
        self.set_both_rotate(target, a_nb)
        self.set_b_tail(target)
        self.set_a_head(a_nb)

    def set_a_head(self, set_nb: int) -> None:
        """Rotate a until ``set_nb`` is on top."""
        a = self.a
        op = "ra" if a.index_of(set_nb) < len(a) // 2 else "rra"
        while a[0] != set_nb:
            self._do(op)

    def set_b_tail(self, set_nb: int) -> None:
        """Rotate b until ``set_nb`` is at the bottom."""
        b = self.b
        op = "rb" if b.index_of(set_nb) < len(b) // 2 else "rrb"
        while b[-1] != set_nb:
            self._do(op)

    def set_both_rotate(self, b_nb: int, a_nb: int) -> None:
        """Rotate both stacks together while both targets lie the same way."""
        a, b = self.a, self.b
        b_front = b.index_of(b_nb) < len(b) // 2
        a_front = a.index_of(a_nb) < len(a) // 2
        if b_front != a_front:
            return
        op = "rr" if b_front else "rrr"
        while b[-1] != b_nb and a[0] != a_nb:
            self._do(op)


def sort_operations(values: Iterable[int]) -> List[str]:
    """The operations that sort ``values``."""
    return Sorter(values).sort()