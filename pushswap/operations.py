"""The two push-swap stacks and the recorded moves between them."""

from __future__ import annotations

from typing import Iterable, List

from .stacks import Stack


class PushSwap:
    """Stack ``a`` filled with the input, an empty stack ``b`` and a move log."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a = Stack.from_values(values)
        self.b = Stack()
        self.operations: List[str] = []

    def _record(self, name: str) -> None:
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the top two of ``a``; recorded only if it happened."""
        if self.a.swap_top():
            self._record("sa")

    def sb(self) -> None:
        """Swap the top two of ``b``; recorded only if it happened."""
        if self.b.swap_top():
            self._record("sb")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not len(self.b):
            return
        self.a.push(self.b.pop())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not len(self.a):
            return
        self.b.push(self.a.pop())
        self._record("pb")

    def ra(self) -> None:
        """Rotate ``a``: its top goes to the bottom."""
        self.a.rotate()
        self._record("ra")

    def rra(self) -> None:
        """Reverse-rotate ``a``: its bottom goes to the top."""
        self.a.reverse_rotate()
        self._record("rra")

    def instruction_count(self) -> int:
        """Number of moves recorded so far."""
        return len(self.operations)