"""Stacks of ranked integers with the rotations used by the push-swap moves."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .output import format_number


@dataclass(eq=False)
class Node:
    """One element of a stack: its value and its rank among the input values."""

    value: int
    index: int = 0


class Stack:
    """A sequence of nodes whose first element is the top of the stack."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: deque[Node] = deque(nodes)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Stack":
        """Stack holding ``values`` top to bottom, each ranked by value."""
        stack = cls(Node(value) for value in values)
        assign_indexes(stack)
        return stack

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    @property
    def head(self) -> Optional[Node]:
        """The top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    @property
    def tail(self) -> Optional[Node]:
        """The bottom node, or None when the stack is empty."""
        return self._nodes[-1] if self._nodes else None

    def push(self, node: Node) -> None:
        """Put ``node`` on top."""
        self._nodes.appendleft(node)

    def pop(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def pop_bottom(self) -> Node:
        """Remove and return the bottom node."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.pop()

    def append(self, node: Node) -> None:
        """Put ``node`` at the bottom."""
        self._nodes.append(node)

    def swap_top(self) -> bool:
        """Exchange the two top nodes; False when there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        return True

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        self.append(self.pop())

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        self.push(self.pop_bottom())

    def is_sorted(self) -> bool:
        """True when ranks never decrease from top to bottom."""
        ranks = self.indexes()
        return all(upper <= lower for upper, lower in zip(ranks, ranks[1:]))

    def min_index(self) -> int:
        """Smallest rank in the stack."""
        if not self._nodes:
            raise ValueError("empty stack has no minimum")
        return min(node.index for node in self._nodes)

    def min_position(self) -> int:
        """Distance from the top of the first node with the smallest rank."""
        if not self._nodes:
            raise ValueError("empty stack has no minimum")
        ranks = self.indexes()
        return ranks.index(min(ranks))

    def values(self) -> List[int]:
        """Values from top to bottom."""
        return [node.value for node in self._nodes]

    def indexes(self) -> List[int]:
        """Ranks from top to bottom."""
        return [node.index for node in self._nodes]


def assign_indexes(stack: Stack) -> None:
    """Give each node the number of values in the stack smaller than its own."""
    ordered = sorted(node.value for node in stack)
    for node in stack:
        node.index = bisect_left(ordered, node.value)


def format_stack(stack: Stack) -> str:
    """Values top to bottom, each followed by a space, then a newline."""
    return "".join(f"{format_number(value)} " for value in stack.values()) + "\n"