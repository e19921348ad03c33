# Ordered snake body, head first.
from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from .board import Cell


class SnakeBody:
    """Head-first cell sequence. Moves are committed unchecked; classify them first."""

    def __init__(self, cells: Iterable[tuple[int, int]]) -> None:
        self.cells: deque[Cell] = deque(Cell(*cell) for cell in cells)  # head at index 0
        if not self.cells:
            raise ValueError("Snake body needs at least one cell.")
        self.occupied: set[Cell] = set(self.cells)  # O(1) body lookup
        if len(self.occupied) != len(self.cells):
            raise ValueError("Snake body cells must be distinct.")

    def peek_head(self) -> Cell:
        return self.cells[0]

    def advance(self, new_head: tuple[int, int], grow: bool) -> None:
        """Prepend `new_head`; drop the tail unless growing."""
        head = Cell(*new_head)
        self.cells.appendleft(head)
        self.occupied.add(head)
        if not grow:
            tail = self.cells.pop()
            # A tail equal to the new head stays occupied.
            if tail != head:
                self.occupied.discard(tail)

    def __contains__(self, cell: object) -> bool:
        return cell in self.occupied

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"SnakeBody({list(self.cells)!r})"
