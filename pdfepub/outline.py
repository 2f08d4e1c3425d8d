"""Document outline (bookmark) tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Outline:
    """An outline entry with its destination and child entries."""

    title: str = ""
    id: int = 0
    generation: int = 0
    x: float = 0.0
    y: float = 0.0
    children: list[Outline] = field(default_factory=list)

    def add_child(self, child: Outline) -> None:
        """Append a child entry."""
        self.children.append(child)

    def set_destination(self, id: int, generation: int) -> None:
        """Point this entry at the object with the given id and generation."""
        self.id = id
        self.generation = generation

    def set_location(self, x: float, y: float) -> None:
        """Set the position on the destination page."""
        self.x = x
        self.y = y

    def __len__(self) -> int:
        return len(self.children)

    def __getitem__(self, index: int) -> Outline:
        return self.children[index]

    def __iter__(self) -> Iterator[Outline]:
        return iter(self.children)