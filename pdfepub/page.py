"""A page of a document."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pdfepub.document import Document

Box = tuple[int, int, int, int]


class Page:
    """A page: its object id, boxes, content root and font aliases."""

    def __init__(self, document: Document | None = None) -> None:
        self.document = document
        self.id = 0
        self.generation = 0
        self.link = ""
        self.root: Any = None
        self.media_box: Box | None = None
        self.crop_box: Box | None = None
        self.font_map: dict[str, str] = {}

    def set_media_box(self, a: int, b: int, c: int, d: int) -> None:
        """Set the media box."""
        self.media_box = (a, b, c, d)

    def set_crop_box(self, a: int, b: int, c: int, d: int) -> None:
        """Set the crop box."""
        self.crop_box = (a, b, c, d)

    def set_destination(self, id: int, generation: int) -> None:
        """Set the page object id and derive the section link from it."""
        self.id = id
        self.generation = generation
        self.link = f"section{id}_{generation}"

    def add_font_map(self, alias: str, font_name: str) -> None:
        """Map a resource alias to a font name."""
        self.font_map[alias] = font_name

    def font_name(self, alias: str) -> str:
        """Return the font name for an alias, or an empty string."""
        return self.font_map.get(alias, "")

    def __repr__(self) -> str:
        return f"Page(id={self.id}, generation={self.generation})"