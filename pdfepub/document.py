"""The document model built from a parsed PDF."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pdfepub.font import Font
    from pdfepub.outline import Outline
    from pdfepub.page import Page
    from pdfepub.pagelabel import PageLabel

DEFAULT_LANG = "en"


class Document:
    """A PDF document: metadata, fonts, pages, labels and outline."""

    def __init__(self) -> None:
        self.encrypted = False
        self.tree_root = False
        self.id = ""
        self.title = ""
        self.subject = ""
        self.author = ""
        self._lang = DEFAULT_LANG
        self.root: Any = None
        self.info: Any = None
        self.outline: Outline | None = None
        self.fonts: list[Font] = []
        self.pages: list[Page] = []
        self.page_labels: list[PageLabel] = []

    @property
    def lang(self) -> str:
        """The document language; empty values are ignored."""
        return self._lang

    @lang.setter
    def lang(self, value: str) -> None:
        if value:
            self._lang = value

    @property
    def page_count(self) -> int:
        """The number of pages."""
        return len(self.pages)

    def set_id(self, id: str, generation: str) -> None:
        """Set the document id from an id and a generation part."""
        self.id = id + generation

    def add_font(self, font: Font) -> None:
        """Register a font."""
        self.fonts.append(font)

    def font(self, name: str) -> Font | None:
        """Return the first font with the given name, or None."""
        return next((font for font in self.fonts if font.name == name), None)

    def add_page(self, page: Page) -> None:
        """Append a page."""
        self.pages.append(page)

    def add_page_label(self, label: PageLabel) -> None:
        """Append a page label range."""
        self.page_labels.append(label)

    def page_at(self, index: int) -> Page:
        """Return the page at an index; raises IndexError when out of range."""
        return self.pages[index]

    def page_by_id(self, id: int, generation: int) -> Page | None:
        """Return the page with the given object id and generation, or None."""
        return next(
            (p for p in self.pages if p.id == id and p.generation == generation),
            None,
        )