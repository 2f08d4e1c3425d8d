"""State carried while rendering a page."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pdfepub.document import Document
    from pdfepub.font import Font
    from pdfepub.page import Page


class Context:
    """Rendering state: document, current page and current font."""

    def __init__(self, document: Document | None) -> None:
        self.document = document
        self.page: Page | None = None
        self.font: Font | None = None
        self.font_changed = False
        self.use_font = False
        self.font_size = 1.0

    def set_current_font(self, alias: str, size: float) -> None:
        """Select the font a page alias names and give it a size.

        Nothing happens without both a document and a page. Raises
        KeyError when the alias names no font of the document.
        """
        if self.document is None or self.page is None:
            return
        font = self.document.font(self.page.font_name(alias))
        if font is None:
            raise KeyError(f"no font for alias {alias!r}")
        self.font_changed = True
        self.font = font
        font.size = size