"""Fonts used by a document and their character maps."""

from __future__ import annotations

from pdfepub.utils import single_to_wide, utf16be_to_utf8


class Font:
    """A font with its style flags and an optional code-to-Unicode map."""

    def __init__(self, name: str = "", size: float = 0.0) -> None:
        self.italic = False
        self.bold = False
        self.fixed = False
        self.size = size
        self._name = ""
        self.charmap_start = b""
        self.charmap_finish = b""
        self.charmap: dict[bytes, str] = {}
        if name:
            self.name = name

    @property
    def name(self) -> str:
        """The font name; a name containing "Bold" marks the font bold."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if "Bold" in value:
            self.bold = True
        self._name = value

    def add_char_map(self, character: bytes, utf16value: bytes) -> None:
        """Map a character code to the text of a UTF-16BE value."""
        self.charmap[bytes(character)] = utf16be_to_utf8(utf16value)

    def translate(self, value: bytes) -> str:
        """Translate raw string bytes into text using the character map.

        Codes are read in chunks as wide as the code space start. A chunk
        inside the code space gives its mapped text (empty if unmapped);
        a chunk outside it gives its first byte.
        """
        value = bytes(value)
        if not self.charmap:
            return single_to_wide(value)

        width = len(self.charmap_start)
        start = self.charmap_start
        finish = self.charmap_finish
        parts: list[str] = []
        for pos in range(0, len(value), max(width, 1)):
            chunk = value[pos:pos + width]
            in_range = (
                start <= value[pos:pos + len(start)]
                and finish >= value[pos:pos + len(finish)]
            )
            if in_range:
                parts.append(self.charmap.get(chunk, ""))
            else:
                parts.append(chr(value[pos]))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Font(name={self._name!r}, size={self.size!r})"