"""An entry queued for a ZIP archive."""

from __future__ import annotations

import time
import zlib

from pdfepub.utils import compress


def current_datetime() -> int:
    """Return the local time as a packed DOS date (high word) and time (low word)."""
    t = time.localtime()
    year = t.tm_year - 1900
    if year >= 1980:
        year -= 1980
    elif year >= 80:
        year -= 80
    date = t.tm_mday + 32 * t.tm_mon + 512 * year
    clock = t.tm_sec // 2 + 32 * t.tm_min + 2048 * t.tm_hour
    return ((date << 16) | clock) & 0xFFFFFFFF


class AppendedFile:
    """A file's data with its checksum, timestamp and deflated form."""

    def __init__(self, name: str, data: bytes, position: int) -> None:
        self.name = name
        self.data = bytes(data)
        self.position = position
        self.date = current_datetime()
        self.length = len(self.data)
        self.crc = zlib.crc32(self.data) & 0xFFFFFFFF
        self.deflate_buffer = compress(self.data)
        self.compressed_size = len(self.deflate_buffer)
        self.compressed = self.compressed_size < self.length
        if not self.compressed:
            self.compressed_size = self.length

    @property
    def payload(self) -> bytes:
        """The bytes stored in the archive for this entry."""
        return self.deflate_buffer if self.compressed else self.data

    def __repr__(self) -> str:
        return f"AppendedFile(name={self.name!r}, length={self.length})"