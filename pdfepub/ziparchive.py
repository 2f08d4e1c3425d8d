"""A minimal ZIP archive writer."""

from __future__ import annotations

import os
import struct
import zlib
from typing import BinaryIO

from pdfepub.appendedfile import AppendedFile

_LOCAL_SIGNATURE = b"PK\x03\x04"
_CENTRAL_SIGNATURE = b"PK\x01\x02"
_END_SIGNATURE = b"PK\x05\x06"
_VERSION_NEEDED = 0x0A
_VERSION_MADE_BY = 0x031E
_DEFLATE_FLAGS = 2
_EXTERNAL_ATTRIBUTES = 0x81A40000

_LOCAL_HEADER = struct.Struct("<4sHHHIIIIHH")
_CENTRAL_HEADER = struct.Struct("<4sHHHHIIIIHHHHHII")
_END_RECORD = struct.Struct("<4sHHHHIIH")


class ZipWriter:
    """Writes files into a ZIP archive; the directory is written on close."""

    def __init__(self) -> None:
        self._stream: BinaryIO | None = None
        self.files: list[AppendedFile] = []
        self._cd_address = 0
        self._cd_size = 0

    @property
    def is_open(self) -> bool:
        """Whether an output file is open."""
        return self._stream is not None

    def open(self, output: str | os.PathLike[str]) -> None:
        """Open the output file for writing; raises OSError on failure."""
        self.close()
        self._stream = open(output, "wb")
        self.files = []

    def close(self) -> None:
        """Write the central directory and close the file, if open."""
        if self._stream is None:
            return
        try:
            self._write_central_files()
            self._write_end_record()
            self._stream.flush()
        finally:
            self._stream.close()
            self._stream = None

    def add_source(self, filename: str, data: bytes | str) -> None:
        """Add a file; text is stored as UTF-8. Raises ValueError when not open."""
        if self._stream is None:
            raise ValueError("archive is not open")
        if isinstance(data, str):
            data = data.encode("utf-8")
        entry = AppendedFile(filename, data, self._stream.tell())
        name = filename.encode("utf-8")
        flags, method = self._method(entry)
        self._stream.write(
            _LOCAL_HEADER.pack(
                _LOCAL_SIGNATURE,
                _VERSION_NEEDED,
                flags,
                method,
                entry.date,
                entry.crc,
                entry.compressed_size & 0xFFFFFFFF,
                entry.length & 0xFFFFFFFF,
                len(name) & 0xFFFF,
                0,
            )
        )
        self._stream.write(name)
        self._stream.write(entry.payload)
        self.files.append(entry)

    @staticmethod
    def _method(entry: AppendedFile) -> tuple[int, int]:
        if entry.compressed:
            return _DEFLATE_FLAGS, zlib.DEFLATED
        return 0, 0

    def _write_central_files(self) -> None:
        assert self._stream is not None
        self._cd_address = self._stream.tell() & 0xFFFFFFFF
        for entry in self.files:
            name = entry.name.encode("utf-8")
            flags, method = self._method(entry)
            self._stream.write(
                _CENTRAL_HEADER.pack(
                    _CENTRAL_SIGNATURE,
                    _VERSION_MADE_BY,
                    _VERSION_NEEDED,
                    flags,
                    method,
                    entry.date,
                    entry.crc,
                    entry.compressed_size & 0xFFFFFFFF,
                    entry.length & 0xFFFFFFFF,
                    len(name) & 0xFFFF,
                    0,
                    0,
                    0,
                    0,
                    _EXTERNAL_ATTRIBUTES,
                    entry.position & 0xFFFFFFFF,
                )
            )
            self._stream.write(name)
        self._cd_size = (self._stream.tell() - self._cd_address) & 0xFFFFFFFF

    def _write_end_record(self) -> None:
        assert self._stream is not None
        count = len(self.files) & 0xFFFF
        self._stream.write(
            _END_RECORD.pack(
                _END_SIGNATURE, 0, 0, count, count, self._cd_size, self._cd_address, 0
            )
        )

    def __enter__(self) -> ZipWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()