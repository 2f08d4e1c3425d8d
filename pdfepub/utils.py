"""Shared helpers: console messages, deflate streams and PDF text decoding."""

from __future__ import annotations

import sys
import zlib

PACKAGE_NAME = "pdftools"
PACKAGE_VERSION = "0.5.0"

_CHUNK_SIZE = 8192
_MAX_MEM_LEVEL = 9
_BOMS = (b"\xfe\xff", b"\xff\xfe")

_verbose = False

# PDFDocEncoding: code points that differ from Latin-1.
_PDF_DOC_OVERRIDES = {
    0x18: "\u02d8",
    0x19: "\u02c7",
    0x1A: "\u02c6",
    0x1B: "\u02d9",
    0x1C: "\u02dd",
    0x1D: "\u02db",
    0x1E: "\u02da",
    0x1F: "\u02dc",
    0x7F: "\ufffd",
    0x80: "\u2022",
    0x81: "\u2020",
    0x82: "\u2021",
    0x83: "\u2026",
    0x84: "\u2014",
    0x85: "\u2013",
    0x86: "\u0192",
    0x87: "\u2044",
    0x88: "\u2039",
    0x89: "\u203a",
    0x8A: "\u2212",
    0x8B: "\u2030",
    0x8C: "\u201e",
    0x8D: "\u201c",
    0x8E: "\u201d",
    0x8F: "\u2018",
    0x90: "\u2019",
    0x91: "\u201a",
    0x92: "\u2122",
    0x93: "\ufb01",
    0x94: "\ufb02",
    0x95: "\u0141",
    0x96: "\u0152",
    0x97: "\u0160",
    0x98: "\u0178",
    0x99: "\u017d",
    0x9A: "\u0131",
    0x9B: "\u0142",
    0x9C: "\u0153",
    0x9D: "\u0161",
    0x9E: "\u017e",
    0x9F: "\ufffd",
    0xA0: "\u20ac",
    0xAD: "\ufffd",
}


def set_verbose_mode(verbose: bool) -> None:
    """Turn verbose messages on or off."""
    global _verbose
    _verbose = bool(verbose)


def verbose_mode() -> bool:
    """Return whether verbose messages are printed."""
    return _verbose


def verbose_message(msg: str) -> None:
    """Print a message on standard output when verbose mode is on."""
    if _verbose:
        print(f"{PACKAGE_NAME}: {msg}", file=sys.stdout)


def error_message(msg: str | BaseException) -> None:
    """Print an error message, or an exception's text, on standard error."""
    print(f"{PACKAGE_NAME}: {msg}", file=sys.stderr)


def compress(raw: bytes) -> bytes:
    """Compress data into a raw deflate stream (no zlib header)."""
    compressor = zlib.compressobj(
        zlib.Z_DEFAULT_COMPRESSION,
        zlib.DEFLATED,
        -zlib.MAX_WBITS,
        _MAX_MEM_LEVEL,
        zlib.Z_DEFAULT_STRATEGY,
    )
    return compressor.compress(bytes(raw)) + compressor.flush()


def flat_decode(compressed: bytes) -> bytes:
    """Inflate a zlib stream as used by the FlateDecode filter.

    Corrupt data is reported and whatever was decoded before the fault
    is returned.
    """
    view = memoryview(bytes(compressed))
    decompressor = zlib.decompressobj()
    parts: list[bytes] = []
    try:
        for start in range(0, len(view), _CHUNK_SIZE):
            parts.append(decompressor.decompress(view[start:start + _CHUNK_SIZE]))
            if decompressor.eof:
                break
        parts.append(decompressor.flush())
    except zlib.error as exc:
        error_message(f"error in decompression: {exc}")
    return b"".join(parts)


def single_to_wide(data: bytes) -> str:
    """Widen each byte to the character with the same code."""
    return bytes(data).decode("latin-1")


def utf16be_to_utf8(data: bytes) -> str:
    """Decode UTF-16BE text; malformed input gives an empty string."""
    try:
        return bytes(data).decode("utf-16-be")
    except UnicodeDecodeError:
        return ""


def charset_to_utf8(data: bytes) -> str:
    """Decode a PDF text string.

    Strings longer than two bytes that start with a byte order mark are
    UTF-16; everything else is PDFDocEncoding.
    """
    data = bytes(data)
    if len(data) > 2 and data[:2] in _BOMS:
        try:
            return data.decode("utf-16")
        except UnicodeDecodeError:
            return ""
    return data.decode("latin-1").translate(_PDF_DOC_OVERRIDES)