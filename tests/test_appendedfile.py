import time
import zlib
from unittest import mock

from pdfepub.appendedfile import AppendedFile, current_datetime

FIXED = time.struct_time((2020, 6, 15, 12, 30, 46, 0, 167, -1))


def _fields(value):
    date, clock = value >> 16, value & 0xFFFF
    return (
        (date >> 9) + 1980,
        (date >> 5) & 15,
        date & 31,
        clock >> 11,
        (clock >> 5) & 63,
        (clock & 31) * 2,
    )


def test_current_datetime_packs_dos_fields():
    with mock.patch("time.localtime", return_value=FIXED):
        value = current_datetime()
    assert _fields(value) == (2020, 6, 15, 12, 30, 46)


def test_current_datetime_odd_seconds_round_down():
    stamp = time.struct_time((2001, 1, 2, 3, 4, 5, 1, 2, -1))
    with mock.patch("time.localtime", return_value=stamp):
        value = current_datetime()
    assert _fields(value) == (2001, 1, 2, 3, 4, 4)


def test_entry_uses_current_datetime():
    with mock.patch("time.localtime", return_value=FIXED):
        entry = AppendedFile("a.txt", b"hello", 0)
        assert entry.date == current_datetime()


def test_compressible_data_is_deflated():
    data = b"abcabcabc" * 200
    entry = AppendedFile("a.txt", data, 42)
    assert entry.compressed is True
    assert entry.length == len(data)
    assert entry.compressed_size < entry.length
    assert zlib.decompress(entry.payload, -zlib.MAX_WBITS) == data
    assert entry.position == 42


def test_crc_matches_data():
    data = b"The quick brown fox"
    entry = AppendedFile("a.txt", data, 0)
    assert entry.crc == zlib.crc32(data)


def test_small_data_is_stored():
    entry = AppendedFile("a.txt", b"x", 0)
    assert entry.compressed is False
    assert entry.compressed_size == entry.length == 1
    assert entry.payload == b"x"


def test_empty_data_is_stored():
    entry = AppendedFile("empty", b"", 0)
    assert entry.compressed is False
    assert entry.compressed_size == 0
    assert entry.payload == b""
    assert entry.crc == 0