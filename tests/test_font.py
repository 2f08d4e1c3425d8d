from pdfepub.font import Font


def _mapped_font() -> Font:
    font = Font()
    font.charmap_start = b"\x00\x00"
    font.charmap_finish = b"\x00\xff"
    font.add_char_map(b"\x00\x41", b"\x00\x61")
    font.add_char_map(b"\x00\x42", b"\x00\x62")
    return font


def test_defaults():
    font = Font()
    assert font.size == 0
    assert font.name == ""
    assert (font.bold, font.italic, font.fixed) == (False, False, False)


def test_bold_name_sets_bold():
    font = Font()
    font.name = "Helvetica-Bold"
    assert font.bold is True
    assert font.name == "Helvetica-Bold"


def test_plain_name_keeps_bold_off():
    font = Font()
    font.name = "Helvetica"
    assert font.bold is False


def test_bold_is_not_cleared_by_later_name():
    font = Font(name="Times-Bold")
    font.name = "Times"
    assert font.bold is True


def test_translate_without_charmap_returns_input_text():
    font = Font()
    assert font.translate(b"Hello") == "Hello"


def test_add_char_map_decodes_utf16():
    font = _mapped_font()
    assert font.charmap[b"\x00\x41"] == "a"


def test_translate_mapped_codes():
    font = _mapped_font()
    assert font.translate(b"\x00\x41\x00\x42\x00\x41") == "aba"


def test_translate_unmapped_code_in_range_is_empty():
    font = _mapped_font()
    assert font.translate(b"\x00\x41\x00\x43") == "a"


def test_translate_out_of_range_gives_first_byte():
    font = _mapped_font()
    assert font.translate(b"\x01\x41\x00\x42") == "\x01b"


def test_single_byte_code_space():
    font = Font()
    font.charmap_start = b"\x20"
    font.charmap_finish = b"\x7e"
    font.add_char_map(b"\x41", b"\x00\x5a")
    assert font.translate(b"A\x10") == "Z\x10"