import dataclasses

import pytest

from pdfepub.pagelabel import PageLabel, PageType


def test_page_label_keeps_values():
    label = PageLabel(3, 10, PageType.LOWERCASE_ROMAN, "Preface")
    assert (label.start, label.range, label.type, label.name) == (
        3,
        10,
        PageType.LOWERCASE_ROMAN,
        "Preface",
    )


def test_page_label_default_name():
    assert PageLabel(1, 5, PageType.ARABIC).name == ""


def test_page_label_equality():
    first = PageLabel(1, 2, PageType.ARABIC, "A")
    assert first == PageLabel(1, 2, PageType.ARABIC, "A")
    assert first != PageLabel(1, 2, PageType.UPPERCASE_LETTERS, "A")


def test_page_label_is_immutable():
    label = PageLabel(1, 2, PageType.ARABIC, "A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        label.start = 5
    assert label.start == 1


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, PageType.ARABIC),
        (1, PageType.UPPERCASE_ROMAN),
        (2, PageType.LOWERCASE_ROMAN),
        (3, PageType.UPPERCASE_LETTERS),
        (4, PageType.LOWERCASE_LETTERS),
    ],
)
def test_page_type_from_code(code, expected):
    assert PageType(code) is expected


def test_page_type_unknown_code():
    with pytest.raises(ValueError):
        PageType(5)