"""Page label ranges of a document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PageType(Enum):
    """Numbering style of a page label range."""

    ARABIC = 0
    UPPERCASE_ROMAN = 1
    LOWERCASE_ROMAN = 2
    UPPERCASE_LETTERS = 3
    LOWERCASE_LETTERS = 4


@dataclass(frozen=True)
class PageLabel:
    """A labelled range of pages."""

    start: int
    range: int
    type: PageType
    name: str = ""