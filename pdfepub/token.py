"""Lexical tokens produced while scanning PDF content."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum, auto

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)
_SPECIAL_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:infinity|inf|nan)", re.IGNORECASE)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class TokenType(Enum):
    """Kinds of token a PDF scanner can produce."""

    ENDFILE = auto()
    ERROR = auto()
    START_ARRAY = auto()
    END_ARRAY = auto()
    TRUE = auto()
    FALSE = auto()
    NAME = auto()
    NUM = auto()
    STRING = auto()
    PERCENT = auto()
    START_DICT = auto()
    END_DICT = auto()
    NEW_LINE = auto()
    OBJ = auto()
    END_OBJ = auto()
    END_PDF = auto()
    XREF = auto()
    TRAILER = auto()
    START_XREF = auto()
    STREAM = auto()
    END_STREAM = auto()
    W_LO = auto()
    J_LO = auto()
    J_UP = auto()
    M_UP = auto()
    D = auto()
    RI = auto()
    I = auto()  # noqa: E741
    GS = auto()
    S_UP = auto()
    S_LO = auto()
    F_UP = auto()
    F_LO = auto()
    F_AST = auto()
    B_UP = auto()
    B_UP_AST = auto()
    B_LO = auto()
    B_LO_AST = auto()
    N = auto()
    Q_UP = auto()
    Q_LO = auto()
    CM = auto()
    V = auto()
    Y = auto()
    M_LO = auto()
    L = auto()
    C = auto()
    H = auto()
    RE = auto()
    W_AST = auto()
    W_UP = auto()
    BT = auto()
    ET = auto()
    TC = auto()
    TW = auto()
    TZ = auto()
    TL = auto()
    TF = auto()
    TR = auto()
    TS = auto()
    TD_UP = auto()
    TD_LO = auto()
    TM = auto()
    T_AST = auto()
    TJ_UP = auto()
    TJ_LO = auto()
    QUOTE = auto()
    DOUBLE_QUOTE = auto()
    D0 = auto()
    D1 = auto()
    CS_UP = auto()
    CS_LO = auto()
    SCN_UP = auto()
    SCN_LO = auto()
    SC_UP = auto()
    SC_LO = auto()
    G_LO = auto()
    G_UP = auto()
    RG_LO = auto()
    RG_UP = auto()
    K_LO = auto()
    K_UP = auto()
    SH = auto()
    BI = auto()
    ID = auto()
    EI = auto()
    DO = auto()
    MP = auto()
    DP = auto()
    BMC = auto()
    BDC = auto()
    EMC = auto()
    BX = auto()
    EX = auto()


@dataclass
class Token:
    """A single token: its type and its raw text."""

    type: TokenType = TokenType.ENDFILE
    value: str = ""

    def to_number(self) -> float:
        """Read the leading number of the value; 0.0 if there is none."""
        special = _SPECIAL_FLOAT_PREFIX.match(self.value)
        if special:
            return float(special.group().strip())
        match = _FLOAT_PREFIX.match(self.value)
        if not match:
            return 0.0
        result = float(match.group().strip())
        if math.isinf(result):
            return 0.0
        return result

    def to_int(self) -> int:
        """Read the leading integer of the value; 0 if there is none or it overflows."""
        match = _INT_PREFIX.match(self.value)
        if not match:
            return 0
        result = int(match.group().strip())
        if not _INT_MIN <= result <= _INT_MAX:
            return 0
        return result