import pytest

from pdfepub.token import Token, TokenType


def test_default_token_is_end_of_file():
    token = Token()
    assert token.type is TokenType.ENDFILE
    assert token.value == ""


def test_fields_are_kept():
    token = Token(TokenType.NAME, "/Type")
    assert token.type is TokenType.NAME
    assert token.value == "/Type"


@pytest.mark.parametrize("text,expected", [("12.5", 12.5), ("-3", -3.0), (".25", 0.25), ("1e3", 1000.0)])
def test_to_number_parses_numbers(text, expected):
    assert Token(TokenType.NUM, text).to_number() == expected


def test_to_number_uses_leading_prefix():
    assert Token(TokenType.NUM, "12abc").to_number() == 12.0


def test_to_number_invalid_gives_zero():
    assert Token(TokenType.NAME, "abc").to_number() == 0.0
    assert Token(TokenType.NAME, "").to_number() == 0.0


def test_to_number_overflow_gives_zero():
    assert Token(TokenType.NUM, "1e999").to_number() == 0.0


@pytest.mark.parametrize("text,expected", [("42", 42), ("-7", -7), ("  15", 15)])
def test_to_int_parses_integers(text, expected):
    assert Token(TokenType.NUM, text).to_int() == expected


def test_to_int_truncates_at_fraction():
    assert Token(TokenType.NUM, "3.7").to_int() == 3


def test_to_int_invalid_gives_zero():
    assert Token(TokenType.NAME, "R").to_int() == 0


def test_to_int_out_of_range_gives_zero():
    assert Token(TokenType.NUM, "99999999999").to_int() == 0


def test_tokens_keep_distinct_types():
    tokens = [Token(member, member.name) for member in TokenType]
    assert len({token.type for token in tokens}) == len(tokens)
    assert Token(TokenType.TRUE, "true").type is not Token(TokenType.FALSE, "false").type