import io
import warnings

import numpy as np
import pytest

from _rtfio.tokenizer import RtfTokenizer, Token, TokenKind, next_token, tokenize
from _rtfio.tokenizer.errors import (
    IncompleteTokenizationError,
    InvalidHexDigitError,
    MalformedIntegerError,
    TruncatedBinaryPayloadError,
    UnrecognizedInputError,
    WrongFileModeError,
)
from _rtfio.tokenizer.rtf_tokenizer import TOKEN_PRECEDENCE, text_stop_offsets


def test_control():
    tokens = tokenize(
        b"\\*\\bin5 ABC{}\\b\\bin1 {\\bin0 \\b0\\bin0\\bin1  "
        b"\\supercalifragilistic31415\\bin1\x01\\bin1 \x02"
    )
    assert tokens == [
        Token.control_symbol("*"),
        Token.control_bin(b"ABC{}"),
        Token.control_word("b"),
        Token.control_bin(b"{"),
        Token.control_bin(b""),
        Token.control_word("b", 0),
        Token.control_bin(b""),
        Token.control_bin(b" "),
        Token.control_word("supercalifragilistic", 31415),
        Token.control_bin(b"\x01"),
        Token.control_bin(b"\x02"),
    ]


def test_group_tokens():
    tokens = tokenize(b"\\b Hello World \\b0 \\par\r\nThis is a test {\\*\\nothing}")
    assert tokens == [
        Token.control_word("b"),
        Token.text(b"Hello World "),
        Token.control_word("b", 0),
        Token.control_word("par"),
        Token.newline(),
        Token.text(b"This is a test "),
        Token.start_group(),
        Token.control_symbol("*"),
        Token.control_word("nothing"),
        Token.end_group(),
    ]


def test_hexescape_takes_precedence_over_symbol():
    assert tokenize(b"\\'4E") == [Token.control_word("'", 78)]


def test_hexescape_does_not_consume_space():
    assert tokenize(b"\\'354E") == [Token.hex_escape(0x35), Token.text(b"4E")]
    assert tokenize(b"\\'35 4E") == [Token.hex_escape(0x35), Token.text(b" 4E")]


def test_bin_takes_precedence_over_word():
    assert tokenize(b"\\bin3{}\\") == [Token.control_bin(b"{}\\")]
    assert tokenize(b"\\bin2 12") == [Token.control_bin(b"12")]


def test_longer_word_starting_with_bin():
    assert tokenize(b"\\binary3 x") == [
        Token.control_word("binary", 3),
        Token.text(b"x"),
    ]


def test_word_consumes_space():
    assert tokenize(b"\\foo5 bar") == [Token.control_word("foo", 5), Token.text(b"bar")]


@pytest.mark.parametrize("line_ending", [b"\r\n", b"\n", b"\r"])
def test_newlines(line_ending):
    assert tokenize(line_ending) == [Token.newline()]


def test_newline_sequence():
    assert tokenize(b"\n\r\r\n\r") == [Token.newline()] * 4


@pytest.mark.parametrize("contents", [b"{{{\\b x", b"}}a{", b"}", b"{"])
def test_unbalanced_groups(contents):
    tokens = tokenize(contents)
    assert sum(t.kind == TokenKind.START_GROUP for t in tokens) == contents.count(b"{")
    assert sum(t.kind == TokenKind.END_GROUP for t in tokens) == contents.count(b"}")


def test_text_is_opaque_bytes():
    assert tokenize(b"caf\xe9 \x00\xff") == [Token.text(b"caf\xe9 \x00\xff")]


def test_empty():
    assert tokenize(b"") == []


def test_token_offsets():
    tokens = tokenize(b"{\\b x}\r\n")
    assert [(t.start, t.end) for t in tokens] == [(0, 1), (1, 4), (4, 5), (5, 6), (6, 8)]


def test_overflow_is_malformed_integer():
    with pytest.raises(IncompleteTokenizationError) as err:
        tokenize(b"\\foo99999999999")
    assert isinstance(err.value.reason, MalformedIntegerError)
    assert isinstance(err.value.__cause__, MalformedIntegerError)
    assert err.value.tokens == []
    assert err.value.offset == 0


def test_incomplete_tokenization_keeps_tokens():
    with pytest.raises(IncompleteTokenizationError) as err:
        tokenize(b"{\\b bold\\'4x}")
    assert err.value.tokens == [
        Token.start_group(),
        Token.control_word("b"),
        Token.text(b"bold"),
    ]
    assert isinstance(err.value.reason, InvalidHexDigitError)
    assert err.value.offset == 8
    assert err.value.remaining == b"\\'4x}"


def test_truncated_binary_payload():
    with pytest.raises(IncompleteTokenizationError) as err:
        tokenize(b"\\bin4 abc")
    assert isinstance(err.value.reason, TruncatedBinaryPayloadError)


def test_trailing_backslash_is_unrecognized():
    with pytest.raises(IncompleteTokenizationError) as err:
        tokenize(b"text\\")
    assert isinstance(err.value.reason, UnrecognizedInputError)
    assert err.value.tokens == [Token.text(b"text")]
    assert err.value.remaining == b"\\"


def test_not_strict_warns():
    with pytest.warns(UserWarning, match="ignoring 4 trailing bytes"):
        tokens = tokenize(b"\\par\\'zz", strict=False)
    assert tokens == [Token.control_word("par")]


def test_not_strict_without_errors_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert tokenize(b"{}", strict=False) == [Token.start_group(), Token.end_group()]


def test_next_token():
    token, rest = next_token(b"\\b0 bold}")
    assert token == Token.control_word("b", 0)
    assert rest == b"bold}"


def test_next_token_text():
    token, rest = next_token(b"bold}")
    assert token == Token.text(b"bold")
    assert rest == b"}"


@pytest.mark.parametrize("contents", [b"", b"\\"])
def test_next_token_unrecognized(contents):
    with pytest.raises(UnrecognizedInputError):
        next_token(contents)


def test_next_token_malformed():
    with pytest.raises(TruncatedBinaryPayloadError):
        next_token(b"\\bin2 a")


def test_tokenizer_is_lazy():
    tokens = iter(RtfTokenizer(b"\\par\\foo-"))
    assert next(tokens) == Token.control_word("par")
    with pytest.raises(MalformedIntegerError):
        next(tokens)


def test_tokenize_from_stream():
    assert tokenize(io.BytesIO(b"{x}")) == [
        Token.start_group(),
        Token.text(b"x"),
        Token.end_group(),
    ]


def test_tokenize_from_bytearray():
    assert tokenize(bytearray(b"x")) == [Token.text(b"x")]


def test_text_stream_is_wrong_mode():
    with pytest.raises(WrongFileModeError):
        tokenize(io.StringIO("{\\rtf1}"))


def test_text_stop_offsets():
    offsets = text_stop_offsets(b"a\\b{c}d\re\nf")
    np.testing.assert_array_equal(offsets, [1, 3, 5, 7, 9])


def test_precedence_ends_with_text():
    assert TOKEN_PRECEDENCE[-1].__name__ == "tokenize_text"
    assert TOKEN_PRECEDENCE[0].__name__ == "tokenize_control_hexescape"
