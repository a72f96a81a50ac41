"""
Scanners for the smallest units of rtf: literals, integers, hex bytes and
the single byte delimiters.

A scanner is a function taking the stream and returning the scanned value.
Like tokenizers, scanners wind back the stream to where they started
before raising an error.
"""

import string

from _rtfio.tokenizer.combinators import one_of
from _rtfio.tokenizer.errors import (
    InvalidHexDigitError,
    MalformedIntegerError,
    TokenizationError,
)
from _rtfio.tokenizer.token import Token
from _rtfio.tokenizer.token_kind import TokenKind

ASCII_LETTERS = string.ascii_letters.encode("ascii")
DIGITS = string.digits.encode("ascii")
HEX_DIGITS = string.hexdigits.encode("ascii")

INT32_MAX = 2**31 - 1


def rest_of_stream(stream, offset):
    """
    :returns: All bytes in the stream from offset, without moving the
        stream.
    """
    go_back = stream.tell()
    stream.seek(offset)
    rest = stream.read()
    stream.seek(go_back)
    return rest


def peek(stream):
    start = stream.tell()
    read_char = stream.read(1)
    stream.seek(start)
    return read_char


def scan_literal(stream, word):
    """
    Scan the exact bytes in word.
    """
    start = stream.tell()
    read = stream.read(len(word))
    if read != word:
        stream.seek(start)
        raise TokenizationError(f"Expected {word!r} at {start} got {read!r}")


def scan_optional(stream, word):
    """
    Scan word if it is at the start of the stream.
    :returns: Whether word was scanned.
    """
    try:
        scan_literal(stream, word)
    except TokenizationError:
        return False
    return True


def scan_while(stream, accepted):
    """
    Scan the longest, possibly empty, run of bytes in accepted.
    """
    start = stream.tell()
    run = bytearray()
    read_char = stream.read(1)
    while read_char and read_char in accepted:
        run += read_char
        read_char = stream.read(1)
    stream.seek(start + len(run))
    return bytes(run)


def scan_signed_int(stream):
    """
    Scan a signed decimal integer, ie. 12 or -12. A leading '+' is not
    part of the grammar.

    The digits are parsed before the sign is applied, so the digits have to
    be within the positive range of a 32 bit signed integer.

    :raises TokenizationError: If the stream does not start with '-' or a
        digit.
    :raises MalformedIntegerError: If '-' is not followed by a digit or the
        value is too large.
    """
    start = stream.tell()
    negative = scan_optional(stream, b"-")
    digits = scan_while(stream, DIGITS)
    if not digits:
        stream.seek(start)
        if negative:
            raise MalformedIntegerError(
                "Expected digits after '-'", start, rest_of_stream(stream, start)
            )
        raise TokenizationError(f"Expected integer at {start}")

    value = int(digits)
    if value > INT32_MAX:
        stream.seek(start)
        raise MalformedIntegerError(
            f"Integer {digits.decode('ascii')} does not fit in 32 bits",
            start,
            rest_of_stream(stream, start),
        )
    return -value if negative else value


def scan_hex_byte(stream):
    """
    Scan exactly two hexadecimal digits, ie. 4E or 4e.

    :raises InvalidHexDigitError: If either of the next two bytes is not
        a hex digit. Nothing is consumed in that case.
    """
    start = stream.tell()
    pair = stream.read(2)
    if len(pair) != 2 or any(c not in HEX_DIGITS for c in pair):
        stream.seek(start)
        raise InvalidHexDigitError(
            f"Expected two hex digits, got {pair!r}",
            start,
            rest_of_stream(stream, start),
        )
    return int(pair, 16)


def tokenize_word(stream, word, kind):
    """
    Token combinator for fixed word tokens, ie. when the stream contains '{'
    tokenize_word(stream, b'{', TokenKind.START_GROUP) will yield
    Token(TokenKind.START_GROUP, start=0, end=1).

    :returns: Tokenizer for the given word, yielding a token
        of the given kind.
    :param word: Any word to be matched by the tokenizer.
    :param kind: The kind of token yielded by the tokenizer.
    """

    def word_tokenizer():
        scan_literal(stream, word)
        end = stream.tell()
        yield Token(kind, start=end - len(word), end=end)

    return word_tokenizer


def tokenize_start_group(stream):
    return tokenize_word(stream, b"{", TokenKind.START_GROUP)


def tokenize_end_group(stream):
    return tokenize_word(stream, b"}", TokenKind.END_GROUP)


def tokenize_newline(stream):
    """
    Tokenizer for CRLF, LF or CR, tried in that order. All three give the
    same NEWLINE token.
    """
    return one_of(
        tokenize_word(stream, b"\r\n", TokenKind.NEWLINE),
        tokenize_word(stream, b"\n", TokenKind.NEWLINE),
        tokenize_word(stream, b"\r", TokenKind.NEWLINE),
    )
