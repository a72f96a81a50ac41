"""
Tokenizers for the four kinds of control sequences, each introduced by a
backslash:

* control symbols, ie. \\* or \\~,
* control words, ie. \\par, \\b0 or \\fs-5 optionally followed by a space
  which is consumed,
* hex escapes, ie. \\'4e, which never consume a following space,
* binary runs, ie. \\bin3 followed by three raw bytes.

These overlap, so they have to be tried in the order given by
rtf_tokenizer.TOKEN_PRECEDENCE.
"""

from _rtfio.tokenizer.errors import (
    MalformedIntegerError,
    RtfFormatError,
    TokenizationError,
    TruncatedBinaryPayloadError,
)
from _rtfio.tokenizer.primitives import (
    ASCII_LETTERS,
    peek,
    rest_of_stream,
    scan_hex_byte,
    scan_literal,
    scan_optional,
    scan_signed_int,
    scan_while,
)
from _rtfio.tokenizer.token import Token


def tokenize_control_symbol(stream):
    """
    Tokenizer for a backslash followed by any single byte that is
    not an ascii letter, yields Token.control_symbol("*") for stream
    containing b"\\*".
    """

    def control_symbol_tokenizer():
        start = stream.tell()
        scan_literal(stream, b"\\")
        read_char = stream.read(1)
        if not read_char or read_char in ASCII_LETTERS:
            stream.seek(start)
            raise TokenizationError(f"Expected control symbol at {start}")
        yield Token.control_symbol(read_char.decode("latin-1"), start, stream.tell())

    return control_symbol_tokenizer


def tokenize_control_word(stream):
    """
    Tokenizer for a control word, yields Token.control_word("fs", -5) for
    stream containing b"\\fs-5 ". One space directly following the
    control word is consumed, regardless of whether there is an argument.
    """

    def control_word_tokenizer():
        start = stream.tell()
        scan_literal(stream, b"\\")
        name = scan_while(stream, ASCII_LETTERS)
        if not name:
            stream.seek(start)
            raise TokenizationError(f"Expected control word at {start}")
        try:
            arg = scan_signed_int(stream)
        except TokenizationError:
            arg = None
        except RtfFormatError:
            stream.seek(start)
            raise
        scan_optional(stream, b" ")
        yield Token.control_word(name.decode("ascii"), arg, start, stream.tell())

    return control_word_tokenizer


def tokenize_control_hexescape(stream):
    """
    Tokenizer for a hex escape, yields Token.hex_escape(0x4E) for stream
    containing b"\\'4E". A following space is part of the next token.

    Once b"\\'" has been read, the two hex digits are required.
    """

    def control_hexescape_tokenizer():
        start = stream.tell()
        scan_literal(stream, b"\\'")
        try:
            byte = scan_hex_byte(stream)
        except RtfFormatError:
            stream.seek(start)
            raise
        yield Token.hex_escape(byte, start, stream.tell())

    return control_hexescape_tokenizer


def tokenize_control_bin(stream):
    """
    Tokenizer for binary data, yields Token.control_bin(b"{}\\\\") for stream
    containing b"\\bin3 {}\\\\". The length defaults to 0 and the space
    following the length is only consumed when a length is given. The data
    is taken as is, without looking for delimiters.

    b"\\binary" is not binary data, but the control word "binary".
    """

    def control_bin_tokenizer():
        start = stream.tell()
        scan_literal(stream, b"\\bin")
        next_char = peek(stream)
        if next_char and next_char in ASCII_LETTERS:
            stream.seek(start)
            raise TokenizationError(f"Expected \\bin at {start}, found longer word")
        try:
            length = scan_signed_int(stream)
        except TokenizationError:
            length = 0
        except RtfFormatError:
            stream.seek(start)
            raise
        else:
            scan_optional(stream, b" ")

        if length < 0:
            stream.seek(start)
            raise MalformedIntegerError(
                f"Negative \\bin length {length}", start, rest_of_stream(stream, start)
            )

        data = stream.read(length)
        if len(data) != length:
            stream.seek(start)
            raise TruncatedBinaryPayloadError(
                f"Expected {length} bytes of binary data, found {len(data)}",
                start,
                rest_of_stream(stream, start),
            )
        yield Token.control_bin(data, start, stream.tell())

    return control_bin_tokenizer
