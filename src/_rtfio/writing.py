import io
import pathlib
from functools import wraps

from _rtfio.tokenizer.primitives import ASCII_LETTERS, INT32_MAX
from _rtfio.tokenizer.rtf_tokenizer import text_stop_offsets
from _rtfio.tokenizer.token import Token
from _rtfio.tokenizer.token_kind import TokenKind


class RtfWriteError(Exception):
    pass


def takes_stream(i, mode):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode) as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def check_valid_control_word(token):
    if token.is_hex_escape:
        if not isinstance(token.arg, int) or not 0 <= token.arg <= 0xFF:
            raise RtfWriteError(
                f"Hex escapes must have a byte value as argument, found {token.arg}"
            )
        return
    name = token.value
    if not isinstance(name, str) or not name:
        raise RtfWriteError(f"Control words must have a non-empty name, found {name!r}")
    if not name.isascii() or any(c not in ASCII_LETTERS for c in name.encode("ascii")):
        raise RtfWriteError(
            f"Control word names can only contain ascii letters, found '{name}'"
        )
    if name == "bin":
        raise RtfWriteError("\\bin is binary data, write it as a CONTROL_BIN token")
    if token.arg is not None and (
        not isinstance(token.arg, int) or abs(token.arg) > INT32_MAX
    ):
        raise RtfWriteError(
            f"Control word arguments must be 32 bit integers, found {token.arg}"
        )


def check_valid_token(token):
    """
    Check that the token is written such that it is read back as the
    same token.
    """
    if not isinstance(token, Token):
        raise RtfWriteError(f"Can only write tokens, found {token!r}")
    if token.kind == TokenKind.CONTROL_SYMBOL:
        symbol = token.value
        if (
            not isinstance(symbol, str)
            or len(symbol) != 1
            or ord(symbol) > 0xFF
            or symbol.encode("latin-1") in ASCII_LETTERS
            or symbol == "'"
        ):
            raise RtfWriteError(
                f"Control symbols must be a single non-letter character, found {symbol!r}"
            )
    elif token.kind == TokenKind.CONTROL_WORD:
        check_valid_control_word(token)
    elif token.kind == TokenKind.CONTROL_BIN:
        if not isinstance(token.value, bytes):
            raise RtfWriteError(f"Binary data must be bytes, found {token.value!r}")
    elif token.kind == TokenKind.TEXT:
        if not isinstance(token.value, bytes) or not token.value:
            raise RtfWriteError(f"Text must be non-empty bytes, found {token.value!r}")
        if text_stop_offsets(token.value).size:
            raise RtfWriteError(
                "Text cannot contain backslash, braces or line endings, "
                f"found {token.value!r}"
            )


@takes_stream(0, "wb")
def write(file_stream, tokens):
    """
    Writes the given tokens to the file.

    A space is written between a control word and following text, see
    delimiter_between. Newlines are written as CRLF.

    :param file_stream: A file-like object, (string to path, pathlib.Path or
        opened binary stream).
    :param tokens: Iterable of tokens.
    """
    previous = None
    for token in tokens:
        check_valid_token(token)
        if previous is not None:
            file_stream.write(previous.delimiter_after(token))
        file_stream.write(token.to_bytes())
        previous = token


def serialize(tokens):
    """
    :returns: The rtf bytes for the given tokens, see write.
    """
    stream = io.BytesIO()
    write(stream, tokens)
    return stream.getvalue()
