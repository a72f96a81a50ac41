import io
import warnings

import numpy as np

from _rtfio.tokenizer.combinators import one_of, repeated
from _rtfio.tokenizer.directives import (
    tokenize_control_bin,
    tokenize_control_hexescape,
    tokenize_control_symbol,
    tokenize_control_word,
)
from _rtfio.tokenizer.errors import (
    IncompleteTokenizationError,
    RtfFormatError,
    TokenizationError,
    UnrecognizedInputError,
    WrongFileModeError,
)
from _rtfio.tokenizer.primitives import (
    rest_of_stream,
    tokenize_end_group,
    tokenize_newline,
    tokenize_start_group,
)
from _rtfio.tokenizer.token import Token

# Bytes that end a run of text, see "Conventions of an RTF Reader" in the
# RTF specification.
TEXT_STOP_BYTES = np.frombuffer(b"\\{}\r\n", dtype=np.uint8)


def text_stop_offsets(data):
    """
    :returns: Sorted array of the offsets in data of all bytes in
        TEXT_STOP_BYTES.
    """
    buffer = np.frombuffer(data, dtype=np.uint8)
    return np.flatnonzero(np.isin(buffer, TEXT_STOP_BYTES))


def tokenize_text(stream):
    """
    Tokenizer for the longest non-empty run of bytes not containing
    any of TEXT_STOP_BYTES, yields Token.text(b"Hello ") for stream
    containing b"Hello {".

    The stop bytes of the whole stream are located when the tokenizer is
    created, so each run is found by a binary search.
    """
    data = stream.getvalue()
    stops = text_stop_offsets(data)
    size = len(data)

    def text_tokenizer():
        start = stream.tell()
        index = np.searchsorted(stops, start)
        end = int(stops[index]) if index < len(stops) else size
        if end <= start:
            raise TokenizationError(f"Expected text at {start}")
        yield Token.text(stream.read(end - start), start, end)

    return text_tokenizer


# The order is important: \' is a control symbol unless tried as a hex
# escape first, and \bin is a control word unless tried as binary data
# first. Text is everything that is not something else, so it comes last.
TOKEN_PRECEDENCE = (
    tokenize_control_hexescape,
    tokenize_control_symbol,
    tokenize_control_bin,
    tokenize_control_word,
    tokenize_start_group,
    tokenize_end_group,
    tokenize_newline,
    tokenize_text,
)


def as_byte_stream(data):
    """
    :param data: bytes-like object or binary stream.
    :returns: A BytesIO containing all of data.
    """
    if hasattr(data, "read"):
        data = data.read()
    if isinstance(data, str):
        raise WrongFileModeError("Rtf has to be tokenized from bytes, got str.")
    return io.BytesIO(bytes(data))


class RtfTokenizer:
    """
    The rtf tokenizer is an iterable of tokens for the given rtf contents.

    >>> [str(t) for t in RtfTokenizer(b"{\\\\b bold}")]
    ['StartGroup', 'ControlWord(b)', 'Text(62 6f 6c 64)', 'EndGroup']

    Iteration stops with an RtfFormatError if a malformed token is found,
    in which case stream is positioned at the start of that token.
    """

    def __init__(self, data):
        """
        :param data: bytes-like object or binary stream containing rtf. A
            stream is read to its end, as tokenizing binary data requires
            looking ahead.
        """
        self.stream = as_byte_stream(data)
        self.tokenize_token = one_of(
            *[tokenizer(self.stream) for tokenizer in TOKEN_PRECEDENCE]
        )

    def __iter__(self):
        return self.tokenize_rtf_file()

    def tokenize_rtf_file(self):
        yield from repeated(self.tokenize_token)()
        yield from self.tokenize_end_of_file()

    def tokenize_end_of_file(self):
        start = self.stream.tell()
        r = self.stream.read(1)
        if r:
            self.stream.seek(start)
            raise UnrecognizedInputError(
                f"No token starts with {r!r}", start, self.remaining()
            )
        return iter([])

    def remaining(self):
        """
        :returns: The bytes not yet tokenized.
        """
        return rest_of_stream(self.stream, self.stream.tell())


def next_token(data):
    """
    Tokenize the first token of data.

    :param data: bytes-like object or binary stream.
    :returns: Tuple of the first token and the bytes following it.
    :raises UnrecognizedInputError: If no token could be read, ie. when data
        is empty or is a single backslash.
    :raises RtfFormatError: If the first token is malformed.
    """
    tokenizer = RtfTokenizer(data)
    try:
        token = next(tokenizer.tokenize_token())
    except TokenizationError as err:
        raise UnrecognizedInputError(
            "No token could be read", 0, tokenizer.remaining()
        ) from err
    return token, tokenizer.remaining()


def tokenize(data, strict=True):
    """
    Tokenize all of data.

    :param data: bytes-like object or binary stream.
    :param strict: When True, failing to tokenize all of data raises
        IncompleteTokenizationError. When False, a warning is emitted
        instead and the tokens read up to the failure are returned.
    :returns: list of tokens.
    """
    tokenizer = RtfTokenizer(data)
    tokens = []
    try:
        for token in tokenizer:
            tokens.append(token)
    except RtfFormatError as err:
        incomplete = IncompleteTokenizationError(
            tokens, err, tokenizer.stream.tell(), tokenizer.remaining()
        )
        if strict:
            raise incomplete from err
        warnings.warn(
            f"{incomplete}, ignoring {len(incomplete.remaining)} trailing bytes",
            stacklevel=2,
        )
    return tokens
