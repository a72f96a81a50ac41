import pathlib
from contextlib import contextmanager

import _rtfio.tokenizer as rtftok


def read(filelike, strict=True):
    """
    Reads a rtf file and returns the list of tokens,
    ie. tokens = read("/my/file.rtf")

    :param filelike: A file-like object, (string to path, pathlib.Path,
        opened binary stream or bytes).
    :param strict: Whether a malformed token raises, see
        _rtfio.tokenizer.tokenize.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rb") as file_stream:
            return rtftok.tokenize(file_stream, strict=strict)
    return rtftok.tokenize(filelike, strict=strict)


@contextmanager
def lazy_read(filelike):
    """
    Context manager giving an iterator of the tokens in the given
    rtf file. Tokens are produced as the iterator is consumed, and a
    malformed token raises a RtfFormatError at that point.

    >>> with lazy_read("/my/file.rtf") as tokens:
    ...     first = next(tokens)

    """
    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rb")

    try:
        yield iter(rtftok.RtfTokenizer(file_stream))
    finally:
        if did_open:
            file_stream.close()
