import rtfio.version
from _rtfio.grouping import Document, Group, GroupBalanceWarning, group
from _rtfio.reading import lazy_read, read
from _rtfio.tokenizer import Token, TokenKind, delimiter_between, next_token, tokenize
from _rtfio.tokenizer.errors import (
    IncompleteTokenizationError,
    InvalidHexDigitError,
    MalformedIntegerError,
    RtfFormatError,
    TruncatedBinaryPayloadError,
    UnrecognizedInputError,
    WrongFileModeError,
)
from _rtfio.writing import RtfWriteError, serialize, write

__author__ = """Equinor"""
__email__ = "fg_sib-scout@equinor.com"

__version__ = rtfio.version.version

__all__ = [
    "Document",
    "Group",
    "GroupBalanceWarning",
    "IncompleteTokenizationError",
    "InvalidHexDigitError",
    "MalformedIntegerError",
    "RtfFormatError",
    "RtfWriteError",
    "Token",
    "TokenKind",
    "TruncatedBinaryPayloadError",
    "UnrecognizedInputError",
    "WrongFileModeError",
    "delimiter_between",
    "group",
    "lazy_read",
    "next_token",
    "read",
    "serialize",
    "tokenize",
    "write",
]
