"""
In this module, a tokenizer is a generator that takes a stream and generates
tokens. If an error occurs, the function winds back the stream to the position
to where it started generating and raises an Error.

Token combinator is any function which returns a tokenizer.

Rtf control sequences overlap (\\'4e looks like the control symbol \\' and
\\bin5 looks like the control word bin), so tokenizers are tried in a fixed
order, see rtf_tokenizer.TOKEN_PRECEDENCE. Only one token is backtracked at
a time, so there is no bookkeeping of backtracking points.

Two kinds of errors are raised. TokenizationError means that the token
was not found, and the next tokenizer is tried. RtfFormatError means that
the token was found but is malformed, ie. an integer argument too large for
32 bits, and stops tokenization.

Tokenizers work on byte streams only. Text is not decoded, as the encoding
is given by control words which are not interpreted here.
"""

from .rtf_tokenizer import RtfTokenizer, next_token, tokenize
from .token import Token, delimiter_between
from .token_kind import TokenKind

__all__ = [
    "RtfTokenizer",
    "Token",
    "TokenKind",
    "delimiter_between",
    "next_token",
    "tokenize",
]
