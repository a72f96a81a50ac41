from dataclasses import dataclass, field
from typing import Optional, Union

from _rtfio.tokenizer.token_kind import TokenKind

# Name of the control word produced for \'hh escapes.
HEX_ESCAPE_NAME = "'"


@dataclass(frozen=True)
class Token:
    """
    A token in a rtf file.

    The value depends on the kind of token: the symbol character for
    CONTROL_SYMBOL, the name for CONTROL_WORD, the payload bytes for
    CONTROL_BIN and TEXT and None for the delimiters. Only CONTROL_WORD
    tokens have an arg.

    start and end are the byte offsets the token was read from, and are not
    considered when comparing tokens.
    """

    kind: TokenKind
    value: Union[str, bytes, None] = None
    arg: Optional[int] = None
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)

    @classmethod
    def control_symbol(cls, symbol, start=0, end=0):
        return cls(TokenKind.CONTROL_SYMBOL, symbol, None, start, end)

    @classmethod
    def control_word(cls, name, arg=None, start=0, end=0):
        return cls(TokenKind.CONTROL_WORD, name, arg, start, end)

    @classmethod
    def hex_escape(cls, byte, start=0, end=0):
        return cls(TokenKind.CONTROL_WORD, HEX_ESCAPE_NAME, byte, start, end)

    @classmethod
    def control_bin(cls, data, start=0, end=0):
        return cls(TokenKind.CONTROL_BIN, bytes(data), None, start, end)

    @classmethod
    def text(cls, data, start=0, end=0):
        return cls(TokenKind.TEXT, bytes(data), None, start, end)

    @classmethod
    def start_group(cls, start=0, end=0):
        return cls(TokenKind.START_GROUP, start=start, end=end)

    @classmethod
    def end_group(cls, start=0, end=0):
        return cls(TokenKind.END_GROUP, start=start, end=end)

    @classmethod
    def newline(cls, start=0, end=0):
        return cls(TokenKind.NEWLINE, start=start, end=end)

    @property
    def name(self):
        if self.kind == TokenKind.CONTROL_WORD:
            return self.value
        return None

    @property
    def symbol(self):
        if self.kind == TokenKind.CONTROL_SYMBOL:
            return self.value
        return None

    @property
    def data(self):
        """
        :returns: The payload of CONTROL_BIN and TEXT tokens, None otherwise.
        """
        if self.kind in (TokenKind.CONTROL_BIN, TokenKind.TEXT):
            return self.value
        return None

    @property
    def is_hex_escape(self):
        return self.kind == TokenKind.CONTROL_WORD and self.value == HEX_ESCAPE_NAME

    def to_bytes(self):
        """
        :returns: The canonical rtf encoding of the token. Newlines are
            always encoded as CRLF, whatever line ending they were read from.
        """
        if self.kind == TokenKind.CONTROL_SYMBOL:
            return b"\\" + self.value.encode("latin-1")
        if self.is_hex_escape:
            return b"\\'" + f"{self.arg:02x}".encode("ascii")
        if self.kind == TokenKind.CONTROL_WORD:
            word = b"\\" + self.value.encode("ascii")
            if self.arg is not None:
                word += str(self.arg).encode("ascii")
            return word
        if self.kind == TokenKind.CONTROL_BIN:
            return b"\\bin" + str(len(self.value)).encode("ascii") + b" " + self.value
        if self.kind == TokenKind.TEXT:
            return self.value
        return TokenKind.delimiters()[self.kind]

    def delimiter_after(self, next_token):
        """
        :returns: The bytes that have to be written between this token and
            next_token for the pair to tokenize the same way again, see
            delimiter_between.
        """
        return delimiter_between(self, next_token)

    def delimiter_before(self, previous_token):
        return delimiter_between(previous_token, self)

    def __str__(self):
        if self.kind == TokenKind.CONTROL_WORD:
            arg = "" if self.arg is None else f":{self.arg}"
            return f"ControlWord({self.value}{arg})"
        if self.kind == TokenKind.CONTROL_SYMBOL:
            return f"ControlSymbol({self.value})"
        if self.kind in (TokenKind.CONTROL_BIN, TokenKind.TEXT):
            prefix = "ControlBin" if self.kind == TokenKind.CONTROL_BIN else "Text"
            return f"{prefix}({self.value.hex(' ')})"
        return self.kind.name.title().replace("_", "")


def delimiter_between(token, next_token):
    """
    Control words must be delimited by a non-alphanumeric value, so a space
    is inserted whenever a control word is followed by text. The space is
    absorbed by the control word when tokenizing again. Checking whether the
    text actually starts with a letter, digit or space is not done, as an
    unneeded space is harmless.

    Hex escapes have a fixed length and never absorb a following space, so
    they are not delimited.

    :returns: b" " if a delimiter is required, b"" otherwise.
    """
    if (
        token.kind == TokenKind.CONTROL_WORD
        and not token.is_hex_escape
        and next_token.kind == TokenKind.TEXT
    ):
        return b" "
    return b""
