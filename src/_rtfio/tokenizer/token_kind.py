from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    CONTROL_SYMBOL = auto()
    CONTROL_WORD = auto()
    CONTROL_BIN = auto()
    TEXT = auto()
    START_GROUP = auto()
    END_GROUP = auto()
    NEWLINE = auto()

    @classmethod
    def delimiters(cls):
        return {
            cls.START_GROUP: b"{",
            cls.END_GROUP: b"}",
            cls.NEWLINE: b"\r\n",
        }
