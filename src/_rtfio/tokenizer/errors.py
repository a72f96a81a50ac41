class TokenizationError(Exception):
    """
    A tokenizer will throw a TokenizationError if the expected token
    is not found at the start of the stream (however, it could be that
    any other valid rtf token not covered by that tokenizer is at the
    start of the stream).
    """

    pass


class RtfFormatError(Exception):
    """
    Raised when the stream is recognized as the start of a token, but the
    token is malformed. Unlike TokenizationError, it is not caught by the
    combinators, so no other alternative is tried at that position.
    """

    def __init__(self, message, offset, remaining=b""):
        """
        :param message: Description of the problem.
        :param offset: Byte offset into the input where the token started.
        :param remaining: The unconsumed input, starting at offset.
        """
        super().__init__(f"{message} at {offset}")
        self.offset = offset
        self.remaining = remaining


class MalformedIntegerError(RtfFormatError):
    """
    Raised for a sign with no digits, a digit run outside of the signed 32 bit
    range, or a negative \\bin length.
    """

    pass


class InvalidHexDigitError(RtfFormatError):
    """
    Raised when the argument of a \\' escape is not two hex digits.
    """

    pass


class TruncatedBinaryPayloadError(RtfFormatError):
    """
    Raised when a \\bin token declares more bytes than there are left.
    """

    pass


class UnrecognizedInputError(RtfFormatError):
    """
    Raised when no tokenizer, including the text tokenizer, can consume
    anything at the given offset.
    """

    pass


class IncompleteTokenizationError(RtfFormatError):
    """
    Raised by tokenize when tokenization stopped before the end of the
    input. The tokens produced up to that point are available as
    tokens and the error that stopped tokenization as reason.
    """

    def __init__(self, tokens, reason, offset, remaining):
        """
        :param tokens: The tokens read before tokenization stopped.
        :param reason: The RtfFormatError that stopped tokenization.
        :param offset: Offset of the first byte not tokenized.
        :param remaining: The bytes not tokenized.
        """
        Exception.__init__(
            self, f"Tokenization stopped after {len(tokens)} tokens: {reason}"
        )
        self.offset = offset
        self.remaining = remaining
        self.tokens = tokens
        self.reason = reason


class WrongFileModeError(Exception):
    """
    Thrown when a rtf file is opened in text mode.
    """

    pass
