from _rtfio.tokenizer.errors import TokenizationError


def one_of(*tokenizers):
    """
    Combinator for tokenizers.

    Only TokenizationError causes the next tokenizer to be tried. A
    RtfFormatError means the input was recognized but malformed, and is
    propagated.

    :param tokenizers: List of tokenizers, in order of precedence.
    :returns: A tokenizer that yields tokens from the
    first tokenizer in tokenizers that succeeds.
    """

    def one_of_tokenizer():
        did_yield = False
        errors = []
        for tok in tokenizers:
            try:
                yield from tok()
                did_yield = True
                break
            except TokenizationError as err:
                errors.append(str(err))

        if not did_yield:
            raise TokenizationError(
                "Tokenization failed, due to one of\n*" + ("\n*".join(errors))
            )

    return one_of_tokenizer


def repeated(tokenizer):
    """
    Combinator for tokenizer.
    :param tokenizer: Any tokenizer.
    :returns: Tokenizer that applies the tokenizer zero or more times, until it
        fails.
    """

    def repeated_tokenizer():
        try:
            while True:
                yield from tokenizer()
        except TokenizationError:
            pass

    return repeated_tokenizer
