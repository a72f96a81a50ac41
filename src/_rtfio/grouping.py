"""
Grouping folds the flat list of tokens from the tokenizer (see
_rtfio.tokenizer) into nested groups, one for each pair of braces.

Real world rtf files do not always have balanced braces, so grouping never
fails. An end of group with no open group is kept as a token, and groups
still open at the end of input are closed implicitly. Both cases emit a
GroupBalanceWarning.
"""

import warnings
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from _rtfio.tokenizer.token import Token
from _rtfio.tokenizer.token_kind import TokenKind


class GroupBalanceWarning(UserWarning):
    """
    Emitted when braces are not balanced.
    """

    pass


@dataclass(frozen=True)
class Group:
    """
    The tokens between a START_GROUP token and its END_GROUP token. If the
    group was never closed, end is None.
    """

    start: Token
    contents: Tuple[Union[Token, "Group"], ...]
    end: Optional[Token] = None

    @property
    def closed(self):
        return self.end is not None

    def tokens(self):
        yield self.start
        yield from flatten(self.contents)
        if self.end is not None:
            yield self.end


@dataclass(frozen=True)
class Document:
    """
    The top level contents of a rtf file. A well-formed file contains a
    single group.
    """

    contents: Tuple[Union[Token, Group], ...]

    @property
    def groups(self):
        return tuple(c for c in self.contents if isinstance(c, Group))

    def tokens(self):
        """
        :returns: Iterator of the tokens the document was grouped from.
        """
        return flatten(self.contents)


def flatten(contents):
    for item in contents:
        if isinstance(item, Group):
            yield from item.tokens()
        else:
            yield item


def group(tokens):
    """
    Group the given tokens.

    >>> document = group(tokenize(b"{\\\\rtf1 {\\\\b bold}}"))
    >>> [len(g.contents) for g in document.groups]
    [2]

    :param tokens: Iterable of tokens.
    :returns: Document of the tokens.
    """
    open_groups = []
    contents = []
    for token in tokens:
        if token.kind == TokenKind.START_GROUP:
            open_groups.append((token, contents))
            contents = []
        elif token.kind == TokenKind.END_GROUP:
            if open_groups:
                start, enclosing = open_groups.pop()
                enclosing.append(Group(start, tuple(contents), token))
                contents = enclosing
            else:
                warnings.warn(
                    f"End of group at {token.start} has no matching start of group",
                    GroupBalanceWarning,
                    stacklevel=2,
                )
                contents.append(token)
        else:
            contents.append(token)

    if open_groups:
        warnings.warn(
            f"{len(open_groups)} groups were not closed before end of input, "
            f"the outermost starting at {open_groups[0][0].start}",
            GroupBalanceWarning,
            stacklevel=2,
        )
    while open_groups:
        start, enclosing = open_groups.pop()
        enclosing.append(Group(start, tuple(contents)))
        contents = enclosing

    return Document(tuple(contents))
