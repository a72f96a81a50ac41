import warnings

import pytest
from hypothesis import given

import rtfio
from _rtfio.grouping import Document, Group, GroupBalanceWarning, group
from _rtfio.tokenizer import Token

from .generators.rtf_contents import token_lists


def test_group_nested():
    document = group(rtfio.tokenize(b"{\\rtf1 {\\b bold} plain}"))
    (outer,) = document.contents
    assert outer.closed
    assert outer.contents == (
        Token.control_word("rtf", 1),
        Group(
            Token.start_group(),
            (Token.control_word("b"), Token.text(b"bold")),
            Token.end_group(),
        ),
        Token.text(b" plain"),
    )


def test_group_empty():
    assert group([]) == Document(())
    assert group([Token.start_group(), Token.end_group()]).groups == (
        Group(Token.start_group(), (), Token.end_group()),
    )


def test_balanced_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        group(rtfio.tokenize(b"{a{b}{c{d}}}"))


def test_unmatched_end_group_is_kept():
    tokens = rtfio.tokenize(b"{a}}b")
    with pytest.warns(GroupBalanceWarning, match="at 3"):
        document = group(tokens)
    assert document.contents == (
        Group(Token.start_group(), (Token.text(b"a"),), Token.end_group()),
        Token.end_group(),
        Token.text(b"b"),
    )


def test_unclosed_groups_are_closed():
    tokens = rtfio.tokenize(b"{a{b")
    with pytest.warns(GroupBalanceWarning, match="2 groups"):
        document = group(tokens)
    (outer,) = document.groups
    assert not outer.closed
    assert outer.contents[0] == Token.text(b"a")
    inner = outer.contents[1]
    assert not inner.closed
    assert inner.contents == (Token.text(b"b"),)


def test_group_keeps_offsets():
    document = group(rtfio.tokenize(b"x{y}"))
    assert document.groups[0].start.start == 1
    assert document.groups[0].end.start == 3


@given(token_lists)
def test_group_is_lossless(tokens):
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", GroupBalanceWarning)
        document = group(tokens)
    assert list(document.tokens()) == tokens
