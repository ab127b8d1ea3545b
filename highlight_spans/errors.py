"""Exceptions raised for malformed highlight strings and token mismatches."""

from __future__ import annotations

from typing import Any

from highlight_spans.models import Span


class HighlightSyntaxError(ValueError):
    """A highlight string does not follow the marker grammar.

    Parameters
    ----------
    reason : str
        Short description of the violation.
    highlight : str
        The highlight string being scanned.
    position : int
        Column of the offending character, or ``len(highlight)`` when the
        string ended too early.
    char : str | None
        The offending character, or None at end of input.

    Examples
    --------
    >>> err = HighlightSyntaxError("invalid character", "^-x", 2, "x")
    >>> print(err)
    Wrong highlight string: invalid character, found 'x' at position 2
        ^-x
          ^
    """

    def __init__(self, reason: str, highlight: str, position: int, char: str | None) -> None:
        self.reason = reason
        self.highlight = highlight
        self.position = position
        self.char = char
        found = repr(char) if char is not None else "end of input"
        pointer = "".join("\t" if c == "\t" else " " for c in highlight[:position]) + "^"
        msg = f"Wrong highlight string: {reason}, found {found} at position {position}\n    {highlight}\n    {pointer}"
        super().__init__(msg)


class TokenMismatchError(AssertionError):
    """Base class for actual tokens diverging from the expectation."""


class LengthMismatchError(TokenMismatchError):
    """The token count differs from the expected rule or span count."""


class RuleMismatchError(TokenMismatchError):
    """A token carries a different rule than expected.

    Attributes
    ----------
    expected : Any
        The expected rule.
    actual : Any
        The rule on the token.
    position : int
        Start column of the offending token.
    """

    def __init__(self, msg: str, *, expected: Any, actual: Any, position: int) -> None:
        super().__init__(msg)
        self.expected = expected
        self.actual = actual
        self.position = position


class SpanMismatchError(TokenMismatchError):
    """A token covers different columns than its highlight span.

    Attributes
    ----------
    rule : Any
        The rule shared by the token and the expectation.
    expected : Span
        The span drawn in the highlight string.
    actual : Span
        The span of the token, normalized to an inclusive end.
    """

    def __init__(self, msg: str, *, rule: Any, expected: Span, actual: Span) -> None:
        super().__init__(msg)
        self.rule = rule
        self.expected = expected
        self.actual = actual
