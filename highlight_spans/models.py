"""Data models for highlight-string testing.

This module defines spans, the token contract expected from a parser under
test, and a minimal concrete token for callers without their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, NamedTuple, Protocol

Convention = Literal["caret", "marker"]

# "marker" supports point markers and the alternate filler; "caret" is the
# older pure-caret grammar.
DEFAULT_CONVENTION: Convention = "marker"


class Span(NamedTuple):
    """An inclusive ``(start, end)`` character range in the annotated source.

    Parameters
    ----------
    start : int
        Column of the opening marker (0-indexed).
    end : int
        Column of the closing marker, inclusive. Equal to ``start`` for a
        zero-width point.

    Examples
    --------
    >>> Span(3, 7) == (3, 7)
    True
    >>> Span(4, 4).is_point
    True
    """

    start: int
    end: int

    @property
    def is_point(self) -> bool:
        """Whether the span marks a single position."""
        return self.start == self.end

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


class TokenLike(Protocol):
    """Read-only accessors a parser token must expose to be compared."""

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...

    @property
    def rule(self) -> Any: ...


@dataclass(frozen=True)
class Token:
    """A token with a rule tag and column span.

    Parameters
    ----------
    start : int
        Inclusive start column (0-indexed).
    end : int
        Inclusive end column.
    rule : Any
        The rule or category the token was produced by.
    text : str | None
        The matched source text, used only in failure messages.

    Examples
    --------
    >>> token = Token(start=0, end=5, rule="keyword", text="struct")
    >>> token.start, token.end
    (0, 5)
    """

    start: int
    end: int
    rule: Any
    text: str | None = None
