"""Column-aware scanner for highlight strings.

A highlight string is written under a line of source code and marks the
columns each expected token covers::

    struct X { field: u32 }
           |   ^---^  ^-^

This module turns such a string into ``(start, end)`` spans, lazily and in a
single left-to-right pass. Two marker conventions are supported:

``"marker"`` (default)
    ``|`` marks a zero-width point, ``^`` opens a span that is closed by
    the next ``^`` after an optional run of ``-``. A ``|`` may be followed
    by filler or another ``|`` but not by ``^``. Filler is ASCII
    whitespace or ``I``, for places where a space would be hard to see.
``"caret"``
    The older pure-caret grammar: a group of ``^`` and ``-`` delimited by
    whitespace is one span running from its first to its last ``^``.
"""

from __future__ import annotations

from typing import get_args

from highlight_spans.errors import HighlightSyntaxError
from highlight_spans.models import DEFAULT_CONVENTION, Convention, Span

# Marker alphabet
SPAN_MARKER = "^"
FILL = "-"
POINT_MARKER = "|"
ALT_FILLER = "I"

ASCII_WHITESPACE = frozenset(" \t\n\r\x0b\x0c")

CONVENTIONS: tuple[Convention, ...] = get_args(Convention)


def is_filler(char: str, convention: Convention = DEFAULT_CONVENTION) -> bool:
    """Check whether a character means "no marker here".

    Parameters
    ----------
    char : str
        A single character.
    convention : Convention
        The marker convention in use.

    Returns
    -------
    bool
        True if the character is filler under the convention.

    Examples
    --------
    >>> is_filler("I")
    True
    >>> is_filler("I", "caret")
    False
    """
    if convention == "caret":
        return char.isspace()
    return char in ASCII_WHITESPACE or char == ALT_FILLER


class Highlighter:
    """Iterator over the spans marked in a highlight string.

    The scan is lazy: each span is produced on demand from the current
    position. Once exhausted, or once a syntax error was raised, the
    iterator stays exhausted; scan the string again with a new instance.

    Parameters
    ----------
    spans : str
        The highlight string.
    convention : Convention
        Marker grammar to scan with, ``"marker"`` or ``"caret"``.

    Raises
    ------
    ValueError
        If the convention is unknown.

    Examples
    --------
    >>> list(Highlighter("^--^ |"))
    [Span(start=0, end=3), Span(start=5, end=5)]
    >>> list(Highlighter("^-^ ^^^", convention="caret"))
    [Span(start=0, end=2), Span(start=4, end=6)]
    """

    def __init__(self, spans: str, *, convention: Convention = DEFAULT_CONVENTION) -> None:
        if convention not in CONVENTIONS:
            msg = f"Unknown highlight convention: {convention!r}"
            raise ValueError(msg)
        self.text = spans
        self.convention = convention
        self._pos = 0
        self._scan = self._next_caret if convention == "caret" else self._next_marker

    def __iter__(self) -> Highlighter:
        return self

    def __next__(self) -> Span:
        span = self._scan()
        if span is None:
            raise StopIteration
        return span

    def _char_at(self, pos: int) -> str | None:
        return self.text[pos] if pos < len(self.text) else None

    def _skip_filler(self) -> None:
        text = self.text
        while self._pos < len(text) and is_filler(text[self._pos], self.convention):
            self._pos += 1

    def _error(self, reason: str, pos: int) -> HighlightSyntaxError:
        # Nothing more can be scanned after a syntax error.
        char = self._char_at(pos)
        self._pos = len(self.text)
        return HighlightSyntaxError(reason, self.text, pos, char)

    def _invalid(self, pos: int) -> HighlightSyntaxError:
        if self.convention == "caret":
            allowed = f"only {SPAN_MARKER!r}, {FILL!r} and whitespace are allowed"
        else:
            allowed = f"only {SPAN_MARKER!r}, {FILL!r}, {POINT_MARKER!r}, {ALT_FILLER!r} and whitespace are allowed"
        return self._error(f"invalid character ({allowed})", pos)

    def _next_caret(self) -> Span | None:
        """Scan one whitespace-delimited group of the pure-caret grammar."""
        text = self.text
        self._skip_filler()
        if self._pos >= len(text):
            return None

        start = self._pos
        if text[start] != SPAN_MARKER:
            if text[start] == FILL:
                raise self._error(f"span must open with {SPAN_MARKER!r}", start)
            raise self._invalid(start)

        end = start
        self._pos += 1
        while self._pos < len(text):
            char = text[self._pos]
            if is_filler(char, self.convention):
                break
            if char == SPAN_MARKER:
                end = self._pos
            elif char == FILL:
                following = self._char_at(self._pos + 1)
                if following is None or is_filler(following, self.convention):
                    raise self._error(f"unterminated span, expected {SPAN_MARKER!r}", self._pos + 1)
            else:
                raise self._invalid(self._pos)
            self._pos += 1

        return Span(start, end)

    def _next_marker(self) -> Span | None:
        """Scan one point or one ``^--^`` span of the marker grammar."""
        text = self.text
        self._skip_filler()
        if self._pos >= len(text):
            return None

        start = self._pos
        char = text[start]

        if char == POINT_MARKER:
            # A point may touch filler or another point, never a span
            if self._char_at(start + 1) == SPAN_MARKER:
                raise self._error(f"point marker followed by {SPAN_MARKER!r}, expected filler or {POINT_MARKER!r}", start + 1)
            self._pos = start + 1
            return Span(start, start)

        if char == FILL:
            raise self._error(f"fill outside of a span, expected {SPAN_MARKER!r} or {POINT_MARKER!r}", start)

        if char != SPAN_MARKER:
            raise self._invalid(start)

        # Fill run; its length does not affect the span
        pos = start + 1
        while pos < len(text) and text[pos] == FILL:
            pos += 1

        closing = self._char_at(pos)
        if closing != SPAN_MARKER:
            if closing is None or closing == POINT_MARKER or is_filler(closing, self.convention):
                raise self._error(f"unterminated span, expected {SPAN_MARKER!r}", pos)
            raise self._invalid(pos)

        self._pos = pos + 1
        return Span(start, pos)


def highlight(spans: str, *, convention: Convention = DEFAULT_CONVENTION) -> Highlighter:
    """Create a lazy span iterator over a highlight string.

    Parameters
    ----------
    spans : str
        The highlight string.
    convention : Convention
        Marker grammar to scan with.

    Returns
    -------
    Highlighter
        Single-use iterator of spans in left-to-right order.

    Examples
    --------
    >>> hl = highlight("II^^^^")
    >>> next(hl)
    Span(start=2, end=3)
    >>> next(hl)
    Span(start=4, end=5)
    """
    return Highlighter(spans, convention=convention)


def scan_spans(spans: str, *, convention: Convention = DEFAULT_CONVENTION) -> list[Span]:
    """Scan a whole highlight string into a list of spans.

    Parameters
    ----------
    spans : str
        The highlight string.
    convention : Convention
        Marker grammar to scan with.

    Returns
    -------
    list[Span]
        All spans in left-to-right order.

    Raises
    ------
    HighlightSyntaxError
        If the string is malformed anywhere.

    Examples
    --------
    >>> scan_spans("|||")
    [Span(start=0, end=0), Span(start=1, end=1), Span(start=2, end=2)]
    """
    return list(Highlighter(spans, convention=convention))
