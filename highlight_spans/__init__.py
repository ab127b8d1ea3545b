"""Highlight-string assertions for tokenizer and parser tests.

This library lets a test draw the expected tokens of a source line as a
second, aligned line of markers, and compares a parser's actual tokens
against that drawing.

Examples
--------
>>> from highlight_spans import Token, check_tokens, scan_spans

>>> # Scan a highlight string into inclusive (start, end) spans
>>> scan_spans("^--^ |")
[Span(start=0, end=3), Span(start=5, end=5)]

>>> # Compare tokens against expected rules and a drawing
>>> source = "let x = 42"
>>> marks  = "^-^ | | ^^"
>>> tokens = [
...     Token(0, 2, "keyword"),
...     Token(4, 4, "ident"),
...     Token(6, 6, "op"),
...     Token(8, 9, "number"),
... ]
>>> check_tokens(tokens, ["keyword", "ident", "op", "number"], marks)
True
"""

from highlight_spans.compare import check_tokens
from highlight_spans.errors import (
    HighlightSyntaxError,
    LengthMismatchError,
    RuleMismatchError,
    SpanMismatchError,
    TokenMismatchError,
)
from highlight_spans.models import DEFAULT_CONVENTION, Convention, Span, Token, TokenLike
from highlight_spans.render import extract_spans, render_spans
from highlight_spans.scanner import Highlighter, highlight, scan_spans

__all__ = [
    "DEFAULT_CONVENTION",
    "Convention",
    "HighlightSyntaxError",
    "Highlighter",
    "LengthMismatchError",
    "RuleMismatchError",
    "Span",
    "SpanMismatchError",
    "Token",
    "TokenLike",
    "TokenMismatchError",
    "check_tokens",
    "extract_spans",
    "highlight",
    "render_spans",
    "scan_spans",
]
