"""Drawing spans back into highlight strings.

This is the inverse of the scanner. It is used to build readable failure
messages and to generate highlight strings from known-good parser output.
"""

from __future__ import annotations

from collections.abc import Iterable

from highlight_spans.models import DEFAULT_CONVENTION, Convention
from highlight_spans.scanner import FILL, POINT_MARKER, SPAN_MARKER


def render_spans(
    spans: Iterable[tuple[int, int]],
    *,
    width: int | None = None,
    convention: Convention = DEFAULT_CONVENTION,
) -> str:
    """Draw a highlight string marking the given spans.

    Parameters
    ----------
    spans : Iterable[tuple[int, int]]
        Inclusive ``(start, end)`` spans, sorted and non-overlapping.
    width : int | None
        Pad the result with spaces to this width.
    convention : Convention
        Marker grammar to draw with. Under ``"caret"`` points are drawn as
        ``^`` and spans must be separated by at least one column. Under
        ``"marker"`` a span may not start right after a point.

    Returns
    -------
    str
        A highlight string that scans back to the same spans.

    Raises
    ------
    ValueError
        If spans are unordered, overlapping, inverted, cannot be told apart
        under the convention, or do not fit in ``width``.

    Examples
    --------
    >>> render_spans([(0, 3), (5, 5)])
    '^--^ |'
    >>> render_spans([(1, 2)], width=5)
    ' ^^  '
    >>> render_spans([(0, 0), (2, 4)], convention="caret")
    '^ ^-^'
    """
    line = ""
    for start, end in spans:
        if start < 0 or end < start:
            msg = f"Invalid span: [{start}, {end}]"
            raise ValueError(msg)
        if start < len(line):
            msg = f"Span [{start}, {end}] overlaps or precedes a previous span"
            raise ValueError(msg)
        if convention == "caret" and line and start == len(line):
            msg = f"Span [{start}, {end}] touches the previous span and would merge with it"
            raise ValueError(msg)
        if convention == "marker" and line.endswith(POINT_MARKER) and start == len(line) and start != end:
            msg = f"Span [{start}, {end}] directly follows a point and cannot be drawn"
            raise ValueError(msg)

        line += " " * (start - len(line))
        if start == end:
            line += SPAN_MARKER if convention == "caret" else POINT_MARKER
        else:
            line += SPAN_MARKER + FILL * (end - start - 1) + SPAN_MARKER

    if width is not None:
        if width < len(line):
            msg = f"Highlight needs {len(line)} columns but width is {width}"
            raise ValueError(msg)
        line = line.ljust(width)

    return line


def extract_spans(source: str, spans: Iterable[tuple[int, int]]) -> list[str]:
    """Return the source text covered by each inclusive span.

    Examples
    --------
    >>> extract_spans("struct X { field: u32 }", [(0, 5), (11, 15)])
    ['struct', 'field']
    """
    return [source[start : end + 1] for start, end in spans]
