"""Tests for the highlight-string scanner."""

import pytest

from highlight_spans import HighlightSyntaxError, Highlighter, Span, highlight, scan_spans
from highlight_spans.scanner import is_filler


class TestMarkerConvention:
    """Point markers, caret pairs and the alternate filler."""

    @pytest.mark.parametrize(
        ("spans", "expected"),
        [
            ("", []),
            ("    ", []),
            ("|", [(0, 0)]),
            ("|||", [(0, 0), (1, 1), (2, 2)]),
            ("^^", [(0, 1)]),
            ("^^^^", [(0, 1), (2, 3)]),
            ("^--^^^", [(0, 3), (4, 5)]),
            ("II^^^^", [(2, 3), (4, 5)]),
            ("^--^ ^--^", [(0, 3), (5, 8)]),
            ("  | ^-^\t|  ", [(2, 2), (4, 6), (8, 8)]),
            ("IIIII|", [(5, 5)]),
        ],
    )
    def test_scan(self, spans: str, expected: list[tuple[int, int]]) -> None:
        """Test concrete highlight strings."""
        assert scan_spans(spans) == expected

    @pytest.mark.parametrize("fill", [0, 1, 3, 10])
    def test_fill_length_is_irrelevant(self, fill: int) -> None:
        """Only the open and close markers decide the span."""
        spans = "  ^" + "-" * fill + "^"
        assert scan_spans(spans) == [(2, 3 + fill)]

    def test_lone_point_after_filler(self) -> None:
        """A point marker at p yields (p, p)."""
        assert scan_spans("       |") == [(7, 7)]

    def test_spans_are_span_tuples(self) -> None:
        """Scanned items are Span instances."""
        span = scan_spans("^-^")[0]
        assert isinstance(span, Span)
        assert span.start == 0
        assert span.end == 2
        assert not span.is_point

    @pytest.mark.parametrize(
        "spans",
        ["^", "^-", "^--", "^-- ", "^--I", "^ ^", "^|", "^-|", "^^^"],
    )
    def test_unterminated_span(self, spans: str) -> None:
        """An opened span must be closed by another caret."""
        with pytest.raises(HighlightSyntaxError, match="unterminated span"):
            scan_spans(spans)

    @pytest.mark.parametrize(
        ("spans", "position"),
        [("|^^", 1), ("|^-^", 1), ("  ||^-^|", 4), ("|^", 1)],
    )
    def test_point_followed_by_span(self, spans: str, position: int) -> None:
        """A point marker may not touch the caret of a following span."""
        with pytest.raises(HighlightSyntaxError, match="point marker followed by") as exc_info:
            scan_spans(spans)
        assert exc_info.value.position == position
        assert exc_info.value.char == "^"

    @pytest.mark.parametrize(
        ("spans", "expected"),
        [("||", [(0, 0), (1, 1)]), ("| ^^", [(0, 0), (2, 3)]), ("|I^^", [(0, 0), (2, 3)]), ("^^|", [(0, 1), (2, 2)])],
    )
    def test_point_adjacency_allowed(self, spans: str, expected: list[tuple[int, int]]) -> None:
        """Points may touch other points, filler, or a preceding span."""
        assert scan_spans(spans) == expected

    def test_error_pointer_keeps_tabs(self) -> None:
        """Tabs in the highlight string are kept in the pointer line."""
        with pytest.raises(HighlightSyntaxError) as exc_info:
            scan_spans("\t| \tx")
        lines = str(exc_info.value).splitlines()
        assert lines[1] == "    \t| \tx"
        assert lines[2] == "    \t  \t^"

    @pytest.mark.parametrize("spans", ["-", " -^", "|-|", "^^-"])
    def test_fill_outside_span(self, spans: str) -> None:
        """Dashes are only valid between two carets."""
        with pytest.raises(HighlightSyntaxError, match="fill outside of a span"):
            scan_spans(spans)

    @pytest.mark.parametrize(
        ("spans", "position", "char"),
        [
            ("x", 0, "x"),
            ("| *", 2, "*"),
            ("^-x^", 2, "x"),
            ("^^ i", 3, "i"),
            ("\u00a0|", 0, "\u00a0"),
        ],
    )
    def test_invalid_character(self, spans: str, position: int, char: str) -> None:
        """Characters outside the alphabet are rejected with their position."""
        with pytest.raises(HighlightSyntaxError, match="invalid character") as exc_info:
            scan_spans(spans)
        assert exc_info.value.position == position
        assert exc_info.value.char == char
        assert exc_info.value.highlight == spans

    def test_error_at_end_of_input(self) -> None:
        """Running out of input reports no character."""
        with pytest.raises(HighlightSyntaxError) as exc_info:
            scan_spans("|  ^--")
        assert exc_info.value.position == 6
        assert exc_info.value.char is None
        assert "end of input" in str(exc_info.value)

    def test_error_message_points_at_column(self) -> None:
        """The message draws a caret under the offending column."""
        with pytest.raises(HighlightSyntaxError) as exc_info:
            scan_spans("^-^ x")
        lines = str(exc_info.value).splitlines()
        assert lines[1] == "    ^-^ x"
        assert lines[2] == "        ^"

    def test_error_is_value_error(self) -> None:
        """Syntax errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            scan_spans("?")


class TestCaretConvention:
    """The pure-caret grammar."""

    def test_single_caret_span(self) -> None:
        """A lone caret is a point."""
        hl = highlight("^", convention="caret")
        assert next(hl) == (0, 0)
        assert next(hl, None) is None

    def test_single_caret_span_after_whitespace(self) -> None:
        """Leading whitespace shifts the position."""
        assert scan_spans("   ^", convention="caret") == [(3, 3)]

    def test_span_after_whitespace(self) -> None:
        """A dashed span surrounded by whitespace."""
        assert scan_spans(" ^---^  ", convention="caret") == [(1, 5)]

    def test_two_single_carets_spans(self) -> None:
        """Whitespace separates points."""
        assert scan_spans("^ ^", convention="caret") == [(0, 0), (2, 2)]

    def test_many_spans(self) -> None:
        """Mixed groups on one line."""
        spans = scan_spans("^-^ ^^ ^--^ ^ ^----^  ", convention="caret")
        assert spans == [(0, 2), (4, 5), (7, 10), (12, 12), (14, 19)]

    def test_caret_run_is_one_span(self) -> None:
        """A run of carets extends the end to the last caret."""
        assert scan_spans("^^^", convention="caret") == [(0, 2)]
        assert scan_spans("^-^^", convention="caret") == [(0, 3)]

    def test_group_count_matches_marker_groups(self) -> None:
        """One span per whitespace-delimited group."""
        line = " ^ ^-^  ^^^ ^--^-^ "
        assert len(scan_spans(line, convention="caret")) == len(line.split())

    @pytest.mark.parametrize("spans", ["^--", "^-- ", "^-^-", " ^-\t", "^-\u00a0"])
    def test_unterminated_span(self, spans: str) -> None:
        """A dash followed by whitespace or end of input is an error."""
        with pytest.raises(HighlightSyntaxError, match="unterminated span"):
            scan_spans(spans, convention="caret")

    @pytest.mark.parametrize("spans", ["|", "^|", "I", " ^-x^"])
    def test_invalid_character(self, spans: str) -> None:
        """Point markers and the alternate filler are not part of this grammar."""
        with pytest.raises(HighlightSyntaxError, match="invalid character"):
            scan_spans(spans, convention="caret")

    def test_group_must_open_with_caret(self) -> None:
        """A group starting with a dash is rejected."""
        with pytest.raises(HighlightSyntaxError, match="must open with"):
            scan_spans(" -^", convention="caret")

    def test_unicode_whitespace_is_filler(self) -> None:
        """Any whitespace character separates groups."""
        assert scan_spans("^\u00a0^", convention="caret") == [(0, 0), (2, 2)]


class TestHighlighterIteration:
    """Laziness and single-use behavior."""

    def test_lazy_scan_stops_before_error(self) -> None:
        """Spans before a malformed region are produced on demand."""
        hl = Highlighter("^-^ | x")
        assert next(hl) == (0, 2)
        assert next(hl) == (4, 4)
        with pytest.raises(HighlightSyntaxError):
            next(hl)

    def test_exhausted_after_error(self) -> None:
        """No spans are produced after a syntax error."""
        hl = Highlighter("x |")
        with pytest.raises(HighlightSyntaxError):
            next(hl)
        assert list(hl) == []

    def test_single_use(self) -> None:
        """A consumed highlighter yields nothing more."""
        hl = Highlighter("| |")
        assert list(hl) == [(0, 0), (2, 2)]
        assert list(hl) == []

    def test_iter_returns_self(self) -> None:
        """The highlighter is its own iterator."""
        hl = Highlighter("|")
        assert iter(hl) is hl

    def test_independent_instances(self) -> None:
        """Separate scanners over one string do not share position."""
        first = Highlighter("| |")
        second = Highlighter("| |")
        assert next(first) == (0, 0)
        assert next(second) == (0, 0)
        assert next(first) == (2, 2)

    def test_unknown_convention(self) -> None:
        """Unknown conventions are rejected up front."""
        with pytest.raises(ValueError, match="Unknown highlight convention"):
            Highlighter("|", convention="dashes")  # type: ignore[arg-type]


class TestIsFiller:
    """Filler classification."""

    @pytest.mark.parametrize(
        ("char", "convention", "expected"),
        [
            (" ", "marker", True),
            ("\t", "marker", True),
            ("I", "marker", True),
            ("\u00a0", "marker", False),
            ("^", "marker", False),
            (" ", "caret", True),
            ("\u00a0", "caret", True),
            ("I", "caret", False),
        ],
    )
    def test_is_filler(self, char: str, convention: str, expected: bool) -> None:
        """Test filler per convention."""
        assert is_filler(char, convention) is expected  # type: ignore[arg-type]
