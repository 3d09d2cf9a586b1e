"""Tests for barre span resolution and dot suppression."""

import pytest

from chord_diagram import BarreSpan, ChordRecord, DisplayMode, is_dot_suppressed, resolve_barre_span, resolve_barres


class TestResolveBarreSpan:
    def test_full_barre(self) -> None:
        span = resolve_barre_span((1, 3, 3, 2, 1, 1), 1)
        assert span == BarreSpan(fret=1, start=0, length=6, fret_count=3)
        assert span.end == 6
        assert list(span.strings) == [0, 1, 2, 3, 4, 5]

    def test_muted_low_string(self) -> None:
        span = resolve_barre_span((-1, 2, 4, 4, 3, 2), 2)
        assert (span.start, span.end) == (1, 6)

    def test_stops_once_enough_strings_are_covered(self) -> None:
        span = resolve_barre_span((-1, 0, 2, 2, 2, 0), 2)
        assert (span.start, span.length) == (2, 3)

    def test_restarts_after_a_lower_string(self) -> None:
        span = resolve_barre_span((5, -1, 5, 7, 7, 5), 5)
        assert (span.start, span.end) == (2, 6)
        assert span.fret_count == 3

    @pytest.mark.parametrize(
        ("frets", "barre"),
        [
            ((1, 3, 3, 2, 1, 1), 1),
            ((-1, 2, 4, 4, 3, 2), 2),
            ((-1, 0, 2, 2, 2, 0), 2),
            ((5, -1, 5, 7, 7, 5), 5),
            ((3, 3, 5, 5, 5, 3), 3),
        ],
    )
    def test_span_is_contiguous_and_long_enough(self, frets: tuple[int, ...], barre: int) -> None:
        span = resolve_barre_span(frets, barre)
        assert span.length >= span.fret_count
        assert all(frets[index] >= barre for index in span.strings)

    def test_resolve_barres_for_record(self, f_major: ChordRecord) -> None:
        spans = resolve_barres(f_major)
        assert len(spans) == 1
        assert (spans[0].start, spans[0].end) == (0, 6)

    def test_no_barres(self, c_major: ChordRecord) -> None:
        assert resolve_barres(c_major) == ()


class TestDotSuppression:
    def test_f_major_in_finger_mode(self, f_major: ChordRecord) -> None:
        suppressed = [is_dot_suppressed(f_major.frets, f_major.barres, i) for i in range(6)]
        assert suppressed == [True, False, False, False, True, True]

    @pytest.mark.parametrize("mode", [DisplayMode.NOTES_NO_OCTAVE, DisplayMode.FUNCTIONS])
    def test_note_modes_never_suppress(self, f_major: ChordRecord, mode: DisplayMode) -> None:
        assert not any(is_dot_suppressed(f_major.frets, f_major.barres, i, mode) for i in range(6))

    def test_blank_mode_suppresses(self, f_major: ChordRecord) -> None:
        assert is_dot_suppressed(f_major.frets, f_major.barres, 0, DisplayMode.BLANK)

    def test_isolated_barre_string_keeps_dot(self) -> None:
        frets = (-1, 3, 2, 0, 1, 0)
        assert not is_dot_suppressed(frets, (1,), 4)

    def test_lowest_string_checks_its_neighbour(self) -> None:
        frets = (2, 2, 0, 0, 0, 0)
        assert is_dot_suppressed(frets, (2,), 0)
        assert is_dot_suppressed(frets, (2,), 1)

    def test_non_barre_fret_is_never_suppressed(self) -> None:
        assert not is_dot_suppressed((1, 3, 3, 2, 1, 1), (1,), 2)
