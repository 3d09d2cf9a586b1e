"""Barre span resolution.

A barre is drawn as one bar across a contiguous run of strings. The bar
starts at the first string fretted at the barre fret and extends over
every following string that is fretted at or above it, skipping past
lower strings until enough strings are covered.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chord_diagram.models import DisplayMode

if TYPE_CHECKING:
    from chord_diagram.models import ChordRecord

# Modes that label every fretted string individually
INDIVIDUAL_DOT_MODES: frozenset[DisplayMode] = frozenset({DisplayMode.NOTES_NO_OCTAVE, DisplayMode.FUNCTIONS})


@dataclass(frozen=True)
class BarreSpan:
    """String range covered by one barre.

    Parameters
    ----------
    fret : int
        The barre fret, relative to the base fret.
    start : int
        First covered string index.
    length : int
        Number of covered strings.
    fret_count : int
        Number of strings fretted exactly at ``fret``.

    Examples
    --------
    >>> span = BarreSpan(fret=1, start=0, length=6, fret_count=3)
    >>> span.end
    6
    """

    fret: int
    start: int
    length: int
    fret_count: int

    @property
    def end(self) -> int:
        """Exclusive end string index."""
        return self.start + self.length

    @property
    def strings(self) -> range:
        return range(self.start, self.end)


def resolve_barre_span(frets: Sequence[int], barre: int) -> BarreSpan:
    """Compute the strings a barre bar covers.

    Parameters
    ----------
    frets : Sequence[int]
        Per-string fret values.
    barre : int
        The barre fret.

    Returns
    -------
    BarreSpan
        The covered range ``[start, start + length)``.

    Examples
    --------
    >>> resolve_barre_span([1, 3, 3, 2, 1, 1], 1)
    BarreSpan(fret=1, start=0, length=6, fret_count=3)
    >>> resolve_barre_span([-1, 1, 3, 3, 3, 1], 1)
    BarreSpan(fret=1, start=1, length=5, fret_count=2)
    """
    fret_count = sum(1 for fret in frets if fret == barre)
    start = next((index for index, fret in enumerate(frets) if fret == barre), 0)
    length = 0

    for index in range(start, len(frets)):
        fret = frets[index]
        if fret >= barre:
            length += 1
        elif length < fret_count:
            length = 0
            start = index + 1
        else:
            break

    return BarreSpan(fret=barre, start=start, length=length, fret_count=fret_count)


def resolve_barres(record: ChordRecord) -> tuple[BarreSpan, ...]:
    """One span per barre of the record, in barre order."""
    return tuple(resolve_barre_span(record.frets, barre) for barre in record.barres)


def is_dot_suppressed(
    frets: Sequence[int],
    barres: Iterable[int],
    index: int,
    mode: DisplayMode = DisplayMode.FINGERS,
) -> bool:
    """Whether the barre bar replaces the individual dot of a string.

    A string fretted at a barre fret hides its dot when a neighbouring
    string is fretted at or above the same fret. Note and function modes
    never hide dots, since each string carries its own label.

    Examples
    --------
    >>> is_dot_suppressed([1, 3, 3, 2, 1, 1], [1], 4)
    True
    >>> is_dot_suppressed([1, 3, 3, 2, 1, 1], [1], 4, DisplayMode.FUNCTIONS)
    False
    """
    if mode in INDIVIDUAL_DOT_MODES:
        return False
    fret = frets[index]
    if fret < 1 or fret not in set(barres):
        return False
    return any(0 <= neighbour < len(frets) and frets[neighbour] >= fret for neighbour in (index - 1, index + 1))
