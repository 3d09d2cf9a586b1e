"""Scale-degree labels for chord tones.

Each sounding note is labeled with its function relative to the chord
root ("R", "♭3", "5", "♭7", "9", ...). Ambiguous intervals are resolved
from the chord suffix: a minor third is "♭3" in a minor chord but "♯9"
in a 7♯9 chord.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from chord_diagram.identifiers import Suffix, SuffixGroup
from chord_diagram.notes import note_names_only
from chord_diagram.pitch_class import note_to_pc
from chord_diagram.tuning import STANDARD

if TYPE_CHECKING:
    from chord_diagram.models import ChordRecord, GuitarTuning

UNKNOWN_DEGREE = "?"

# Labels used when the suffix does not change the interval's meaning
DEFAULT_DEGREES: dict[int, str] = {
    0: "R",
    1: "♭2",
    2: "2",
    3: "♯2",
    4: "3",
    5: "4",
    6: "♭5",
    7: "5",
    8: "♭6",
    9: "6",
    10: "♯6",
    11: "♭7",
}


class NoteRole(Enum):
    """Coarse role of a chord tone, for renderers that color by function."""

    ROOT = "root"
    THIRD = "third"
    FIFTH = "fifth"
    SEVENTH = "seventh"
    OTHER = "other"


_ROLE_BY_DEGREE: dict[str, NoteRole] = {
    "R": NoteRole.ROOT,
    "♭3": NoteRole.THIRD,
    "3": NoteRole.THIRD,
    "♭5": NoteRole.FIFTH,
    "5": NoteRole.FIFTH,
    "♯5": NoteRole.FIFTH,
    "♭7": NoteRole.SEVENTH,
    "7": NoteRole.SEVENTH,
}


def interval_between(note: str, root: str) -> int:
    """Semitones from ``root`` up to ``note``, in 0-11.

    Examples
    --------
    >>> interval_between("E", "C")
    4
    >>> interval_between("C", "E")
    8
    """
    return (note_to_pc(note) - note_to_pc(root) + 12) % 12


def interval_label(interval: int, suffix: Suffix) -> str:
    """Label an interval above the root in the context of a suffix.

    Parameters
    ----------
    interval : int
        Semitones above the root, 0-11.
    suffix : Suffix
        The chord quality.

    Returns
    -------
    str
        The scale-degree label, or "?" for an interval outside 0-11.

    Examples
    --------
    >>> interval_label(3, Suffix.MINOR)
    '♭3'
    >>> interval_label(3, Suffix.SEVEN_SHARP_NINE)
    '♯9'
    >>> interval_label(10, Suffix.SEVEN)
    '♭7'
    """
    info = suffix.info
    group = info.group
    extended = suffix.is_extended

    if interval == 2 and extended:
        return "9"
    if interval == 3:
        if group in (SuffixGroup.MINOR, SuffixGroup.DIMINISHED):
            return "♭3"
        if extended and info.has_sharp_nine:
            return "♯9"
    if interval == 5 and extended and info.has_eleventh:
        return "11"
    if interval == 6:
        if group is SuffixGroup.DIMINISHED:
            return "♭5"
        if group is SuffixGroup.AUGMENTED:
            return "♯5"
        if extended and info.has_sharp_eleventh:
            return "♯11"
    if interval == 8 and group is SuffixGroup.AUGMENTED:
        return "♯5"
    if interval == 9 and extended and info.has_thirteenth:
        return "13"
    if interval == 10:
        if info.has_seventh:
            return "♭7"
        if extended and info.has_flat_nine:
            return "♭9"
    if interval == 11 and info.has_major_seventh:
        return "7"
    return DEFAULT_DEGREES.get(interval, UNKNOWN_DEGREE)


def scale_degree(note: str, root: str, suffix: Suffix) -> str:
    """Label ``note`` relative to a chord on ``root``.

    Examples
    --------
    >>> scale_degree("E", "C", Suffix.MAJOR)
    '3'
    >>> scale_degree("B♭", "C", Suffix.SEVEN)
    '♭7'
    """
    return interval_label(interval_between(note, root), suffix)


def scale_degrees(record: ChordRecord, tuning: GuitarTuning = STANDARD) -> tuple[str | None, ...]:
    """Label every string of a voicing, None for muted strings."""
    root = record.key.display.symbol
    return tuple(
        None if note is None else scale_degree(note, root, record.suffix) for note in note_names_only(record, tuning)
    )


def note_role(degree: str) -> NoteRole:
    """Classify a scale-degree label.

    Examples
    --------
    >>> note_role("♭3")
    <NoteRole.THIRD: 'third'>
    >>> note_role("9")
    <NoteRole.OTHER: 'other'>
    """
    return _ROLE_BY_DEGREE.get(degree, NoteRole.OTHER)


def note_roles(record: ChordRecord, tuning: GuitarTuning = STANDARD) -> tuple[NoteRole | None, ...]:
    """Role of each string's note, None for muted strings."""
    return tuple(None if degree is None else note_role(degree) for degree in scale_degrees(record, tuning))
