"""Pitch class tables and note-name normalization.

Note names appear with ASCII accidentals in chord-library files ("Bb",
"F#") and with Unicode accidentals in display text ("B♭", "F♯"). Both
spellings map to the same pitch class (0-11, where C=0).
"""

from __future__ import annotations

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Spellings indexed by pitch class
SHARP_NAMES: tuple[str, ...] = ("C", "C♯", "D", "D♯", "E", "F", "F♯", "G", "G♯", "A", "A♯", "B")
FLAT_NAMES: tuple[str, ...] = ("C", "D♭", "D", "E♭", "E", "F", "G♭", "G", "A♭", "A", "B♭", "B")

_OCTAVE_CHARS = "-0123456789"


def strip_octave(name: str) -> str:
    """Remove a trailing octave number from a note name.

    Examples
    --------
    >>> strip_octave("C♯3")
    'C♯'
    >>> strip_octave("B-1")
    'B'
    """
    return name.rstrip(_OCTAVE_CHARS)


def to_ascii(name: str) -> str:
    """Replace Unicode accidentals with their ASCII spelling."""
    return name.replace("♯", "#").replace("♭", "b")


def to_symbol(name: str) -> str:
    """Replace ASCII accidentals with Unicode ones.

    Only the accidental position is rewritten, so "B" and "Bb" stay
    distinguishable.

    Examples
    --------
    >>> to_symbol("Bb")
    'B♭'
    >>> to_symbol("F#")
    'F♯'
    """
    if len(name) < 2:
        return name
    accidentals = name[1:].replace("#", "♯").replace("b", "♭")
    return name[0] + accidentals


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name with ASCII or Unicode accidentals and an optional
        octave number (e.g., "C", "F♯", "Bb", "E♭4").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F♯")
    6
    >>> note_to_pc("Bb2")
    10
    """
    normalized = to_ascii(strip_octave(note))
    if normalized in NOTE_TO_PC:
        return NOTE_TO_PC[normalized]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)
