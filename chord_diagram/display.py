"""Per-string label selection for diagram dots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_diagram.models import MUTED, DisplayMode
from chord_diagram.notes import note_names_only
from chord_diagram.scale_degree import scale_degrees
from chord_diagram.tuning import STANDARD

if TYPE_CHECKING:
    from chord_diagram.models import ChordRecord, GuitarTuning


def display_texts(
    record: ChordRecord,
    mode: DisplayMode,
    tuning: GuitarTuning = STANDARD,
    use_flats: bool | None = None,
) -> tuple[str | None, ...]:
    """Label for every string of a voicing.

    Parameters
    ----------
    record : ChordRecord
        The voicing to label.
    mode : DisplayMode
        Finger numbers, note names, scale degrees or blank.
    tuning : GuitarTuning
        Tuning used to derive note names and degrees.
    use_flats : bool | None
        Spelling override for note names; None follows the key.

    Returns
    -------
    tuple[str | None, ...]
        One label per string; None for muted strings in every mode.

    Examples
    --------
    >>> from chord_diagram.identifiers import Key, Suffix
    >>> from chord_diagram.models import ChordRecord
    >>> c = ChordRecord((-1, 3, 2, 0, 1, 0), (0, 3, 2, 0, 1, 0), 1, (), (), Key.C, Suffix.MAJOR)
    >>> display_texts(c, DisplayMode.NOTES_NO_OCTAVE)
    (None, 'C', 'E', 'G', 'C', 'E')
    >>> display_texts(c, DisplayMode.FUNCTIONS)
    (None, 'R', '3', '5', 'R', '3')
    """
    if mode is DisplayMode.NOTES_NO_OCTAVE:
        texts: tuple[str | None, ...] = note_names_only(record, tuning, use_flats)
    elif mode is DisplayMode.FUNCTIONS:
        texts = scale_degrees(record, tuning)
    elif mode is DisplayMode.BLANK:
        texts = tuple("" for _ in record.frets)
    else:
        texts = tuple(str(finger) for finger in record.fingers)

    return tuple(None if fret == MUTED else text for fret, text in zip(record.frets, texts, strict=True))


def label_for(
    record: ChordRecord,
    string_index: int,
    mode: DisplayMode,
    tuning: GuitarTuning = STANDARD,
    use_flats: bool | None = None,
) -> str | None:
    """Label for a single string; see `display_texts`."""
    return display_texts(record, mode, tuning, use_flats)[string_index]


def label_size_ratio(text: str) -> float:
    """Relative glyph size for a dot label.

    Single characters use the full size; two-character accidentals
    ("B♭") and longer labels are shrunk to fit the dot.

    Examples
    --------
    >>> label_size_ratio("3")
    1.0
    >>> label_size_ratio("F♯")
    0.75
    """
    if len(text) <= 1:
        return 1.0
    if len(text) == 2 and ("♭" in text or "♯" in text):
        return 0.75
    if "\n" in text:
        return 0.6
    return 0.8
