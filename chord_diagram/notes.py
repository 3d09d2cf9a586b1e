"""Note naming for fretted strings.

This module turns a string/fret position into an absolute MIDI pitch and
spells that pitch with sharps or flats according to the chord's key
signature.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_diagram.identifiers import Key, SuffixGroup
from chord_diagram.models import MUTED
from chord_diagram.pitch_class import FLAT_NAMES, SHARP_NAMES, strip_octave
from chord_diagram.tuning import STANDARD, open_string_midi

if TYPE_CHECKING:
    from chord_diagram.models import ChordRecord, GuitarTuning

# Keys whose signatures are written with sharps or flats
SHARP_KEYS: frozenset[Key] = frozenset({Key.G, Key.D, Key.A, Key.E, Key.B, Key.F_SHARP, Key.C_SHARP})
FLAT_KEYS: frozenset[Key] = frozenset({Key.F, Key.B_FLAT, Key.E_FLAT, Key.A_FLAT, Key.D_FLAT, Key.G_FLAT})


def fretted_midi(tuning: GuitarTuning, string_index: int, base_fret: int, fret: int) -> int:
    """MIDI number sounded by a string at a fret.

    Parameters
    ----------
    tuning : GuitarTuning
        Open-string tuning.
    string_index : int
        String position, 0 for the lowest string.
    base_fret : int
        Fret represented by the first diagram row.
    fret : int
        Fret relative to ``base_fret``; 0 is the open string.

    Returns
    -------
    int
        ``open_string_midi + (base_fret - 1) + fret``.

    Raises
    ------
    ValueError
        If the string is muted (``fret == -1``).

    Examples
    --------
    >>> from chord_diagram.tuning import STANDARD
    >>> fretted_midi(STANDARD, 1, 1, 3)
    48
    """
    if fret == MUTED:
        msg = f"String {string_index} is muted and has no pitch"
        raise ValueError(msg)
    return open_string_midi(tuning, string_index) + (base_fret - 1) + fret


def midi_to_name(midi: int, use_flats: bool = False) -> str:
    """Spell a MIDI number as a note name with octave.

    Examples
    --------
    >>> midi_to_name(61)
    'C♯4'
    >>> midi_to_name(61, use_flats=True)
    'D♭4'
    """
    names = FLAT_NAMES if use_flats else SHARP_NAMES
    octave = midi // 12 - 1
    return f"{names[midi % 12]}{octave}"


def should_use_flats(key: Key, group: SuffixGroup) -> bool:
    """Decide the enharmonic spelling for a chord.

    Sharp-signature keys spell with sharps and flat-signature keys with
    flats. C is spelled with flats only for minor and diminished chords
    (relative to E♭ major). Any other key defaults to sharps.

    Examples
    --------
    >>> should_use_flats(Key.C, SuffixGroup.MINOR)
    True
    >>> should_use_flats(Key.G, SuffixGroup.MINOR)
    False
    """
    if key in SHARP_KEYS:
        return False
    if key in FLAT_KEYS:
        return True
    if key is Key.C:
        return group in (SuffixGroup.MINOR, SuffixGroup.DIMINISHED)
    return False


def resolve_use_flats(record: ChordRecord, use_flats: bool | None = None) -> bool:
    """Explicit spelling override, or the key-signature policy when None."""
    if use_flats is None:
        return should_use_flats(record.key, record.suffix.group)
    return use_flats


def string_notes(
    record: ChordRecord,
    tuning: GuitarTuning = STANDARD,
    use_flats: bool | None = None,
) -> tuple[str | None, ...]:
    """Name the note sounded on each string, with octave.

    Parameters
    ----------
    record : ChordRecord
        The voicing to name.
    tuning : GuitarTuning
        Open-string tuning (default standard).
    use_flats : bool | None
        Force flat (True) or sharp (False) spelling; None applies
        `should_use_flats` to the record's key and suffix.

    Returns
    -------
    tuple[str | None, ...]
        One name per string, None for muted strings.
    """
    flats = resolve_use_flats(record, use_flats)
    return tuple(
        None if fret == MUTED else midi_to_name(fretted_midi(tuning, index, record.base_fret, fret), flats)
        for index, fret in enumerate(record.frets)
    )


def note_names_only(
    record: ChordRecord,
    tuning: GuitarTuning = STANDARD,
    use_flats: bool | None = None,
) -> tuple[str | None, ...]:
    """Like `string_notes` with the octave numbers removed."""
    return tuple(None if name is None else strip_octave(name) for name in string_notes(record, tuning, use_flats))
