"""Guitar tuning presets.

Each preset lists its open-string pitch classes from the low string up.
Absolute pitches use the default octave of each string position, so a
preset only changes pitch classes, never the register of a string.
"""

from __future__ import annotations

from chord_diagram.errors import UnknownIdentifierError
from chord_diagram.models import STRING_COUNT, GuitarTuning

# Standard and basic variations
STANDARD = GuitarTuning("Standard", ("E", "A", "D", "G", "B", "E"))
HALF_STEP_DOWN = GuitarTuning("Half step down", ("E♭", "A♭", "D♭", "G♭", "B♭", "E♭"))
HALF_STEP_UP = GuitarTuning("Half step up", ("F", "A♯", "D♯", "G♯", "C", "F"))
FULL_STEP_DOWN = GuitarTuning("Full step down", ("D", "G", "C", "F", "A", "D"))

# Drop tunings
DROP_D = GuitarTuning("Drop D", ("D", "A", "D", "G", "B", "E"))
DROP_C = GuitarTuning("Drop C", ("C", "G", "C", "F", "A", "D"))
DROP_C_SHARP = GuitarTuning("Drop C♯", ("C♯", "G♯", "C♯", "F♯", "A♯", "D♯"))
DROP_C_SHARP_ALT = GuitarTuning("Drop C♯ (Alt)", ("C♯", "A", "D", "G", "B", "E"))
DROP_B = GuitarTuning("Drop B", ("B", "G♭", "B", "E", "A♭", "D♭"))
DROP_A = GuitarTuning("Drop A", ("A", "E", "A", "D", "G♭", "B"))

# Open tunings
OPEN_G = GuitarTuning("Open G", ("D", "G", "D", "G", "B", "D"))
OPEN_F = GuitarTuning("Open F", ("F", "A", "C", "F", "C", "F"))
OPEN_E = GuitarTuning("Open E", ("E", "B", "E", "G♯", "B", "E"))
OPEN_D = GuitarTuning("Open D", ("D", "A", "D", "F♯", "A", "D"))
OPEN_C = GuitarTuning("Open C", ("C", "G", "C", "G", "C", "E"))
OPEN_A = GuitarTuning("Open A", ("E", "A", "E", "A", "C♯", "E"))

# Special tunings
DADGAD = GuitarTuning("DADGAD", ("D", "A", "D", "G", "A", "D"))

ALL_PRESETS: tuple[GuitarTuning, ...] = (
    STANDARD,
    HALF_STEP_DOWN,
    HALF_STEP_UP,
    FULL_STEP_DOWN,
    DROP_D,
    DROP_C,
    DROP_C_SHARP,
    DROP_C_SHARP_ALT,
    DROP_B,
    DROP_A,
    OPEN_G,
    OPEN_F,
    OPEN_E,
    OPEN_D,
    OPEN_C,
    OPEN_A,
    DADGAD,
)

_PRESETS_BY_NAME: dict[str, GuitarTuning] = {tuning.name.casefold(): tuning for tuning in ALL_PRESETS}


def open_string_midi(tuning: GuitarTuning, string_index: int) -> int:
    """MIDI number of an open string.

    Parameters
    ----------
    tuning : GuitarTuning
        The tuning to read.
    string_index : int
        String position, 0 for the lowest string.

    Returns
    -------
    int
        ``(octave + 1) * 12 + semitone`` for the string's default octave.

    Raises
    ------
    IndexError
        If ``string_index`` is outside 0-5.

    Examples
    --------
    >>> open_string_midi(STANDARD, 0)
    40
    >>> open_string_midi(DROP_D, 0)
    38
    """
    if not 0 <= string_index < STRING_COUNT:
        msg = f"string index out of range: {string_index}"
        raise IndexError(msg)
    return tuning.midi_notes[string_index]


def tuning_by_name(name: str) -> GuitarTuning:
    """Find a preset by its display name, ignoring case.

    Raises
    ------
    UnknownIdentifierError
        If no preset has that name.

    Examples
    --------
    >>> tuning_by_name("drop d").note_names
    ('D', 'A', 'D', 'G', 'B', 'E')
    """
    try:
        return _PRESETS_BY_NAME[name.strip().casefold()]
    except KeyError:
        msg = f"Unknown tuning: {name}"
        raise UnknownIdentifierError(msg) from None
