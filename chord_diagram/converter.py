"""Conversion between chord symbols and key/suffix identifiers.

Chord libraries store a chord as a key plus a suffix ("Bb", "m7"), while
users type lead-sheet symbols ("Bbm7", "C/E"). Symbols are parsed with
pychord and its quality names mapped onto `Suffix` members.
"""

from __future__ import annotations

from chord_diagram.errors import UnknownIdentifierError
from chord_diagram.identifiers import Key, Suffix

# Mapping from pychord quality names to chord-library suffixes
PYCHORD_QUALITY_TO_SUFFIX: dict[str, Suffix] = {
    "": Suffix.MAJOR,
    "maj": Suffix.MAJOR,
    "m": Suffix.MINOR,
    "min": Suffix.MINOR,
    "dim": Suffix.DIM,
    "dim7": Suffix.DIM7,
    "sus2": Suffix.SUS2,
    "sus4": Suffix.SUS4,
    "7sus4": Suffix.SEVEN_SUS4,
    "aug": Suffix.AUG,
    "6": Suffix.SIX,
    "69": Suffix.SIX_NINE,
    "6/9": Suffix.SIX_NINE,
    "7": Suffix.SEVEN,
    "7-5": Suffix.SEVEN_FLAT_FIVE,
    "7b5": Suffix.SEVEN_FLAT_FIVE,
    "7+5": Suffix.SEVEN_SHARP_FIVE,
    "7#5": Suffix.SEVEN_SHARP_FIVE,
    "aug7": Suffix.AUG7,
    "9": Suffix.NINE,
    "9-5": Suffix.NINE_FLAT_FIVE,
    "9b5": Suffix.NINE_FLAT_FIVE,
    "aug9": Suffix.AUG9,
    "7-9": Suffix.SEVEN_FLAT_NINE,
    "7b9": Suffix.SEVEN_FLAT_NINE,
    "7+9": Suffix.SEVEN_SHARP_NINE,
    "7#9": Suffix.SEVEN_SHARP_NINE,
    "11": Suffix.ELEVEN,
    "9#11": Suffix.NINE_SHARP_ELEVEN,
    "9+11": Suffix.NINE_SHARP_ELEVEN,
    "13": Suffix.THIRTEEN,
    "maj7": Suffix.MAJ7,
    "M7": Suffix.MAJ7,
    "M7-5": Suffix.MAJ7_FLAT_FIVE,
    "maj7b5": Suffix.MAJ7_FLAT_FIVE,
    "M7+5": Suffix.MAJ7_SHARP_FIVE,
    "maj7#5": Suffix.MAJ7_SHARP_FIVE,
    "maj9": Suffix.MAJ9,
    "M9": Suffix.MAJ9,
    "maj11": Suffix.MAJ11,
    "M11": Suffix.MAJ11,
    "maj13": Suffix.MAJ13,
    "M13": Suffix.MAJ13,
    "m6": Suffix.MINOR_SIX,
    "m69": Suffix.MINOR_SIX_NINE,
    "m6/9": Suffix.MINOR_SIX_NINE,
    "m7": Suffix.MINOR_SEVEN,
    "m7-5": Suffix.MINOR_SEVEN_FLAT_FIVE,
    "m7b5": Suffix.MINOR_SEVEN_FLAT_FIVE,
    "m9": Suffix.MINOR_NINE,
    "m11": Suffix.MINOR_ELEVEN,
    "mmaj7": Suffix.MINOR_MAJ7,
    "mM7": Suffix.MINOR_MAJ7,
    "mmaj9": Suffix.MINOR_MAJ9,
    "mM9": Suffix.MINOR_MAJ9,
    "mmaj11": Suffix.MINOR_MAJ11,
    "add9": Suffix.ADD9,
    "madd9": Suffix.MINOR_ADD9,
}

# Suffixes whose symbol text differs from the raw library value
_SYMBOL_SUFFIX: dict[Suffix, str] = {
    Suffix.MAJOR: "",
    Suffix.MINOR: "m",
}


def pychord_quality_to_suffix(quality: str) -> Suffix:
    """Convert a pychord quality name to a suffix.

    Raises
    ------
    UnknownIdentifierError
        If the quality has no chord-library equivalent.

    Examples
    --------
    >>> pychord_quality_to_suffix("m7-5")
    <Suffix.MINOR_SEVEN_FLAT_FIVE: 'm7b5'>
    """
    if quality in PYCHORD_QUALITY_TO_SUFFIX:
        return PYCHORD_QUALITY_TO_SUFFIX[quality]
    msg = f"Unknown pychord quality: {quality}"
    raise UnknownIdentifierError(msg)


def parse_chord_symbol(symbol: str) -> tuple[Key, Suffix]:
    """Parse a lead-sheet chord symbol into a key and suffix.

    Parameters
    ----------
    symbol : str
        Chord symbol (e.g., "Bbm7", "F#dim", "C/E", "Am/G").

    Returns
    -------
    tuple[Key, Suffix]
        The chord root and quality.

    Raises
    ------
    UnknownIdentifierError
        If pychord cannot parse the symbol, or the quality or slash bass
        has no chord-library suffix.

    Examples
    --------
    >>> parse_chord_symbol("Bbm7")
    (<Key.B_FLAT: 'Bb'>, <Suffix.MINOR_SEVEN: 'm7'>)
    >>> parse_chord_symbol("C/E")
    (<Key.C: 'C'>, <Suffix.SLASH_E: '/E'>)
    """
    from pychord import Chord as PyChord

    try:
        pc = PyChord(symbol)
    except ValueError as err:
        msg = f"Unknown chord symbol: {symbol}"
        raise UnknownIdentifierError(msg) from err

    key = Key.parse(pc.root)
    suffix = pychord_quality_to_suffix(str(pc.quality))

    if pc.on:
        if suffix not in (Suffix.MAJOR, Suffix.MINOR):
            msg = f"Unsupported slash chord: {symbol}"
            raise UnknownIdentifierError(msg)
        prefix = "m" if suffix is Suffix.MINOR else ""
        suffix = Suffix.parse(f"{prefix}/{pc.on}")

    return key, suffix


def chord_symbol(key: Key, suffix: Suffix) -> str:
    """Format a key and suffix as a compact chord symbol.

    Examples
    --------
    >>> chord_symbol(Key.B_FLAT, Suffix.MINOR_SEVEN)
    'Bbm7'
    >>> chord_symbol(Key.C, Suffix.MAJOR)
    'C'
    >>> chord_symbol(Key.A, Suffix.MINOR_SLASH_G)
    'Am/G'
    """
    return f"{key.value}{_SYMBOL_SUFFIX.get(suffix, suffix.value)}"
