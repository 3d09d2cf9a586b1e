"""Chord key and suffix identifiers.

Keys and suffixes are stored in chord-library files as raw strings
("Bb", "m7b5"). This module maps those raw values to enums carrying the
display strings used in chord names and the harmonic properties used to
label scale degrees.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chord_diagram.errors import UnknownIdentifierError
from chord_diagram.pitch_class import note_to_pc, to_ascii, to_symbol

_ACCIDENTAL_WORDS = {"#": "sharp", "b": "flat"}


@dataclass(frozen=True)
class KeyDisplay:
    """Display spellings of a key.

    Parameters
    ----------
    accessible : str
        Spoken form (e.g., "B flat").
    symbol : str
        Typeset form with Unicode accidentals (e.g., "B♭").
    """

    accessible: str
    symbol: str


class Key(Enum):
    """Chord root, as spelled in chord libraries."""

    C = "C"
    C_SHARP = "C#"
    D_FLAT = "Db"
    D = "D"
    D_SHARP = "D#"
    E_FLAT = "Eb"
    E = "E"
    F = "F"
    F_SHARP = "F#"
    G_FLAT = "Gb"
    G = "G"
    G_SHARP = "G#"
    A_FLAT = "Ab"
    A = "A"
    A_SHARP = "A#"
    B_FLAT = "Bb"
    B = "B"

    @property
    def pitch_class(self) -> int:
        return note_to_pc(self.value)

    @property
    def display(self) -> KeyDisplay:
        raw = self.value
        accessible = raw[0] if len(raw) == 1 else f"{raw[0]} {_ACCIDENTAL_WORDS[raw[1]]}"
        return KeyDisplay(accessible=accessible, symbol=to_symbol(raw))

    @classmethod
    def parse(cls, text: str) -> Key:
        """Look up a key by raw value, accepting Unicode accidentals.

        Raises
        ------
        UnknownIdentifierError
            If the text is not one of the 17 key spellings.

        Examples
        --------
        >>> Key.parse("B♭")
        <Key.B_FLAT: 'Bb'>
        """
        if not isinstance(text, str):
            msg = f"Unknown key: {text!r}"
            raise UnknownIdentifierError(msg)
        try:
            return cls(to_ascii(text.strip()))
        except ValueError:
            msg = f"Unknown key: {text}"
            raise UnknownIdentifierError(msg) from None


class SuffixGroup(Enum):
    """Harmonic family of a chord suffix."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    DOMINANT = "dominant"
    EXTENDED = "extended"
    OTHER = "other"


@dataclass(frozen=True)
class SuffixInfo:
    """Display strings and harmonic features of a suffix.

    Parameters
    ----------
    group : SuffixGroup
        The harmonic family.
    short : str
        Compact text form (e.g., "m7♭5").
    symbolized : str
        Jazz-symbol form (e.g., "ø7").
    alt_symbol : str
        Alternative symbol form (e.g., "-7(♭5)").
    extended : bool
        Whether upper tones are labeled as extensions (9, 11, 13) rather
        than as 2, 4 and 6. ``9b5`` and ``mmaj9`` are not marked.
    """

    group: SuffixGroup
    short: str
    symbolized: str
    alt_symbol: str
    extended: bool = False
    has_seventh: bool = False
    has_major_seventh: bool = False
    has_sharp_nine: bool = False
    has_flat_nine: bool = False
    has_eleventh: bool = False
    has_sharp_eleventh: bool = False
    has_thirteenth: bool = False


class Suffix(Enum):
    """Chord quality, as spelled in chord libraries."""

    MAJOR = "major"
    MINOR = "minor"
    DIM = "dim"
    DIM7 = "dim7"
    SUS2 = "sus2"
    SUS4 = "sus4"
    SEVEN_SUS4 = "7sus4"
    ALT = "alt"
    AUG = "aug"
    SIX = "6"
    SIX_NINE = "69"
    SEVEN = "7"
    SEVEN_FLAT_FIVE = "7b5"
    SEVEN_SHARP_FIVE = "7#5"
    AUG7 = "aug7"
    NINE = "9"
    NINE_FLAT_FIVE = "9b5"
    AUG9 = "aug9"
    SEVEN_FLAT_NINE = "7b9"
    SEVEN_SHARP_NINE = "7#9"
    ELEVEN = "11"
    NINE_SHARP_ELEVEN = "9#11"
    THIRTEEN = "13"
    MAJ7 = "maj7"
    MAJ7_FLAT_FIVE = "maj7b5"
    MAJ7_SHARP_FIVE = "maj7#5"
    MAJ9 = "maj9"
    MAJ11 = "maj11"
    MAJ13 = "maj13"
    MINOR_SIX = "m6"
    MINOR_SIX_NINE = "m69"
    MINOR_SEVEN = "m7"
    MINOR_SEVEN_FLAT_FIVE = "m7b5"
    MINOR_NINE = "m9"
    MINOR_ELEVEN = "m11"
    MINOR_MAJ7 = "mmaj7"
    MINOR_MAJ7_FLAT_FIVE = "mmaj7b5"
    MINOR_MAJ9 = "mmaj9"
    MINOR_MAJ11 = "mmaj11"
    ADD9 = "add9"
    MINOR_ADD9 = "madd9"
    SLASH_E = "/E"
    SLASH_F = "/F"
    SLASH_F_SHARP = "/F#"
    SLASH_G = "/G"
    SLASH_G_SHARP = "/G#"
    SLASH_A = "/A"
    SLASH_B_FLAT = "/Bb"
    SLASH_B = "/B"
    SLASH_C = "/C"
    SLASH_C_SHARP = "/C#"
    SLASH_D = "/D"
    SLASH_D_SHARP = "/D#"
    MINOR_SLASH_B = "m/B"
    MINOR_SLASH_C = "m/C"
    MINOR_SLASH_C_SHARP = "m/C#"
    MINOR_SLASH_D = "m/D"
    MINOR_SLASH_D_SHARP = "m/D#"
    MINOR_SLASH_E = "m/E"
    MINOR_SLASH_F = "m/F"
    MINOR_SLASH_F_SHARP = "m/F#"
    MINOR_SLASH_G = "m/G"
    MINOR_SLASH_G_SHARP = "m/G#"

    @property
    def info(self) -> SuffixInfo:
        return SUFFIX_INFO[self]

    @property
    def group(self) -> SuffixGroup:
        return SUFFIX_INFO[self].group

    @property
    def is_extended(self) -> bool:
        return SUFFIX_INFO[self].extended

    @property
    def is_slash(self) -> bool:
        return "/" in self.value

    @classmethod
    def parse(cls, text: str) -> Suffix:
        """Look up a suffix by raw value.

        Raises
        ------
        UnknownIdentifierError
            If the text is not a known suffix.
        """
        if not isinstance(text, str):
            msg = f"Unknown suffix: {text!r}"
            raise UnknownIdentifierError(msg)
        try:
            return cls(text)
        except ValueError:
            msg = f"Unknown suffix: {text}"
            raise UnknownIdentifierError(msg) from None


_MAJ = SuffixGroup.MAJOR
_MIN = SuffixGroup.MINOR
_DIM = SuffixGroup.DIMINISHED
_AUG = SuffixGroup.AUGMENTED
_DOM = SuffixGroup.DOMINANT
_EXT = SuffixGroup.EXTENDED
_OTHER = SuffixGroup.OTHER

SUFFIX_INFO: dict[Suffix, SuffixInfo] = {
    # Triads
    Suffix.MAJOR: SuffixInfo(_MAJ, "", "", ""),
    Suffix.MINOR: SuffixInfo(_MIN, "m", "m", "-"),
    Suffix.DIM: SuffixInfo(_DIM, "dim", "°", "°"),
    Suffix.DIM7: SuffixInfo(_DIM, "dim7", "°7", "°7"),
    Suffix.AUG: SuffixInfo(_AUG, "aug", "+", "+"),
    # Suspended and altered
    Suffix.SUS2: SuffixInfo(_OTHER, "sus2", "sus2", "sus2"),
    Suffix.SUS4: SuffixInfo(_OTHER, "sus4", "sus4", "sus4"),
    Suffix.SEVEN_SUS4: SuffixInfo(_DOM, "7sus4", "7sus4", "7sus4"),
    Suffix.ALT: SuffixInfo(_OTHER, "alt", "alt", "alt"),
    # Sixths
    Suffix.SIX: SuffixInfo(_MAJ, "6", "6", "6"),
    Suffix.SIX_NINE: SuffixInfo(_MAJ, "6/9", "6/9", "6/9"),
    # Dominant sevenths
    Suffix.SEVEN: SuffixInfo(_DOM, "7", "7", "7", has_seventh=True),
    Suffix.SEVEN_FLAT_FIVE: SuffixInfo(_DOM, "7♭5", "7♭5", "7(♭5)", has_seventh=True),
    Suffix.SEVEN_SHARP_FIVE: SuffixInfo(_AUG, "7♯5", "+7", "7(♯5)", has_seventh=True),
    Suffix.AUG7: SuffixInfo(_AUG, "aug7", "+7", "7♯5", has_seventh=True),
    # Dominant extensions
    Suffix.NINE: SuffixInfo(_EXT, "9", "9", "9", extended=True),
    Suffix.NINE_FLAT_FIVE: SuffixInfo(_DOM, "9♭5", "9♭5", "9(♭5)"),
    Suffix.AUG9: SuffixInfo(_AUG, "aug9", "+9", "9♯5", extended=True),
    Suffix.SEVEN_FLAT_NINE: SuffixInfo(
        _EXT, "7♭9", "7♭9", "7(♭9)", extended=True, has_seventh=True, has_flat_nine=True
    ),
    Suffix.SEVEN_SHARP_NINE: SuffixInfo(
        _EXT, "7♯9", "7♯9", "7(♯9)", extended=True, has_seventh=True, has_sharp_nine=True
    ),
    Suffix.ELEVEN: SuffixInfo(_EXT, "11", "11", "11", extended=True, has_eleventh=True),
    Suffix.NINE_SHARP_ELEVEN: SuffixInfo(
        _EXT, "9♯11", "9♯11", "9(♯11)", extended=True, has_eleventh=True, has_sharp_eleventh=True
    ),
    Suffix.THIRTEEN: SuffixInfo(_EXT, "13", "13", "13", extended=True, has_thirteenth=True),
    # Major sevenths
    Suffix.MAJ7: SuffixInfo(_MAJ, "maj7", "Δ7", "M7", has_major_seventh=True),
    Suffix.MAJ7_FLAT_FIVE: SuffixInfo(_MAJ, "maj7♭5", "Δ7♭5", "M7(♭5)", has_major_seventh=True),
    Suffix.MAJ7_SHARP_FIVE: SuffixInfo(_AUG, "maj7♯5", "Δ7♯5", "M7(♯5)", has_major_seventh=True),
    Suffix.MAJ9: SuffixInfo(_EXT, "maj9", "Δ9", "M9", extended=True),
    Suffix.MAJ11: SuffixInfo(_EXT, "maj11", "Δ11", "M11", extended=True, has_eleventh=True),
    Suffix.MAJ13: SuffixInfo(_EXT, "maj13", "Δ13", "M13", extended=True, has_thirteenth=True),
    # Minor family
    Suffix.MINOR_SIX: SuffixInfo(_MIN, "m6", "m6", "-6"),
    Suffix.MINOR_SIX_NINE: SuffixInfo(_MIN, "m6/9", "m6/9", "-6/9"),
    Suffix.MINOR_SEVEN: SuffixInfo(_MIN, "m7", "m7", "-7", has_seventh=True),
    Suffix.MINOR_SEVEN_FLAT_FIVE: SuffixInfo(_DIM, "m7♭5", "ø7", "-7(♭5)", has_seventh=True),
    Suffix.MINOR_NINE: SuffixInfo(_MIN, "m9", "m9", "-9", extended=True),
    Suffix.MINOR_ELEVEN: SuffixInfo(_MIN, "m11", "m11", "-11", extended=True, has_eleventh=True),
    Suffix.MINOR_MAJ7: SuffixInfo(_MIN, "m(maj7)", "mΔ7", "-M7", has_seventh=True, has_major_seventh=True),
    Suffix.MINOR_MAJ7_FLAT_FIVE: SuffixInfo(
        _DIM, "m(maj7)♭5", "mΔ7♭5", "-M7(♭5)", has_seventh=True, has_major_seventh=True
    ),
    Suffix.MINOR_MAJ9: SuffixInfo(_MIN, "m(maj9)", "mΔ9", "-M9"),
    Suffix.MINOR_MAJ11: SuffixInfo(
        _MIN, "m(maj11)", "mΔ11", "-M11", extended=True, has_eleventh=True
    ),
    # Added tones
    Suffix.ADD9: SuffixInfo(_MAJ, "add9", "add9", "add9"),
    Suffix.MINOR_ADD9: SuffixInfo(_MIN, "madd9", "madd9", "-add9"),
}

# Slash chords display their bass with Unicode accidentals
for _suffix in Suffix:
    if _suffix.is_slash:
        _quality, _bass = _suffix.value.split("/")
        _bass_symbol = to_symbol(_bass)
        if _quality == "m":
            SUFFIX_INFO[_suffix] = SuffixInfo(_MIN, f"m/{_bass_symbol}", f"m/{_bass_symbol}", f"-/{_bass_symbol}")
        else:
            SUFFIX_INFO[_suffix] = SuffixInfo(_MAJ, f"/{_bass_symbol}", f"/{_bass_symbol}", f"/{_bass_symbol}")


class KeyFormat(Enum):
    """How the key is written in a chord name."""

    RAW = "raw"
    ACCESSIBLE = "accessible"
    SYMBOL = "symbol"


class SuffixFormat(Enum):
    """How the suffix is written in a chord name."""

    RAW = "raw"
    SHORT = "short"
    SYMBOLIZED = "symbolized"
    ALT_SYMBOL = "alt_symbol"


def format_key(key: Key, key_format: KeyFormat = KeyFormat.RAW) -> str:
    """Render a key in the requested format.

    Examples
    --------
    >>> format_key(Key.B_FLAT, KeyFormat.ACCESSIBLE)
    'B flat'
    """
    if key_format is KeyFormat.ACCESSIBLE:
        return key.display.accessible
    if key_format is KeyFormat.SYMBOL:
        return key.display.symbol
    return key.value


def format_suffix(suffix: Suffix, suffix_format: SuffixFormat = SuffixFormat.RAW) -> str:
    """Render a suffix in the requested format.

    Examples
    --------
    >>> format_suffix(Suffix.MINOR_SEVEN_FLAT_FIVE, SuffixFormat.SYMBOLIZED)
    'ø7'
    """
    info = suffix.info
    if suffix_format is SuffixFormat.SHORT:
        return info.short
    if suffix_format is SuffixFormat.SYMBOLIZED:
        return info.symbolized
    if suffix_format is SuffixFormat.ALT_SYMBOL:
        return info.alt_symbol
    return suffix.value
