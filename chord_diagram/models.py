"""Data models for chord diagrams.

This module provides the immutable records the layout engine consumes:
a chord fingering (`ChordRecord`), a guitar tuning (`GuitarTuning`) and
the small geometry value objects shared by the layout code.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from chord_diagram.errors import ValidationError
from chord_diagram.identifiers import Key, Suffix
from chord_diagram.pitch_class import note_to_pc

STRING_COUNT = 6
FRET_COUNT = 5
MUTED = -1
OPEN = 0

# Octave of each open string in the default register (E2 A2 D3 G3 B3 E4)
DEFAULT_OCTAVES: tuple[int, ...] = (2, 2, 3, 3, 3, 4)


class DisplayMode(Enum):
    """What to print inside each dot of a diagram."""

    FINGERS = "Fingers"
    NOTES_NO_OCTAVE = "Notes"
    FUNCTIONS = "Functions"
    BLANK = "Blank"


@dataclass(frozen=True)
class Rect:
    """Target drawing rectangle.

    Parameters
    ----------
    width : float
        Available width.
    height : float
        Available height.
    x : float
        Left edge; the diagram is laid out from this x offset. The top
        edge is always 0.
    """

    width: float
    height: float
    x: float = 0.0


@dataclass(frozen=True)
class LineConfig:
    """Spacing of one family of grid lines (strings or frets).

    Parameters
    ----------
    spacing : float
        Distance between adjacent lines.
    margin : float
        Offset of the first line from the diagram edge.
    length : float
        Length of each line.
    count : int
        Number of gaps between lines; ``count + 1`` lines are drawn.
    """

    spacing: float
    margin: float
    length: float
    count: int

    def position(self, index: int, origin: float = 0.0) -> float:
        """Coordinate of the line at ``index``."""
        return self.spacing * index + self.margin + origin


@dataclass(frozen=True)
class GuitarTuning:
    """Named set of open-string pitches, low string first.

    Parameters
    ----------
    name : str
        Display name (e.g., "Drop D").
    note_names : tuple[str, ...]
        Six pitch-class names, ASCII or Unicode accidentals.

    Examples
    --------
    >>> tuning = GuitarTuning("Standard", ("E", "A", "D", "G", "B", "E"))
    >>> tuning.midi_notes
    (40, 45, 50, 55, 59, 64)
    """

    name: str
    note_names: tuple[str, ...]
    midi_notes: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        names = tuple(self.note_names)
        if len(names) != STRING_COUNT:
            msg = f"Tuning {self.name!r} must have {STRING_COUNT} notes, got {len(names)}"
            raise ValidationError(msg)
        try:
            midi = tuple(
                (octave + 1) * 12 + note_to_pc(name) for name, octave in zip(names, DEFAULT_OCTAVES, strict=True)
            )
        except ValueError as err:
            msg = f"Tuning {self.name!r} has an invalid note: {err}"
            raise ValidationError(msg) from err
        object.__setattr__(self, "note_names", names)
        object.__setattr__(self, "midi_notes", midi)


def _int_tuple(values: Sequence[int], field_name: str) -> tuple[int, ...]:
    try:
        return tuple(int(v) for v in values)
    except (TypeError, ValueError) as err:
        msg = f"{field_name} must be a sequence of integers: {values!r}"
        raise ValidationError(msg) from err


@dataclass(frozen=True)
class ChordRecord:
    """One voicing of a chord: which fret and finger each string uses.

    Parameters
    ----------
    frets : tuple[int, ...]
        Six fret values, low string first: -1 muted, 0 open, otherwise
        fretted relative to ``base_fret``.
    fingers : tuple[int, ...]
        Six finger numbers, 0 where no finger is used.
    base_fret : int
        Fret represented by the first row of the diagram.
    barres : tuple[int, ...]
        Fret values (as they appear in ``frets``) played with a barre.
    midi : tuple[int, ...]
        Absolute MIDI numbers of the sounding strings, as cached by the
        chord library.
    key : Key
        Chord root.
    suffix : Suffix
        Chord quality.
    capo : bool | None
        Informational capo flag; it does not affect the layout.

    Raises
    ------
    ValidationError
        If the fingering violates the record invariants.

    Examples
    --------
    >>> record = ChordRecord(
    ...     frets=(-1, 3, 2, 0, 1, 0),
    ...     fingers=(0, 3, 2, 0, 1, 0),
    ...     base_fret=1,
    ...     barres=(),
    ...     midi=(48, 52, 55, 60, 64),
    ...     key=Key.C,
    ...     suffix=Suffix.MAJOR,
    ... )
    >>> record.name
    'C major'
    """

    frets: tuple[int, ...]
    fingers: tuple[int, ...]
    base_fret: int
    barres: tuple[int, ...]
    midi: tuple[int, ...]
    key: Key
    suffix: Suffix
    capo: bool | None = None

    def __post_init__(self) -> None:
        frets = _int_tuple(self.frets, "frets")
        fingers = _int_tuple(self.fingers, "fingers")
        barres = _int_tuple(self.barres, "barres")
        midi = _int_tuple(self.midi, "midi")
        try:
            base_fret = int(self.base_fret)
        except (TypeError, ValueError) as err:
            msg = f"base_fret must be an integer: {self.base_fret!r}"
            raise ValidationError(msg) from err

        if len(frets) != STRING_COUNT:
            msg = f"frets must have {STRING_COUNT} values, got {len(frets)}"
            raise ValidationError(msg)
        if len(fingers) != STRING_COUNT:
            msg = f"fingers must have {STRING_COUNT} values, got {len(fingers)}"
            raise ValidationError(msg)
        if any(fret < MUTED for fret in frets):
            msg = f"frets must be -1 (muted) or greater: {frets}"
            raise ValidationError(msg)
        if any(finger < 0 for finger in fingers):
            msg = f"fingers must not be negative: {fingers}"
            raise ValidationError(msg)
        if base_fret < 1:
            msg = f"base_fret must be at least 1, got {base_fret}"
            raise ValidationError(msg)
        fretted = {fret for fret in frets if fret >= 1}
        stray = [barre for barre in barres if barre not in fretted]
        if stray:
            msg = f"barres {stray} do not match any fretted string in {frets}"
            raise ValidationError(msg)
        if not isinstance(self.key, Key):
            msg = f"key must be a Key, got {self.key!r}"
            raise ValidationError(msg)
        if not isinstance(self.suffix, Suffix):
            msg = f"suffix must be a Suffix, got {self.suffix!r}"
            raise ValidationError(msg)

        object.__setattr__(self, "frets", frets)
        object.__setattr__(self, "fingers", fingers)
        object.__setattr__(self, "base_fret", base_fret)
        object.__setattr__(self, "barres", barres)
        object.__setattr__(self, "midi", midi)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        key: Key | str | None = None,
        suffix: Suffix | str | None = None,
    ) -> ChordRecord:
        """Build a record from a chord-library position.

        Parameters
        ----------
        data : Mapping[str, Any]
            Position with ``frets``, ``fingers``, ``baseFret``, ``barres``,
            ``midi`` and optionally ``capo``, ``key`` and ``suffix``.
        key : Key | str | None
            Key of the enclosing chord entry, overriding ``data["key"]``.
        suffix : Suffix | str | None
            Suffix of the enclosing chord entry, overriding ``data["suffix"]``.

        Raises
        ------
        UnknownIdentifierError
            If the key or suffix is not recognized.
        ValidationError
            If a field is missing or the fingering is invalid.
        """
        if not isinstance(data, Mapping):
            msg = f"chord position must be a mapping, got {type(data).__name__}"
            raise ValidationError(msg)

        raw_key = key if key is not None else data.get("key")
        raw_suffix = suffix if suffix is not None else data.get("suffix")
        if raw_key is None or raw_suffix is None:
            msg = "chord position needs a key and a suffix"
            raise ValidationError(msg)

        try:
            frets = data["frets"]
            fingers = data["fingers"]
        except KeyError as err:
            msg = f"chord position is missing {err.args[0]!r}"
            raise ValidationError(msg) from err
        try:
            base_fret = int(data.get("baseFret", 1))
        except (TypeError, ValueError) as err:
            msg = f"baseFret must be an integer: {data.get('baseFret')!r}"
            raise ValidationError(msg) from err

        return cls(
            frets=frets,
            fingers=fingers,
            base_fret=base_fret,
            barres=data.get("barres", ()),
            midi=data.get("midi", ()),
            key=raw_key if isinstance(raw_key, Key) else Key.parse(raw_key),
            suffix=raw_suffix if isinstance(raw_suffix, Suffix) else Suffix.parse(raw_suffix),
            capo=data.get("capo"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the chord-library position layout."""
        result: dict[str, Any] = {
            "frets": list(self.frets),
            "fingers": list(self.fingers),
            "baseFret": self.base_fret,
            "barres": list(self.barres),
            "midi": list(self.midi),
            "key": self.key.value,
            "suffix": self.suffix.value,
        }
        if self.capo is not None:
            result["capo"] = self.capo
        return result

    def with_capo(self, capo: bool | None) -> ChordRecord:
        """Return a copy with the capo flag changed."""
        return replace(self, capo=capo)

    @property
    def name(self) -> str:
        return f"{self.key.value} {self.suffix.value}"

    def is_muted(self, string_index: int) -> bool:
        return self.frets[string_index] == MUTED

    def sounding_midi(self, tuning: GuitarTuning) -> tuple[int, ...]:
        """MIDI numbers of the non-muted strings under ``tuning``, low to high."""
        return tuple(
            tuning.midi_notes[index] + (self.base_fret - 1) + fret
            for index, fret in enumerate(self.frets)
            if fret != MUTED
        )

    def __str__(self) -> str:
        return self.name
