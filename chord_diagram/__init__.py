"""Chord diagram library for laying out guitar chord charts.

This library turns a chord fingering into a renderer-independent list of
geometry primitives and labels each dot with a finger number, a note
name or the note's scale degree.

Examples
--------
>>> from chord_diagram import ChordRecord, DiagramOptions, DisplayMode, Key, Rect, Suffix, layout_chord

>>> # C major, open position
>>> c = ChordRecord(
...     frets=(-1, 3, 2, 0, 1, 0),
...     fingers=(0, 3, 2, 0, 1, 0),
...     base_fret=1,
...     barres=(),
...     midi=(48, 52, 55, 60, 64),
...     key=Key.C,
...     suffix=Suffix.MAJOR,
... )
>>> primitives = layout_chord(c, Rect(width=120, height=160))

>>> # Label the dots with scale degrees instead of fingers
>>> from chord_diagram import display_texts
>>> display_texts(c, DisplayMode.FUNCTIONS)
(None, 'R', '3', '5', 'R', '3')
"""

import logging

from chord_diagram.barre import BarreSpan, is_dot_suppressed, resolve_barre_span, resolve_barres
from chord_diagram.catalog import CatalogResult, RejectedPosition, load_catalog, parse_catalog, parse_chord_entry
from chord_diagram.converter import chord_symbol, parse_chord_symbol
from chord_diagram.display import display_texts, label_for
from chord_diagram.errors import UnknownIdentifierError, ValidationError
from chord_diagram.identifiers import Key, KeyFormat, Suffix, SuffixFormat, SuffixGroup
from chord_diagram.layout import (
    ChordNameOptions,
    DiagramGeometry,
    DiagramOptions,
    chord_name_text,
    compute_geometry,
    layout_chord,
    mirror_x,
)
from chord_diagram.models import ChordRecord, DisplayMode, GuitarTuning, LineConfig, Rect
from chord_diagram.notes import fretted_midi, midi_to_name, note_names_only, should_use_flats, string_notes
from chord_diagram.primitives import Bar, Circle, Cross, Line, Primitive, Text
from chord_diagram.scale_degree import NoteRole, note_roles, scale_degree, scale_degrees
from chord_diagram.tuning import ALL_PRESETS, STANDARD, open_string_midi, tuning_by_name

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALL_PRESETS",
    "STANDARD",
    "Bar",
    "BarreSpan",
    "CatalogResult",
    "ChordNameOptions",
    "ChordRecord",
    "Circle",
    "Cross",
    "DiagramGeometry",
    "DiagramOptions",
    "DisplayMode",
    "GuitarTuning",
    "Key",
    "KeyFormat",
    "Line",
    "LineConfig",
    "NoteRole",
    "Primitive",
    "Rect",
    "RejectedPosition",
    "Suffix",
    "SuffixFormat",
    "SuffixGroup",
    "Text",
    "UnknownIdentifierError",
    "ValidationError",
    "chord_name_text",
    "chord_symbol",
    "compute_geometry",
    "display_texts",
    "fretted_midi",
    "is_dot_suppressed",
    "label_for",
    "layout_chord",
    "load_catalog",
    "midi_to_name",
    "mirror_x",
    "note_names_only",
    "note_roles",
    "open_string_midi",
    "parse_catalog",
    "parse_chord_entry",
    "parse_chord_symbol",
    "resolve_barre_span",
    "resolve_barres",
    "scale_degree",
    "scale_degrees",
    "should_use_flats",
    "string_notes",
    "tuning_by_name",
]
