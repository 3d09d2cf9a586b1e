"""Chord diagram layout.

This module computes the grid geometry of a chord diagram for a target
rectangle and emits the diagram as an ordered tuple of primitives:

1. string lines, fret lines and the base-fret number,
2. barre bars with their finger numbers,
3. one marker per string (open circle, muted cross or fretted dot),
4. the chord name, when requested.

Examples
--------
>>> from chord_diagram import ChordRecord, Key, Rect, Suffix, layout_chord
>>> c = ChordRecord((-1, 3, 2, 0, 1, 0), (0, 3, 2, 0, 1, 0), 1, (), (), Key.C, Suffix.MAJOR)
>>> primitives = layout_chord(c, Rect(width=100, height=130))
>>> primitives[-1].text
'C major'
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chord_diagram.barre import is_dot_suppressed, resolve_barres
from chord_diagram.display import display_texts, label_size_ratio
from chord_diagram.identifiers import KeyFormat, SuffixFormat, format_key, format_suffix
from chord_diagram.models import (
    FRET_COUNT,
    MUTED,
    OPEN,
    STRING_COUNT,
    ChordRecord,
    DisplayMode,
    GuitarTuning,
    LineConfig,
    Rect,
)
from chord_diagram.primitives import Bar, Circle, Cross, Line, Primitive, Text
from chord_diagram.scale_degree import scale_degrees
from chord_diagram.tuning import STANDARD

logger = logging.getLogger(__name__)

LayoutObserver = Callable[[Primitive], None]

# Modes in which the barre bar shows the barring finger
BARRE_FINGER_MODES: frozenset[DisplayMode] = frozenset({DisplayMode.FINGERS})


@dataclass(frozen=True)
class ChordNameOptions:
    """Whether and how the chord name is written above the grid.

    Parameters
    ----------
    show : bool
        Reserve the header area and emit the name text (default True).
    key_format : KeyFormat
        Spelling of the key (default raw, e.g. "Bb").
    suffix_format : SuffixFormat
        Spelling of the suffix (default raw, e.g. "m7b5").
    """

    show: bool = True
    key_format: KeyFormat = KeyFormat.RAW
    suffix_format: SuffixFormat = SuffixFormat.RAW


@dataclass(frozen=True)
class DiagramOptions:
    """Presentation options for `layout_chord`.

    Parameters
    ----------
    show_fingers : bool
        Put labels on the string markers (default True).
    chord_name : ChordNameOptions
        Chord name header settings.
    for_print : bool
        Renderer hint to use fixed ink instead of adaptive colors. The
        layout itself is unaffected.
    mirror : bool
        Flip markers and barres horizontally for left-handed players.
    show_nut : bool
        Draw a thick nut line when the diagram starts at fret 1.
    display_mode : DisplayMode
        What the marker labels show.
    tuning : GuitarTuning | None
        Tuning used for note names and degrees; None means standard.
    observer : LayoutObserver | None
        Called with every primitive as it is emitted.
    """

    show_fingers: bool = True
    chord_name: ChordNameOptions = field(default_factory=ChordNameOptions)
    for_print: bool = False
    mirror: bool = False
    show_nut: bool = True
    display_mode: DisplayMode = DisplayMode.FINGERS
    tuning: GuitarTuning | None = None
    observer: LayoutObserver | None = field(default=None, compare=False)

    @property
    def effective_tuning(self) -> GuitarTuning:
        return self.tuning if self.tuning is not None else STANDARD


@dataclass(frozen=True)
class DiagramGeometry:
    """Grid geometry derived from the target rectangle.

    ``frets`` describes the horizontal fret lines (spacing is vertical,
    length horizontal); ``strings`` describes the vertical string lines.
    """

    scale: float
    height: float
    origin_x: float
    origin_y: float
    frets: LineConfig
    strings: LineConfig



def compute_geometry(rect: Rect, show_chord_name: bool = True) -> DiagramGeometry:
    """Fit the diagram into ``rect``, keeping its aspect ratio.

    A zero or negative rectangle collapses every dimension to zero.

    Examples
    --------
    >>> geometry = compute_geometry(Rect(width=100, height=130))
    >>> geometry.scale, geometry.height
    (100.0, 130.0)
    >>> geometry.strings.spacing
    16.0
    """
    height_multiplier = 1.3 if show_chord_name else 1.2
    scale = max(0.0, float(min(rect.height / height_multiplier, rect.width)))
    diagram_height = scale * height_multiplier

    string_margin = scale / 10
    fret_margin = diagram_height / 10
    fret_length = scale - 2 * string_margin
    string_length = diagram_height - fret_margin * (2.8 if show_chord_name else 2)

    frets = LineConfig(
        spacing=string_length / FRET_COUNT,
        margin=fret_margin,
        length=fret_length,
        count=FRET_COUNT,
    )
    strings = LineConfig(
        spacing=fret_length / (STRING_COUNT - 1),
        margin=string_margin,
        length=string_length,
        count=STRING_COUNT - 1,
    )
    return DiagramGeometry(
        scale=scale,
        height=diagram_height,
        origin_x=rect.x,
        origin_y=fret_margin * 1.2 if show_chord_name else 0.0,
        frets=frets,
        strings=strings,
    )


def mirror_x(x: float, width: float, mirror: bool) -> float:
    """Reflect ``x`` inside ``[0, width]`` when ``mirror`` is set.

    Examples
    --------
    >>> mirror_x(10.0, 100.0, True)
    90.0
    >>> mirror_x(mirror_x(10.0, 100.0, True), 100.0, True)
    10.0
    """
    return width - x if mirror else x


def chord_name_text(record: ChordRecord, options: ChordNameOptions | None = None) -> str:
    """Compose the chord name header.

    Examples
    --------
    >>> from chord_diagram.identifiers import Key, Suffix
    >>> c = ChordRecord((-1, 3, 2, 0, 1, 0), (0, 3, 2, 0, 1, 0), 1, (), (), Key.C_SHARP, Suffix.MINOR)
    >>> chord_name_text(c, ChordNameOptions(key_format=KeyFormat.SYMBOL, suffix_format=SuffixFormat.SHORT))
    'C♯ m'
    """
    options = options or ChordNameOptions()
    return f"{format_key(record.key, options.key_format)} {format_suffix(record.suffix, options.suffix_format)}"


def _grid(record: ChordRecord, geometry: DiagramGeometry, show_nut: bool) -> list[Primitive]:
    frets, strings = geometry.frets, geometry.strings
    ox, oy = geometry.origin_x, geometry.origin_y
    primitives: list[Primitive] = []

    top = frets.margin + oy
    bottom = strings.length + frets.margin + oy
    for string in range(strings.count + 1):
        x = strings.position(string, ox)
        primitives.append(Line(x, top, x, bottom, strings.spacing / 24, "string"))

    left = ox + strings.margin
    for fret in range(frets.count + 1):
        y = frets.position(fret, oy)
        if fret == 0 and record.base_fret == 1 and show_nut:
            primitives.append(Line(left, y, left + frets.length, y, frets.spacing / 5, "nut"))
        else:
            primitives.append(Line(left, y, left + frets.length, y, frets.spacing / 24, "fret"))

    if record.base_fret != 1:
        primitives.append(
            Text(
                x=strings.margin / 5 + ox,
                y=oy + frets.spacing / 2 + frets.margin,
                text=str(record.base_fret),
                size=frets.margin * 0.5,
                kind="fret_number",
            )
        )
    return primitives


def _barres(
    record: ChordRecord, geometry: DiagramGeometry, options: DiagramOptions, width: float
) -> list[Primitive]:
    frets, strings = geometry.frets, geometry.strings
    primitives: list[Primitive] = []
    offset = strings.spacing / 7
    show_finger = options.show_fingers and options.display_mode in BARRE_FINGER_MODES

    for span in resolve_barres(record):
        x1 = span.start * strings.spacing + strings.margin + geometry.origin_x + offset
        x2 = x1 + strings.spacing * span.length - strings.spacing - offset * 2
        y = span.fret * frets.spacing + frets.margin - frets.spacing / 2 + geometry.origin_y
        primitives.append(
            Bar(
                x1=mirror_x(x1, width, options.mirror),
                x2=mirror_x(x2, width, options.mirror),
                y=y,
                thickness=frets.spacing * 0.65,
                fret=span.fret,
                start=span.start,
                end=span.end,
            )
        )
        if show_finger:
            finger = record.fingers[record.frets.index(span.fret)]
            primitives.append(
                Text(
                    x=mirror_x(x1 + (x2 - x1) / 2, width, options.mirror),
                    y=y,
                    text=str(finger),
                    size=strings.margin,
                    kind="barre_finger",
                )
            )
    return primitives


def _markers(
    record: ChordRecord, geometry: DiagramGeometry, options: DiagramOptions, width: float
) -> list[Primitive]:
    frets, strings = geometry.frets, geometry.strings
    tuning = options.effective_tuning
    labels = display_texts(record, options.display_mode, tuning) if options.show_fingers else None
    degrees = scale_degrees(record, tuning)
    marker_size = frets.spacing * 0.33
    stroke = frets.spacing / 24
    primitives: list[Primitive] = []

    for index, fret in enumerate(record.frets):
        x = mirror_x(strings.position(index, geometry.origin_x), width, options.mirror)
        label = labels[index] if labels is not None else None

        if fret == MUTED:
            y = frets.margin - marker_size * 1.1 + geometry.origin_y
            primitives.append(Cross(x=x, y=y, size=marker_size, string_index=index, stroke=stroke))
            continue

        if fret == OPEN:
            y = frets.margin - marker_size * 1.1 + geometry.origin_y
            primitives.append(
                Circle(
                    x=x,
                    y=y,
                    radius=marker_size / 2,
                    string_index=index,
                    fret=fret,
                    filled=False,
                    label=label,
                    label_size=marker_size * label_size_ratio(label) if label else 0.0,
                    degree=degrees[index],
                    stroke=stroke,
                )
            )
            continue

        if is_dot_suppressed(record.frets, record.barres, index, options.display_mode):
            logger.debug("String %d is covered by the barre at fret %d", index, fret)
            continue

        y = fret * frets.spacing + frets.margin - frets.spacing / 2 + geometry.origin_y
        primitives.append(
            Circle(
                x=x,
                y=y,
                radius=frets.spacing * 0.35,
                string_index=index,
                fret=fret,
                filled=True,
                label=label,
                label_size=strings.margin * label_size_ratio(label) if label else 0.0,
                degree=degrees[index],
            )
        )
    return primitives


def _chord_name(record: ChordRecord, geometry: DiagramGeometry, options: ChordNameOptions) -> Text:
    return Text(
        x=geometry.scale / 2 + geometry.origin_x,
        y=(geometry.origin_y + geometry.frets.margin) * 0.35,
        text=chord_name_text(record, options),
        size=geometry.frets.margin,
        kind="chord_name",
    )


def layout_chord(
    record: ChordRecord,
    rect: Rect,
    options: DiagramOptions | None = None,
) -> tuple[Primitive, ...]:
    """Lay out a chord diagram.

    Parameters
    ----------
    record : ChordRecord
        The voicing to draw.
    rect : Rect
        Target rectangle. The diagram keeps its aspect ratio and is
        sized by the limiting side.
    options : DiagramOptions | None
        Presentation options; defaults to `DiagramOptions()`.

    Returns
    -------
    tuple[Primitive, ...]
        Grid lines, barres, string markers and the chord name, in
        drawing order.
    """
    options = options or DiagramOptions()
    geometry = compute_geometry(rect, options.chord_name.show)
    width = rect.width
    logger.debug(
        "Laying out %s in %sx%s (scale=%.3f, mode=%s, mirror=%s)",
        record.name,
        rect.width,
        rect.height,
        geometry.scale,
        options.display_mode.value,
        options.mirror,
    )

    primitives = _grid(record, geometry, options.show_nut)
    primitives.extend(_barres(record, geometry, options, width))
    primitives.extend(_markers(record, geometry, options, width))
    if options.chord_name.show:
        primitives.append(_chord_name(record, geometry, options.chord_name))

    if options.observer is not None:
        for primitive in primitives:
            options.observer(primitive)

    return tuple(primitives)
