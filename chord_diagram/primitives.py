"""Geometry primitives emitted by the layout engine.

A laid-out diagram is a flat, ordered tuple of these values. Renderers
walk it once and draw each primitive in order; colors and fonts are
chosen by the renderer, never here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LineKind = Literal["string", "fret", "nut"]
TextKind = Literal["fret_number", "barre_finger", "chord_name"]


@dataclass(frozen=True)
class Line:
    """A straight grid line.

    Parameters
    ----------
    x1, y1, x2, y2 : float
        End points.
    weight : float
        Stroke width.
    kind : LineKind
        "string", "fret" or "nut" (the thick top fret).
    """

    x1: float
    y1: float
    x2: float
    y2: float
    weight: float
    kind: LineKind


@dataclass(frozen=True)
class Circle:
    """A string marker: hollow above the nut for open strings, filled on
    the fretboard for fretted strings.

    Parameters
    ----------
    x, y : float
        Center.
    radius : float
        Radius.
    string_index : int
        String the marker belongs to.
    fret : int
        Fret value of the string (0 for open).
    filled : bool
        True for fretted dots, False for open-string circles.
    label : str | None
        Text to print on the marker, None when labels are hidden.
    label_size : float
        Suggested text height for ``label``.
    degree : str | None
        Scale-degree label of the sounding note, for renderers that
        style dots by function.
    stroke : float
        Outline width of hollow circles.
    """

    x: float
    y: float
    radius: float
    string_index: int
    fret: int
    filled: bool
    label: str | None = None
    label_size: float = 0.0
    degree: str | None = None
    stroke: float = 0.0


@dataclass(frozen=True)
class Cross:
    """A muted-string marker centered at ``(x, y)`` with side ``size``."""

    x: float
    y: float
    size: float
    string_index: int
    stroke: float


@dataclass(frozen=True)
class Bar:
    """A barre bar from ``x1`` to ``x2`` at height ``y``.

    Parameters
    ----------
    x1, x2 : float
        Centers of the rounded end caps.
    y : float
        Vertical center of the bar.
    thickness : float
        Bar height.
    fret : int
        Barre fret, relative to the base fret.
    start, end : int
        Covered string range ``[start, end)``.
    """

    x1: float
    x2: float
    y: float
    thickness: float
    fret: int
    start: int
    end: int


@dataclass(frozen=True)
class Text:
    """A text anchor centered at ``(x, y)``."""

    x: float
    y: float
    text: str
    size: float
    kind: TextKind


Primitive = Line | Circle | Cross | Bar | Text
