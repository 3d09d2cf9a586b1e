"""Chord-library decoding.

Chord libraries are JSON documents grouping voicings by key:

{
    "chords": {
        "C": [
            {"key": "C", "suffix": "major", "positions": [
                {"frets": [-1, 3, 2, 0, 1, 0], "fingers": [0, 3, 2, 0, 1, 0],
                 "baseFret": 1, "barres": [], "midi": [48, 52, 55, 60, 64]}
            ]}
        ]
    }
}

Each position is decoded on its own: an invalid position is reported in
the result without affecting the other records.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from chord_diagram.errors import ValidationError
from chord_diagram.models import ChordRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RejectedPosition:
    """A chord-library position that failed to decode.

    Parameters
    ----------
    location : str
        Where the position sits in the document (e.g., "C/major/2").
    error : ValueError
        The `ValidationError` or `UnknownIdentifierError` raised.
    """

    location: str
    error: ValueError


@dataclass(frozen=True)
class CatalogResult:
    """Decoded records and the positions that were rejected."""

    records: tuple[ChordRecord, ...]
    rejected: tuple[RejectedPosition, ...]


def parse_chord_entry(entry: dict[str, Any]) -> list[ChordRecord]:
    """Decode every position of one chord entry.

    Parameters
    ----------
    entry : dict[str, Any]
        Entry with "key", "suffix" and "positions".

    Returns
    -------
    list[ChordRecord]
        One record per position.

    Raises
    ------
    UnknownIdentifierError
        If the entry's key or suffix is not recognized.
    ValidationError
        If any position is invalid.
    """
    return [
        ChordRecord.from_dict(position, key=entry.get("key"), suffix=entry.get("suffix"))
        for position in entry.get("positions", [])
    ]


def parse_catalog(data: dict[str, Any]) -> CatalogResult:
    """Decode a whole chord library, collecting per-position failures.

    Parameters
    ----------
    data : dict[str, Any]
        Parsed chord-library document with a "chords" mapping.

    Returns
    -------
    CatalogResult
        Valid records in document order, plus the rejected positions.
    """
    records: list[ChordRecord] = []
    rejected: list[RejectedPosition] = []

    for group_key, entries in data.get("chords", {}).items():
        for entry_index, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                location = f"{group_key}/{entry_index}"
                msg = f"chord entry must be a mapping, got {type(entry).__name__}"
                err = ValidationError(msg)
                logger.warning("Rejected chord entry %s: %s", location, err)
                rejected.append(RejectedPosition(location=location, error=err))
                continue
            key = entry.get("key", group_key)
            suffix = entry.get("suffix")
            for index, position in enumerate(entry.get("positions", [])):
                location = f"{key}/{suffix}/{index}"
                try:
                    records.append(ChordRecord.from_dict(position, key=key, suffix=suffix))
                except ValueError as err:
                    logger.warning("Rejected chord position %s: %s", location, err)
                    rejected.append(RejectedPosition(location=location, error=err))

    return CatalogResult(records=tuple(records), rejected=tuple(rejected))


def load_catalog(path: str | Path) -> CatalogResult:
    """Load and decode a chord-library JSON file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    json.JSONDecodeError
        If the file is not valid JSON.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    return parse_catalog(data)
