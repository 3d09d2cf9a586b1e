"""Tests for chord-library decoding."""

import json
import logging

import pytest

from chord_diagram import (
    ChordRecord,
    Key,
    Suffix,
    UnknownIdentifierError,
    ValidationError,
    load_catalog,
    parse_catalog,
    parse_chord_entry,
)

C_MAJOR_POSITION = {
    "frets": [-1, 3, 2, 0, 1, 0],
    "fingers": [0, 3, 2, 0, 1, 0],
    "baseFret": 1,
    "barres": [],
    "midi": [48, 52, 55, 60, 64],
}

C_MAJOR_BARRE_POSITION = {
    "frets": [-1, 1, 3, 3, 3, 1],
    "fingers": [0, 1, 2, 3, 4, 1],
    "baseFret": 3,
    "barres": [1],
    "midi": [48, 55, 60, 64, 67],
}

BAD_POSITION = {
    "frets": [-1, 3, 2, 0, 1],
    "fingers": [0, 3, 2, 0, 1, 0],
    "baseFret": 1,
    "barres": [],
    "midi": [],
}


@pytest.fixture
def library() -> dict:
    return {
        "chords": {
            "C": [
                {"key": "C", "suffix": "major", "positions": [C_MAJOR_POSITION, BAD_POSITION, C_MAJOR_BARRE_POSITION]},
                {"key": "C", "suffix": "minor-ish", "positions": [C_MAJOR_POSITION]},
            ],
            "F#": [
                {"key": "F#", "suffix": "major", "positions": []},
            ],
        }
    }


class TestParseChordEntry:
    def test_decodes_every_position(self) -> None:
        records = parse_chord_entry({"key": "C", "suffix": "major", "positions": [C_MAJOR_POSITION, C_MAJOR_BARRE_POSITION]})
        assert [r.base_fret for r in records] == [1, 3]
        assert all(r.key is Key.C and r.suffix is Suffix.MAJOR for r in records)

    def test_invalid_position_raises(self) -> None:
        with pytest.raises(ValidationError):
            parse_chord_entry({"key": "C", "suffix": "major", "positions": [BAD_POSITION]})

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(UnknownIdentifierError, match="Unknown key"):
            parse_chord_entry({"key": "H", "suffix": "major", "positions": [C_MAJOR_POSITION]})

    def test_no_positions(self) -> None:
        assert parse_chord_entry({"key": "C", "suffix": "major"}) == []


class TestParseCatalog:
    def test_keeps_valid_records(self, library: dict) -> None:
        result = parse_catalog(library)
        assert len(result.records) == 2
        assert result.records[0].frets == (-1, 3, 2, 0, 1, 0)
        assert result.records[1].barres == (1,)

    def test_collects_rejections(self, library: dict) -> None:
        result = parse_catalog(library)
        assert [r.location for r in result.rejected] == ["C/major/1", "C/minor-ish/0"]
        assert isinstance(result.rejected[0].error, ValidationError)
        assert isinstance(result.rejected[1].error, UnknownIdentifierError)

    def test_logs_rejections(self, library: dict, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chord_diagram.catalog"):
            parse_catalog(library)
        assert len(caplog.records) == 2
        assert "C/major/1" in caplog.records[0].getMessage()

    def test_empty_document(self) -> None:
        result = parse_catalog({})
        assert result.records == ()
        assert result.rejected == ()

    def test_non_string_key_is_rejected_alone(self) -> None:
        result = parse_catalog(
            {
                "chords": {
                    "C": [
                        {"key": 5, "suffix": "major", "positions": [C_MAJOR_POSITION]},
                        {"key": "C", "suffix": "major", "positions": [C_MAJOR_POSITION]},
                    ]
                }
            }
        )
        assert len(result.records) == 1
        assert [r.location for r in result.rejected] == ["5/major/0"]
        assert isinstance(result.rejected[0].error, UnknownIdentifierError)

    def test_non_string_suffix_is_rejected_alone(self) -> None:
        result = parse_catalog(
            {"chords": {"C": [{"key": "C", "suffix": 7, "positions": [C_MAJOR_POSITION, C_MAJOR_POSITION]}]}}
        )
        assert result.records == ()
        assert [r.location for r in result.rejected] == ["C/7/0", "C/7/1"]

    def test_non_mapping_position_is_rejected_alone(self) -> None:
        result = parse_catalog(
            {"chords": {"C": [{"key": "C", "suffix": "major", "positions": [[-1, 3, 2, 0, 1, 0], C_MAJOR_POSITION]}]}}
        )
        assert len(result.records) == 1
        assert [r.location for r in result.rejected] == ["C/major/0"]
        assert isinstance(result.rejected[0].error, ValidationError)

    def test_non_mapping_entry_is_rejected_alone(self) -> None:
        result = parse_catalog(
            {"chords": {"C": ["C major", {"key": "C", "suffix": "major", "positions": [C_MAJOR_POSITION]}]}}
        )
        assert len(result.records) == 1
        assert [r.location for r in result.rejected] == ["C/0"]

    def test_group_key_used_when_entry_has_none(self) -> None:
        result = parse_catalog({"chords": {"Bb": [{"suffix": "major", "positions": [C_MAJOR_POSITION]}]}})
        assert result.records[0].key is Key.B_FLAT

    def test_to_dict_round_trip(self, library: dict) -> None:
        record = parse_catalog(library).records[0]
        assert ChordRecord.from_dict(record.to_dict()) == record


class TestLoadCatalog:
    def test_load_from_file(self, tmp_path, library: dict) -> None:
        path = tmp_path / "guitar.json"
        path.write_text(json.dumps(library), encoding="utf-8")
        result = load_catalog(path)
        assert len(result.records) == 2
        assert len(result.rejected) == 2

    def test_accepts_string_path(self, tmp_path, library: dict) -> None:
        path = tmp_path / "guitar.json"
        path.write_text(json.dumps(library), encoding="utf-8")
        assert len(load_catalog(str(path)).records) == 2

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.json")
