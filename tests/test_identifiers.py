"""Tests for key and suffix identifiers."""

import pytest

from chord_diagram import Key, KeyFormat, Suffix, SuffixFormat, SuffixGroup, UnknownIdentifierError
from chord_diagram.identifiers import SUFFIX_INFO, format_key, format_suffix


class TestKey:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("C", Key.C),
            ("Bb", Key.B_FLAT),
            ("B♭", Key.B_FLAT),
            ("F♯", Key.F_SHARP),
            (" Eb ", Key.E_FLAT),
        ],
    )
    def test_parse(self, text: str, expected: Key) -> None:
        assert Key.parse(text) is expected

    @pytest.mark.parametrize("text", ["H", "Cb", "", "c"])
    def test_parse_unknown(self, text: str) -> None:
        with pytest.raises(UnknownIdentifierError, match="Unknown key"):
            Key.parse(text)

    @pytest.mark.parametrize("value", [5, None, ["C"]])
    def test_parse_non_string(self, value: object) -> None:
        with pytest.raises(UnknownIdentifierError, match="Unknown key"):
            Key.parse(value)  # type: ignore[arg-type]

    def test_seventeen_spellings(self) -> None:
        assert len(Key) == 17

    def test_enharmonic_pitch_classes(self) -> None:
        assert Key.C_SHARP.pitch_class == Key.D_FLAT.pitch_class == 1
        assert Key.A_SHARP.pitch_class == Key.B_FLAT.pitch_class == 10

    @pytest.mark.parametrize(
        ("key", "accessible", "symbol"),
        [
            (Key.C, "C", "C"),
            (Key.C_SHARP, "C sharp", "C♯"),
            (Key.B_FLAT, "B flat", "B♭"),
        ],
    )
    def test_display(self, key: Key, accessible: str, symbol: str) -> None:
        assert key.display.accessible == accessible
        assert key.display.symbol == symbol

    def test_format_key(self) -> None:
        assert format_key(Key.G_FLAT) == "Gb"
        assert format_key(Key.G_FLAT, KeyFormat.ACCESSIBLE) == "G flat"
        assert format_key(Key.G_FLAT, KeyFormat.SYMBOL) == "G♭"


class TestSuffix:
    def test_every_suffix_has_info(self) -> None:
        assert set(SUFFIX_INFO) == set(Suffix)

    def test_parse(self) -> None:
        assert Suffix.parse("m7b5") is Suffix.MINOR_SEVEN_FLAT_FIVE
        assert Suffix.parse("m/G") is Suffix.MINOR_SLASH_G

    def test_parse_unknown(self) -> None:
        with pytest.raises(UnknownIdentifierError, match="Unknown suffix"):
            Suffix.parse("maj15")

    @pytest.mark.parametrize("value", [7, None, ["m7"]])
    def test_parse_non_string(self, value: object) -> None:
        with pytest.raises(UnknownIdentifierError, match="Unknown suffix"):
            Suffix.parse(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("suffix", "group"),
        [
            (Suffix.MAJOR, SuffixGroup.MAJOR),
            (Suffix.MINOR_SEVEN, SuffixGroup.MINOR),
            (Suffix.MINOR_SEVEN_FLAT_FIVE, SuffixGroup.DIMINISHED),
            (Suffix.AUG7, SuffixGroup.AUGMENTED),
            (Suffix.SEVEN, SuffixGroup.DOMINANT),
            (Suffix.THIRTEEN, SuffixGroup.EXTENDED),
            (Suffix.SUS4, SuffixGroup.OTHER),
            (Suffix.SLASH_E, SuffixGroup.MAJOR),
            (Suffix.MINOR_SLASH_G, SuffixGroup.MINOR),
        ],
    )
    def test_group(self, suffix: Suffix, group: SuffixGroup) -> None:
        assert suffix.group is group

    @pytest.mark.parametrize(
        ("suffix", "expected"),
        [
            (Suffix.NINE, True),
            (Suffix.MINOR_NINE, True),
            (Suffix.AUG9, True),
            (Suffix.NINE_FLAT_FIVE, False),
            (Suffix.MINOR_MAJ9, False),
            (Suffix.MINOR_MAJ11, True),
            (Suffix.MAJ13, True),
            (Suffix.SEVEN, False),
            (Suffix.MINOR_SEVEN, False),
            (Suffix.ADD9, False),
        ],
    )
    def test_is_extended(self, suffix: Suffix, expected: bool) -> None:
        assert suffix.is_extended is expected

    def test_feature_flags(self) -> None:
        assert Suffix.SEVEN_SHARP_NINE.info.has_sharp_nine
        assert Suffix.SEVEN_FLAT_NINE.info.has_flat_nine
        assert Suffix.NINE_SHARP_ELEVEN.info.has_sharp_eleventh
        assert Suffix.MINOR_MAJ7.info.has_major_seventh
        assert Suffix.MINOR_MAJ7.info.has_seventh
        assert not Suffix.NINE.info.has_seventh
        assert not Suffix.MAJ9.info.has_major_seventh
        assert not Suffix.SEVEN_SUS4.info.has_seventh

    def test_is_slash(self) -> None:
        assert Suffix.SLASH_F_SHARP.is_slash
        assert not Suffix.MAJOR.is_slash

    @pytest.mark.parametrize(
        ("suffix", "suffix_format", "expected"),
        [
            (Suffix.MINOR_SEVEN_FLAT_FIVE, SuffixFormat.RAW, "m7b5"),
            (Suffix.MINOR_SEVEN_FLAT_FIVE, SuffixFormat.SHORT, "m7♭5"),
            (Suffix.MINOR_SEVEN_FLAT_FIVE, SuffixFormat.SYMBOLIZED, "ø7"),
            (Suffix.MINOR_SEVEN_FLAT_FIVE, SuffixFormat.ALT_SYMBOL, "-7(♭5)"),
            (Suffix.MAJ7, SuffixFormat.SYMBOLIZED, "Δ7"),
            (Suffix.MAJOR, SuffixFormat.SHORT, ""),
            (Suffix.SLASH_B_FLAT, SuffixFormat.SHORT, "/B♭"),
            (Suffix.MINOR_SLASH_F_SHARP, SuffixFormat.ALT_SYMBOL, "-/F♯"),
        ],
    )
    def test_format_suffix(self, suffix: Suffix, suffix_format: SuffixFormat, expected: str) -> None:
        assert format_suffix(suffix, suffix_format) == expected
