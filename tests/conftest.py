import pytest

from chord_diagram import ChordRecord, Key, Suffix


@pytest.fixture
def c_major() -> ChordRecord:
    """C major, open position."""
    return ChordRecord(
        frets=(-1, 3, 2, 0, 1, 0),
        fingers=(0, 3, 2, 0, 1, 0),
        base_fret=1,
        barres=(),
        midi=(48, 52, 55, 60, 64),
        key=Key.C,
        suffix=Suffix.MAJOR,
    )


@pytest.fixture
def f_major() -> ChordRecord:
    """F major, full barre at the first fret."""
    return ChordRecord(
        frets=(1, 3, 3, 2, 1, 1),
        fingers=(1, 3, 4, 2, 1, 1),
        base_fret=1,
        barres=(1,),
        midi=(41, 48, 53, 57, 60, 65),
        key=Key.F,
        suffix=Suffix.MAJOR,
    )


@pytest.fixture
def c_minor_barre() -> ChordRecord:
    """C minor, A-string barre with the diagram starting at fret 3."""
    return ChordRecord(
        frets=(-1, 1, 3, 3, 2, 1),
        fingers=(0, 1, 3, 4, 2, 1),
        base_fret=3,
        barres=(1,),
        midi=(48, 55, 60, 63, 67),
        key=Key.C,
        suffix=Suffix.MINOR,
    )


@pytest.fixture
def e_major() -> ChordRecord:
    """E major, open position."""
    return ChordRecord(
        frets=(0, 2, 2, 1, 0, 0),
        fingers=(0, 2, 3, 1, 0, 0),
        base_fret=1,
        barres=(),
        midi=(40, 47, 52, 56, 59, 64),
        key=Key.E,
        suffix=Suffix.MAJOR,
    )
