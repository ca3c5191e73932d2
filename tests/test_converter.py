import pytest

from chord_player import (
    ChordName,
    ChordPlayer,
    ParseError,
    UnknownQualityError,
    from_pychord,
    pychord_quality_to_quality,
    resolve_by_name,
)
from chord_player.converter import PYCHORD_TO_QUALITY
from chord_player.pitch_class import QUALITY_INTERVALS


class TestQualityMapping:
    def test_major(self):
        assert pychord_quality_to_quality("") == "maj"

    def test_minor(self):
        assert pychord_quality_to_quality("m") == "min"

    def test_minor7(self):
        assert pychord_quality_to_quality("m7") == "min7"

    def test_maj7_alias(self):
        assert pychord_quality_to_quality("M7") == "maj7"

    def test_half_diminished(self):
        assert pychord_quality_to_quality("m7-5") == "min7b5"

    def test_minor_major7(self):
        assert pychord_quality_to_quality("mM7") == "minmaj7"

    def test_every_target_is_playable(self):
        assert set(PYCHORD_TO_QUALITY.values()) <= set(QUALITY_INTERVALS)

    def test_unknown_quality_raises(self):
        with pytest.raises(UnknownQualityError, match="Unknown pychord quality"):
            pychord_quality_to_quality("sus4")


class TestFromPychord:
    def test_simple_major(self):
        assert from_pychord("C") == ChordName("Cmaj")

    def test_minor_seventh(self):
        assert from_pychord("Gm7") == ChordName("Gmin7")

    def test_flat_root(self):
        assert from_pychord("Bbm") == ChordName("Bbmin")

    def test_sharp_root(self):
        assert from_pychord("F#dim7") == ChordName("F#dim7")

    def test_resolves_like_native_name(self):
        assert resolve_by_name(from_pychord("Ebmaj7").symbol) == resolve_by_name("Ebmaj7")

    def test_playable(self):
        chord = ChordPlayer(from_pychord("Am"))
        assert chord.get_chord_info() == ["A4", "C5", "E5"]

    def test_unsupported_quality(self):
        with pytest.raises(UnknownQualityError):
            from_pychord("Csus4")

    def test_slash_chord_rejected(self):
        with pytest.raises(ParseError, match="slash"):
            from_pychord("C/E")

    def test_unparseable(self):
        with pytest.raises(ParseError):
            from_pychord("Hm7")
