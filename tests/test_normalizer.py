"""
Tests for biome name normalization
"""
import pytest

from queimadas.biomes.normalizer import normalize_biome_name, same_biome


class TestNormalizeBiomeName:
    """Test suite for normalize_biome_name."""

    def test_none_and_empty(self):
        """Missing labels have no key."""
        assert normalize_biome_name(None) is None
        assert normalize_biome_name("") is None

    def test_accents_and_case(self):
        """Accents are stripped and the result uppercased."""
        assert normalize_biome_name("Mata Atlântica") == "MATA ATLANTICA"
        assert normalize_biome_name("MATA ATLANTICA") == "MATA ATLANTICA"
        assert normalize_biome_name("AMAZÔNIA") == normalize_biome_name("Amazonia")

    def test_replacement_character(self):
        """The encoding replacement glyph stands for Ô."""
        assert normalize_biome_name("AMAZ\ufffdNIA") == "AMAZONIA"

    def test_non_text_label(self):
        """Numbers or objects in the label field have no key."""
        assert normalize_biome_name(7) is None
        assert normalize_biome_name(["Cerrado"]) is None

    def test_whitespace_is_kept(self):
        """Trailing or repeated spaces change the key."""
        assert normalize_biome_name("AMAZONIA") != normalize_biome_name("AMAZONIA ")
        assert normalize_biome_name("mata   atlântica") == "MATA   ATLANTICA"

    def test_whitespace_only_is_not_empty(self):
        assert normalize_biome_name(" ") == " "

    @pytest.mark.parametrize("label", [
        "Amazônia",
        "Caatinga",
        "Mata Atlântica",
        "AMAZ\ufffdNIA",
        "pantanal",
        "Pampa ",
    ])
    def test_idempotent(self, label):
        """Normalizing a key again leaves it unchanged."""
        key = normalize_biome_name(label)
        assert normalize_biome_name(key) == key

    def test_combining_marks_removed(self):
        """Pre-decomposed input loses its combining marks too."""
        assert normalize_biome_name("Amazo\u0302nia") == "AMAZONIA"
        assert normalize_biome_name("c\u0327a\u0303o") == "CAO"


class TestSameBiome:
    """Test label comparison."""

    def test_equal_labels(self):
        assert same_biome("cerrado", "CERRADO")
        assert same_biome("Amazônia", "AMAZ\ufffdNIA")

    def test_missing_labels_never_match(self):
        assert not same_biome(None, None)
        assert not same_biome("", "")
        assert not same_biome(None, "Cerrado")

    def test_different_labels(self):
        assert not same_biome("Cerrado", "Caatinga")
