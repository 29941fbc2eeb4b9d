"""Tests for telorepeats.utils module."""

import pytest
from telorepeats.utils.sequence import invalid_characters, is_valid_motif


class TestIsValidMotif:
    """Test motif validation."""

    def test_valid_motif(self):
        """Test an uppercase ACGT motif."""
        assert is_valid_motif("AACCCT")

    def test_empty_string(self):
        """Test that an empty motif is invalid."""
        assert not is_valid_motif("")

    def test_lowercase(self):
        """Test that lowercase bases are invalid."""
        assert not is_valid_motif("aaccct")

    def test_trailing_newline(self):
        """Test that trailing whitespace makes a motif invalid."""
        assert not is_valid_motif("AATGG\n")
        assert not is_valid_motif("AATGG ")

    def test_ambiguity_code(self):
        """Test that N and other IUPAC codes are invalid."""
        assert not is_valid_motif("AACNCT")
        assert not is_valid_motif("AACRCT")

    def test_non_string(self):
        """Test that non-string values are invalid."""
        assert not is_valid_motif(None)
        assert not is_valid_motif(123)


class TestInvalidCharacters:
    """Test reporting of invalid characters."""

    def test_clean_motif(self):
        """Test a valid motif has no invalid characters."""
        assert invalid_characters("AACCCT") == ""

    def test_reports_each_character_once(self):
        """Test invalid characters are reported once, in order of first use."""
        assert invalid_characters("ANNCxT") == "Nx"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
