"""Tests for telorepeats.config module."""

import pytest
from telorepeats.config import ReportConfig
from telorepeats.core.dataset import PROVENANCE_FOOTER


class TestReportConfig:
    """Test ReportConfig class."""

    def test_defaults(self):
        """Test default report options."""
        config = ReportConfig()
        assert config.wrap_width == 30
        assert config.separator == ", "
        assert config.show_footer is True
        assert config.footer == PROVENANCE_FOOTER

    def test_non_positive_wrap_width_raises(self):
        """Test that wrap_width must be positive."""
        with pytest.raises(ValueError, match="wrap_width"):
            ReportConfig(wrap_width=0)

    def test_empty_separator_raises(self):
        """Test that separator must be non-empty."""
        with pytest.raises(ValueError, match="separator"):
            ReportConfig(separator="")

    def test_from_yaml(self, tmp_path):
        """Test loading options from YAML."""
        path = tmp_path / "report.yaml"
        path.write_text("wrap_width: 50\nseparator: ' / '\nshow_footer: false\n")

        config = ReportConfig.from_yaml(path)

        assert config.wrap_width == 50
        assert config.separator == " / "
        assert config.show_footer is False

    def test_from_yaml_empty_file(self, tmp_path):
        """Test that an empty YAML file gives defaults."""
        path = tmp_path / "report.yaml"
        path.write_text("")

        assert ReportConfig.from_yaml(path) == ReportConfig()

    def test_from_yaml_unknown_key_raises(self, tmp_path):
        """Test that unknown keys are rejected."""
        path = tmp_path / "report.yaml"
        path.write_text("wrap_width: 40\ncolour: red\n")

        with pytest.raises(ValueError, match="colour"):
            ReportConfig.from_yaml(path)

    def test_non_string_separator_raises(self):
        """Test that separator must be a string."""
        with pytest.raises(ValueError, match="separator"):
            ReportConfig(separator=5)

    def test_non_string_footer_raises(self):
        """Test that footer must be a string."""
        with pytest.raises(ValueError, match="footer"):
            ReportConfig(footer=["line"])

    def test_non_bool_show_footer_raises(self):
        """Test that show_footer must be a boolean."""
        with pytest.raises(ValueError, match="show_footer"):
            ReportConfig(show_footer="no")

    def test_bool_wrap_width_raises(self):
        """Test that a boolean is not accepted as wrap_width."""
        with pytest.raises(ValueError, match="wrap_width"):
            ReportConfig(wrap_width=True)

    def test_from_yaml_separator_type_raises(self, tmp_path):
        """Test that a numeric separator in YAML is rejected."""
        path = tmp_path / "report.yaml"
        path.write_text("separator: 5\n")

        with pytest.raises(ValueError, match="separator"):
            ReportConfig.from_yaml(path)

    def test_from_yaml_malformed_raises(self, tmp_path):
        """Test that unparseable YAML raises ValueError."""
        path = tmp_path / "report.yaml"
        path.write_text("wrap_width: [\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ReportConfig.from_yaml(path)

    def test_from_yaml_not_a_mapping_raises(self, tmp_path):
        """Test that a YAML list is rejected."""
        path = tmp_path / "report.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ValueError, match="mapping"):
            ReportConfig.from_yaml(path)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
