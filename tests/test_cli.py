"""Tests for the telorepeats command-line interface."""

import pandas as pd
import pytest
from click.testing import CliRunner
from telorepeats import __version__
from telorepeats.cli import cli
from telorepeats.core.dataset import SOURCE_URL


@pytest.fixture
def runner():
    return CliRunner()


class TestTableCommand:
    """Test the table command."""

    def test_prints_table(self, runner):
        """Test the table lists clades and the footer."""
        result = runner.invoke(cli, ['table'])
        assert result.exit_code == 0
        assert "Hemiptera" in result.output
        assert SOURCE_URL in result.output

    def test_with_config(self, runner, tmp_path):
        """Test report options from a YAML file."""
        config = tmp_path / "report.yaml"
        config.write_text("show_footer: false\n")

        result = runner.invoke(cli, ['table', '--config', str(config)])

        assert result.exit_code == 0
        assert "Hemiptera" in result.output
        assert SOURCE_URL not in result.output

    def test_bad_config(self, runner, tmp_path):
        """Test an invalid config file exits with an error."""
        config = tmp_path / "report.yaml"
        config.write_text("wrap_width: -1\n")

        result = runner.invoke(cli, ['table', '--config', str(config)])

        assert result.exit_code == 1
        assert "Error loading report config" in result.output


    def test_wrong_type_config(self, runner, tmp_path):
        """Test a mistyped option is reported, not a traceback."""
        config = tmp_path / "report.yaml"
        config.write_text("separator: 5\n")

        result = runner.invoke(cli, ['table', '--config', str(config)])

        assert result.exit_code == 1
        assert "Error loading report config" in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_malformed_yaml_config(self, runner, tmp_path):
        """Test unparseable YAML is reported as a config error."""
        config = tmp_path / "report.yaml"
        config.write_text("wrap_width: [\n")

        result = runner.invoke(cli, ['table', '--config', str(config)])

        assert result.exit_code == 1
        assert "Error loading report config" in result.output


class TestLookupCommand:
    """Test the lookup command."""

    def test_known_clade(self, runner):
        """Test looking up a known clade."""
        result = runner.invoke(cli, ['lookup', 'Primates'])
        assert result.exit_code == 0
        assert "Primates (1 motif): AATGG" in result.output

    def test_unknown_clade(self, runner):
        """Test an unknown clade is reported verbatim with exit code 1."""
        result = runner.invoke(cli, ['lookup', 'Unicornopoda'])
        assert result.exit_code == 1
        assert "Unicornopoda" in result.output


class TestCladesCommand:
    """Test the clades command."""

    def test_lists_all_clades(self, runner):
        """Test one clade per line in order."""
        result = runner.invoke(cli, ['clades'])
        lines = result.output.splitlines()
        assert result.exit_code == 0
        assert lines[0] == "Accipitriformes"
        assert lines[-1] == "Venerida"
        assert len(lines) == 104


class TestSearchCommand:
    """Test the search command."""

    def test_found(self, runner):
        """Test searching a motif, case-insensitively on input."""
        result = runner.invoke(cli, ['search', 'aatgg'])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Primates"]

    def test_not_found(self, runner):
        """Test searching an absent motif."""
        result = runner.invoke(cli, ['search', 'GGGGGGGG'])
        assert result.exit_code == 0
        assert "No clades" in result.output


class TestExportCommand:
    """Test the export command."""

    def test_writes_tsv(self, runner, tmp_path):
        """Test the TSV export."""
        output = tmp_path / "out" / "clades.tsv"

        result = runner.invoke(cli, ['export', '--output', str(output)])

        assert result.exit_code == 0
        df = pd.read_csv(output, sep='\t')
        assert len(df) == 104


def test_version(runner):
    """Test --version prints the package version."""
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
