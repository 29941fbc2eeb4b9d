"""
Configuration for the telomeric repeat report.

Author: Kevin R. Roy
"""

from dataclasses import dataclass, fields
from pathlib import Path
import yaml

from .core.dataset import PROVENANCE_FOOTER


@dataclass
class ReportConfig:
    """Presentation options for the telomeric repeat table."""
    wrap_width: int = 30  # characters per line in the motif column
    separator: str = ", "  # between motifs in a cell
    show_footer: bool = True
    footer: str = PROVENANCE_FOOTER

    def __post_init__(self):
        # bool is an int subclass; reject it explicitly
        if (isinstance(self.wrap_width, bool) or not isinstance(self.wrap_width, int)
                or self.wrap_width <= 0):
            raise ValueError(f"wrap_width must be a positive integer, got {self.wrap_width!r}")
        if not isinstance(self.separator, str) or not self.separator:
            raise ValueError(f"separator must be a non-empty string, got {self.separator!r}")
        if not isinstance(self.show_footer, bool):
            raise ValueError(f"show_footer must be true or false, got {self.show_footer!r}")
        if not isinstance(self.footer, str):
            raise ValueError(f"footer must be a string, got {self.footer!r}")

    @classmethod
    def from_yaml(cls, path: Path) -> 'ReportConfig':
        """Load report configuration from YAML file."""
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        # Empty file means defaults
        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ValueError(f"Report config must be a mapping: {path}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown report config keys in {path}: {', '.join(unknown)}")

        return cls(**data)
