"""
Data models for the telomeric repeat registry.

Author: Kevin R. Roy
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class TelomereRecord:
    """
    All the relevant information about the telomeric repeats of one clade.

    Attributes:
        clade: The clade the telomeric repeats belong to (registry key)
        motifs: Telomeric repeat unit(s), in curation order

    The motif count is derived from ``motifs`` and cannot be set on its own.
    """
    clade: str
    motifs: Tuple[str, ...]

    def __post_init__(self):
        # Accept any sequence but store a tuple so the record stays immutable
        if not isinstance(self.motifs, tuple):
            object.__setattr__(self, 'motifs', tuple(self.motifs))

    @property
    def motif_count(self) -> int:
        """How many different telomeric repeats are known for the clade."""
        return len(self.motifs)

    def get(self, index: int) -> Optional[str]:
        """Get the motif at an index, or None if out of range."""
        if 0 <= index < len(self.motifs):
            return self.motifs[index]
        return None

    def formatted_motifs(self, separator: str = ", ") -> str:
        """Join the motifs into a single readable string."""
        return separator.join(self.motifs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'clade': self.clade,
            'motifs': self.formatted_motifs(","),
            'motif_count': self.motif_count,
        }

    def __str__(self) -> str:
        return f"{self.clade}: {self.formatted_motifs()}"
