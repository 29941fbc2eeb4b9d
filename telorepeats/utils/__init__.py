"""
Utility modules for telorepeats.

Author: Kevin R. Roy
"""

from .sequence import (
    MOTIF_PATTERN,
    NUCLEOTIDES,
    invalid_characters,
    is_valid_motif,
)

__all__ = [
    'NUCLEOTIDES',
    'MOTIF_PATTERN',
    'is_valid_motif',
    'invalid_characters',
]
