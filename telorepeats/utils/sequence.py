"""
Sequence validation utilities for telomeric repeat motifs.

Author: Kevin R. Roy
"""

import re

# Curated motifs are stored uppercase; lowercase or ambiguity codes are errors
NUCLEOTIDES = frozenset('ACGT')

MOTIF_PATTERN = re.compile(r'^[ACGT]+$')


def is_valid_motif(motif) -> bool:
    """
    Check if a value is a valid telomeric repeat motif.

    Args:
        motif: Value to check (can be any type)

    Returns:
        True if motif is a non-empty string made only of A, C, G and T
    """
    if not isinstance(motif, str):
        return False
    return bool(MOTIF_PATTERN.fullmatch(motif))


def invalid_characters(motif: str) -> str:
    """Return the characters of motif outside the nucleotide alphabet, in order of first use."""
    seen = []
    for base in motif:
        if base not in NUCLEOTIDES and base not in seen:
            seen.append(base)
    return ''.join(seen)
