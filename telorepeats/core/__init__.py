"""
Core registry modules for telorepeats.

Author: Kevin R. Roy
"""

from .dataset import CLADE_MOTIFS, PROVENANCE_FOOTER, SOURCE_NAME, SOURCE_URL
from .models import TelomereRecord
from .registry import (
    CLADES,
    DEFAULT_REGISTRY,
    CladeNotFoundError,
    DatasetIntegrityError,
    TelomereRegistry,
    all_records,
    list_clades,
    lookup,
)

__all__ = [
    # Data
    'CLADE_MOTIFS',
    'CLADES',
    'PROVENANCE_FOOTER',
    'SOURCE_NAME',
    'SOURCE_URL',
    # Models
    'TelomereRecord',
    # Registry
    'TelomereRegistry',
    'DEFAULT_REGISTRY',
    'DatasetIntegrityError',
    'CladeNotFoundError',
    'lookup',
    'list_clades',
    'all_records',
]
