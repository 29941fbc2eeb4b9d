"""
telorepeats - Reference dataset of telomeric repeat motifs across clades.

Author: Kevin R. Roy
"""

__version__ = "0.1.0"
__author__ = "Kevin R. Roy"

from .config import ReportConfig
from .core.models import TelomereRecord
from .core.registry import (
    CLADES,
    DEFAULT_REGISTRY,
    CladeNotFoundError,
    DatasetIntegrityError,
    TelomereRegistry,
    all_records,
    list_clades,
    lookup,
)
from .io.report import print_table, render_table

__all__ = [
    "TelomereRecord",
    "TelomereRegistry",
    "DEFAULT_REGISTRY",
    "CLADES",
    "DatasetIntegrityError",
    "CladeNotFoundError",
    "lookup",
    "list_clades",
    "all_records",
    "ReportConfig",
    "render_table",
    "print_table",
    "__version__",
]
