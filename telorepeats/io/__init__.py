"""
I/O modules for telorepeats.

Author: Kevin R. Roy
"""

from .report import (
    describe_record,
    print_table,
    records_to_dataframe,
    render_table,
    wrap_motifs,
    write_records_tsv,
)

__all__ = [
    'render_table',
    'print_table',
    'wrap_motifs',
    'describe_record',
    'records_to_dataframe',
    'write_records_tsv',
]
