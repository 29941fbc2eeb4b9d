"""
Report generation for the telomeric repeat registry.

Author: Kevin R. Roy
"""

from pathlib import Path
from typing import List, Optional, TextIO
import logging
import sys

import pandas as pd

from ..config import ReportConfig
from ..core.models import TelomereRecord
from ..core.registry import DEFAULT_REGISTRY, TelomereRegistry

logger = logging.getLogger(__name__)

HEADERS = ("Clade", "Telomeric repeat units", "Count")


def wrap_motifs(motifs, width: int, separator: str = ", ") -> List[str]:
    """
    Wrap a motif list into lines of at most ``width`` characters, not
    counting the separator left at the end of a broken line.

    Lines only break between motifs, so a motif is never split. A motif
    longer than ``width`` gets a line of its own.

    Example:
        >>> wrap_motifs(["AACCT", "AACCC", "AGATC"], width=12)
        ['AACCT, AACCC,', 'AGATC']
    """
    lines = []
    current = ""
    tail = separator.rstrip()

    for motif in motifs:
        if not current:
            current = motif
        elif len(current) + len(separator) + len(motif) <= width:
            current = current + separator + motif
        else:
            lines.append(current + tail)
            current = motif

    if current:
        lines.append(current)

    return lines


def _rule(widths: List[int]) -> str:
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _format_row(cells: List[List[str]], widths: List[int]) -> List[str]:
    """Format one logical row whose cells may span several lines."""
    height = max(len(c) for c in cells)
    out = []
    for i in range(height):
        parts = []
        for cell, w in zip(cells, widths):
            text = cell[i] if i < len(cell) else ""
            parts.append(f" {text:<{w}} ")
        out.append("|" + "|".join(parts) + "|")
    return out


def render_table(
    registry: Optional[TelomereRegistry] = None,
    config: Optional[ReportConfig] = None,
) -> str:
    """
    Render every record in the registry as a text table.

    Args:
        registry: Registry to render (defaults to the built-in dataset)
        config: Presentation options (defaults to ReportConfig())

    Returns:
        Table as a single string, including the provenance footer
    """
    registry = registry if registry is not None else DEFAULT_REGISTRY
    config = config or ReportConfig()

    rows = []
    for record in registry.all_records():
        rows.append([
            [record.clade],
            wrap_motifs(record.motifs, config.wrap_width, config.separator),
            [str(record.motif_count)],
        ])

    widths = [len(h) for h in HEADERS]
    for row in rows:
        for col, cell in enumerate(row):
            widths[col] = max(widths[col], max(len(line) for line in cell))

    footer_lines = []
    if config.show_footer and config.footer:
        footer_lines = config.footer.splitlines()
        # Widen the last column so the footer fits inside the border
        inner = sum(w + 2 for w in widths) + len(widths) - 3
        longest = max(len(text) for text in footer_lines)
        if longest > inner:
            widths[-1] += longest - inner

    rule = _rule(widths)
    lines = [rule]
    lines.extend(_format_row([[h] for h in HEADERS], widths))
    lines.append(rule)
    for row in rows:
        lines.extend(_format_row(row, widths))
        lines.append(rule)

    if footer_lines:
        # Footer spans the whole table width
        inner = len(rule) - 4
        for text in footer_lines:
            lines.append(f"| {text:<{inner}} |")
        lines.append(rule)

    return "\n".join(lines)


def print_table(
    registry: Optional[TelomereRegistry] = None,
    config: Optional[ReportConfig] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Pretty print the telomeric repeat table (to stderr by default)."""
    stream = stream if stream is not None else sys.stderr
    stream.write(render_table(registry, config) + "\n")


def records_to_dataframe(registry: Optional[TelomereRegistry] = None) -> pd.DataFrame:
    """One row per clade with comma-joined motifs and the motif count."""
    registry = registry if registry is not None else DEFAULT_REGISTRY
    rows = [record.to_dict() for record in registry.all_records()]
    return pd.DataFrame(rows, columns=['clade', 'motifs', 'motif_count'])


def write_records_tsv(
    output_path: Path,
    registry: Optional[TelomereRegistry] = None,
) -> Path:
    """
    Write the registry to a TSV file.

    Args:
        output_path: Path for output TSV
        registry: Registry to export (defaults to the built-in dataset)

    Returns:
        Path to written file
    """
    output_path = Path(output_path)
    df = records_to_dataframe(registry)
    df.to_csv(output_path, sep='\t', index=False)

    logger.info(f"Wrote {len(df)} clades to {output_path}")

    return output_path


def describe_record(record: TelomereRecord, separator: str = ", ") -> str:
    """Short human-readable description of one record."""
    noun = "motif" if record.motif_count == 1 else "motifs"
    return f"{record.clade} ({record.motif_count} {noun}): {record.formatted_motifs(separator)}"
