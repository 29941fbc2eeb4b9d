"""
Command-line interface for telorepeats.

Author: Kevin R. Roy
"""

import sys
from pathlib import Path

import click

from . import __version__
from .core.registry import DEFAULT_REGISTRY, CladeNotFoundError


@click.group()
@click.version_option(version=__version__)
def cli():
    """telorepeats: telomeric repeat motifs across clades."""
    pass


@cli.command()
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='YAML file with report options (wrap_width, separator, show_footer, footer)')
def table(config_path):
    """
    Print a table of every clade and its telomeric repeats.

    The table is written to stderr.
    """
    from .config import ReportConfig
    from .io.report import render_table

    config = None
    if config_path:
        try:
            config = ReportConfig.from_yaml(Path(config_path))
        except ValueError as e:
            click.echo(f"Error loading report config: {e}", err=True)
            sys.exit(1)

    click.echo(render_table(DEFAULT_REGISTRY, config), err=True)


@cli.command()
@click.argument('clade')
def lookup(clade):
    """
    Show the telomeric repeats for CLADE.

    Clade names are case-sensitive (e.g. Primates, Hymenoptera).
    """
    from .io.report import describe_record

    try:
        record = DEFAULT_REGISTRY.lookup(clade)
    except CladeNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo("  Run 'telorepeats clades' to list known clades.", err=True)
        sys.exit(1)

    click.echo(describe_record(record))


@cli.command()
def clades():
    """List every clade in the registry."""
    for name in DEFAULT_REGISTRY.list_clades():
        click.echo(name)


@cli.command()
@click.argument('motif')
def search(motif):
    """List clades whose telomeric repeats include MOTIF."""
    motif = motif.strip().upper()
    matches = DEFAULT_REGISTRY.clades_with_motif(motif)

    if not matches:
        click.echo(f"No clades have telomeric repeat {motif}", err=True)
        return

    for name in matches:
        click.echo(name)


@cli.command()
@click.option('--output', '-o', type=click.Path(), required=True,
              help='Output TSV file')
def export(output):
    """Write every clade and its telomeric repeats to a TSV file."""
    import logging

    from .io.report import write_records_tsv

    # Set up logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    write_records_tsv(output_path, DEFAULT_REGISTRY)
    click.echo(f"Results written to: {output_path}")


if __name__ == '__main__':
    cli()
