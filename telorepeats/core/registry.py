"""
Telomeric repeat registry: clade -> TelomereRecord lookup.

The registry is built once from a literal (clade, motifs) table and is
read-only afterwards. A malformed table raises DatasetIntegrityError at
construction; querying an unknown clade raises CladeNotFoundError.

Author: Kevin R. Roy
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple
import logging

from .dataset import CLADE_MOTIFS
from .models import TelomereRecord
from ..utils.sequence import invalid_characters, is_valid_motif

logger = logging.getLogger(__name__)


class DatasetIntegrityError(ValueError):
    """The literal dataset violates a registry invariant."""


class CladeNotFoundError(LookupError):
    """A lookup was made for a clade that is not in the registry."""

    def __init__(self, clade: str):
        self.clade = clade
        super().__init__(f"Clade not found in telomeric repeat registry: {clade}")


def _validate_record(record: TelomereRecord) -> None:
    """Raise DatasetIntegrityError if a single record is malformed."""
    if not isinstance(record.clade, str) or not record.clade:
        raise DatasetIntegrityError(f"Invalid clade name: {record.clade!r}")

    if not record.motifs:
        raise DatasetIntegrityError(f"Clade '{record.clade}' has no telomeric repeat motifs")

    for motif in record.motifs:
        if not is_valid_motif(motif):
            bad = invalid_characters(motif) if isinstance(motif, str) else ''
            detail = f" (invalid characters: {bad})" if bad else ''
            raise DatasetIntegrityError(
                f"Clade '{record.clade}' has invalid motif {motif!r}{detail}"
            )

    if record.motif_count != len(record.motifs):
        raise DatasetIntegrityError(
            f"Clade '{record.clade}' motif count {record.motif_count} "
            f"does not match {len(record.motifs)} motifs"
        )


class TelomereRegistry:
    """
    Immutable mapping from clade name to its telomeric repeat record.

    Lookups are exact and case-sensitive. Callers that take clade names from
    untrusted input can check membership (``clade in registry``) or
    ``list_clades()`` before calling ``lookup``.

    Example:
        >>> registry = TelomereRegistry.from_table([("Primates", ["AATGG"])])
        >>> registry.lookup("Primates").motif_count
        1
    """

    def __init__(self, records: Iterable[TelomereRecord]):
        table: Dict[str, TelomereRecord] = {}

        for record in records:
            _validate_record(record)
            if record.clade in table:
                raise DatasetIntegrityError(f"Duplicate clade in dataset: {record.clade}")
            table[record.clade] = record

        self._records = MappingProxyType(table)
        self._clades: Tuple[str, ...] = tuple(sorted(table))

        logger.debug(f"Built telomeric repeat registry with {len(self._clades)} clades")

    @classmethod
    def from_table(cls, entries: Iterable[Tuple[str, Sequence[str]]]) -> 'TelomereRegistry':
        """
        Build a registry from literal (clade, motifs) pairs.

        Args:
            entries: Iterable of (clade name, motif list) pairs

        Returns:
            Populated TelomereRegistry

        Raises:
            DatasetIntegrityError: On a duplicate clade, an empty motif list,
                or a motif with characters outside A, C, G, T
        """
        records = []
        for clade, motifs in entries:
            # A bare string would otherwise become one motif per base
            if isinstance(motifs, str):
                raise DatasetIntegrityError(f"Motifs for clade '{clade}' must be a list, not a string")
            records.append(TelomereRecord(clade=clade, motifs=tuple(motifs)))
        return cls(records)

    def lookup(self, clade: str) -> TelomereRecord:
        """
        Get the telomeric repeat record for a clade.

        Args:
            clade: Exact clade name (case-sensitive)

        Returns:
            The frozen TelomereRecord for the clade

        Raises:
            CladeNotFoundError: If the clade is not in the registry
        """
        try:
            return self._records[clade]
        except (KeyError, TypeError):
            raise CladeNotFoundError(clade) from None

    def list_clades(self) -> List[str]:
        """All clade names in lexicographic order."""
        return list(self._clades)

    def all_records(self) -> Iterator[TelomereRecord]:
        """Yield every record, ordered by clade name."""
        for clade in self._clades:
            yield self._records[clade]

    def clades_with_motif(self, motif: str) -> List[str]:
        """Clades whose motif list contains ``motif`` exactly."""
        return [record.clade for record in self.all_records() if motif in record.motifs]

    def __contains__(self, clade) -> bool:
        return clade in self._clades

    def __iter__(self) -> Iterator[str]:
        return iter(self._clades)

    def __len__(self) -> int:
        return len(self._clades)

    def __repr__(self) -> str:
        return f"TelomereRegistry(clades={len(self._clades)})"


# Built at import so a corrupted dataset fails before anything is served
DEFAULT_REGISTRY = TelomereRegistry.from_table(CLADE_MOTIFS)

CLADES: Tuple[str, ...] = tuple(DEFAULT_REGISTRY.list_clades())


def lookup(clade: str) -> TelomereRecord:
    """Get a clade's record from the default registry."""
    return DEFAULT_REGISTRY.lookup(clade)


def list_clades() -> List[str]:
    """All clade names in the default registry."""
    return DEFAULT_REGISTRY.list_clades()


def all_records() -> Iterator[TelomereRecord]:
    """Every record in the default registry, ordered by clade name."""
    return DEFAULT_REGISTRY.all_records()
