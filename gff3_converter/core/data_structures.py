#!/usr/bin/env python3

"""
Core data structures for the GFF3 converters.

Defines ranges, genes, sequences and the gene model that every parser
fills and the GFF3 writer reads.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional


@dataclass
class Range:
    """1-based inclusive coordinate pair; inverted endpoints are swapped."""
    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            self.start, self.end = self.end, self.start

    @classmethod
    def spanning(cls, ranges: Iterable['Range']) -> 'Range':
        """Smallest range covering every range given."""
        ranges = list(ranges)
        if not ranges:
            raise ValueError("Cannot span an empty list of ranges")
        return cls(min(r.start for r in ranges), max(r.end for r in ranges))

    @property
    def length(self) -> int:
        """Get range length."""
        return self.end - self.start + 1

    def overlaps_with(self, other: 'Range') -> bool:
        """Check if this range overlaps with another."""
        return self.start <= other.end and self.end >= other.start

    def intersection(self, other: 'Range') -> Optional['Range']:
        """Get the overlapping part of two ranges, or None if disjoint."""
        if not self.overlaps_with(other):
            return None
        return Range(max(self.start, other.start), min(self.end, other.end))


@dataclass
class Gene:
    """A gene with its extent, strand and exons in discovery order."""
    range: Range
    strand: str
    exons: List[Range] = field(default_factory=list)
    name: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    cds_range: Optional[Range] = None

    def __post_init__(self):
        """Validate gene data after initialization."""
        if self.strand not in ('+', '-'):
            raise ValueError(f"'{self.strand}' is not a valid strand")

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end

    @property
    def exon_count(self) -> int:
        """Get number of exons."""
        return len(self.exons)

    def add_exon(self, exon: Range) -> None:
        """Append an exon; order is kept as given."""
        self.exons.append(exon)


@dataclass
class Sequence:
    """A reference sequence and the genes placed on it."""
    range: Range
    genes: List[Gene] = field(default_factory=list)

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end

    def update_range(self, start: int, end: int) -> None:
        """Widen the bounding range; it never shrinks."""
        self.range = Range(min(self.range.start, start), max(self.range.end, end))

    def add_gene(self, gene: Gene) -> None:
        self.genes.append(gene)


@dataclass
class GeneModel:
    """Sequences by name, kept in the order they were first seen."""
    sequences: Dict[str, Sequence] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.sequences)

    def __contains__(self, name: str) -> bool:
        return name in self.sequences

    def __getitem__(self, name: str) -> Sequence:
        return self.sequences[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.sequences)

    def items(self):
        return self.sequences.items()

    @property
    def gene_count(self) -> int:
        """Get number of genes across all sequences."""
        return sum(len(seq.genes) for seq in self.sequences.values())

    def place_gene(self, sequence_name: str, gene: Gene) -> Sequence:
        """
        Add a gene to the named sequence, creating the sequence if needed.

        A new sequence starts with the gene's extent; an existing one is
        widened to cover it.
        """
        sequence = self.sequences.get(sequence_name)
        if sequence is None:
            sequence = Sequence(Range(gene.start, gene.end))
            self.sequences[sequence_name] = sequence
        else:
            sequence.update_range(gene.start, gene.end)
        sequence.add_gene(gene)
        return sequence
