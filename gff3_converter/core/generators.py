#!/usr/bin/env python3

"""
GFF3 output for a populated gene model.
"""

import logging
from typing import TextIO

from .data_structures import Gene, GeneModel


class GFF3Writer:
    """Write genes, exons and CDS parts of exons as GFF3."""

    def __init__(self, source: str):
        self.source = source

    def write(self, model: GeneModel, handle: TextIO) -> int:
        """
        Write the whole model to an open text handle.

        Sequences come out in the order they were first seen and genes in
        the order they were added. Gene IDs (gene1, gene2, ...) are
        numbered across all sequences, not per sequence.

        Returns:
            Number of genes written
        """
        logging.info(f"Writing GFF3 for {len(model)} sequences")
        handle.write("##gff-version 3\n")

        gene_number = 1
        for name, sequence in model.items():
            handle.write(f"##sequence-region {name} {sequence.start} {sequence.end}\n")
            for gene in sequence.genes:
                self._write_gene(handle, name, gene, f"gene{gene_number}")
                gene_number += 1
            handle.write("###\n")

        logging.info(f"Wrote {gene_number - 1} genes")
        return gene_number - 1

    def _write_gene(self, handle: TextIO, seqid: str, gene: Gene, gene_id: str) -> None:
        attributes = f"ID={gene_id}"
        if gene.name:
            attributes += f";Name={gene.name}"
        for attr_name, attr_value in gene.attributes.items():
            attributes += f";{attr_name}={attr_value}"
        self._write_feature(handle, seqid, 'gene', gene.start, gene.end, gene.strand, attributes)

        parent = f"Parent={gene_id}"
        for exon in gene.exons:
            self._write_feature(handle, seqid, 'exon', exon.start, exon.end, gene.strand, parent)
            if gene.cds_range:
                # coding part of the exon, if any
                coding = gene.cds_range.intersection(exon)
                if coding:
                    self._write_feature(handle, seqid, 'CDS', coding.start, coding.end,
                                        gene.strand, parent)

    def _write_feature(self, handle: TextIO, seqid: str, feature: str, start: int, end: int,
                       strand: str, attributes: str) -> None:
        handle.write(f"{seqid}\t{self.source}\t{feature}\t{start}\t{end}\t.\t{strand}\t.\t{attributes}\n")
