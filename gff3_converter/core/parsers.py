#!/usr/bin/env python3

"""
Parsers that turn upstream alignment output into the gene model.

GMAPParser reads GMAP alignment reports with a small state machine.
BlatParser (PSL) and EncodeParser (UCSC genePred dumps) read one record
per line. All of them add genes to a shared GeneModel.
"""

import enum
import logging
from typing import Dict, List, Mapping, Optional

from . import line_classifiers as lines
from .data_structures import Gene, GeneModel, Range
from .exceptions import FormatError, RecoverableSkip
from .scanner import LineCursor


class ParserState(enum.Enum):
    SEEK_RECORD = 'seek_record'
    IN_PATHS = 'in_paths'
    IN_ALIGNMENT = 'in_alignment'


class GMAPParser:
    """Parse GMAP alignment reports, one gene per single-path record."""

    SOURCE = 'gmap'

    def __init__(self, model: GeneModel,
                 coordinate_mapping: Optional[Mapping[str, int]] = None):
        self.model = model
        self.coordinate_mapping = coordinate_mapping
        self.records_seen = 0
        self.genes_added = 0
        self.records_skipped = 0
        self._reset_record()

    def _reset_record(self) -> None:
        self.state = ParserState.SEEK_RECORD
        self.current_query = ""
        self.current_accession: Optional[str] = None
        self.current_strand: Optional[str] = None

    def parse(self, cursor: LineCursor) -> None:
        """Parse every record of one stream into the model."""
        logging.info(f"Parsing GMAP alignments from {cursor.name}")
        genes_before = self.genes_added
        self._reset_record()

        while not cursor.at_end():
            try:
                if self.state is ParserState.SEEK_RECORD:
                    self._seek_record(cursor)
                elif self.state is ParserState.IN_PATHS:
                    self._parse_paths(cursor)
                else:
                    self._parse_alignment(cursor)
            except RecoverableSkip as e:
                logging.warning(f"Skipping record: {e}")
                self.records_skipped += 1
                self._reset_record()

        if self.state is not ParserState.SEEK_RECORD:
            raise FormatError(f"Unexpected end of input in record {self.current_query}",
                              cursor.name, cursor.line_number)

        logging.info(f"Parsed {self.genes_added - genes_before} genes from {cursor.name} "
                     f"({self.records_seen} records seen, {self.records_skipped} skipped so far)")

    def _seek_record(self, cursor: LineCursor) -> None:
        line = cursor.consume()
        if lines.is_record_marker(line):
            self.records_seen += 1
            self.current_query = lines.extract_record_name(line)
            self.state = ParserState.IN_PATHS

    def _parse_paths(self, cursor: LineCursor) -> None:
        line = cursor.consume()
        if not lines.is_paths_line(line):
            raise FormatError("expecting 'Paths'", cursor.name, cursor.line_number)

        path_count = lines.extract_path_count(line)
        if path_count is None:
            raise FormatError(f"could not parse path count from '{line}'",
                              cursor.name, cursor.line_number)
        if path_count == 0:
            raise FormatError(f"no alignment paths for {self.current_query}",
                              cursor.name, cursor.line_number)
        if path_count > 1:
            raise RecoverableSkip(f"multiple path alignment ({path_count} paths)",
                                  cursor.name, cursor.line_number, self.current_query)

        while True:
            line = cursor.peek()
            if line is None or lines.is_record_marker(line) or lines.is_alignment_block(line):
                if line is not None:
                    cursor.consume()
                raise FormatError(f"expecting 'Accessions' for {self.current_query}",
                                  cursor.name, cursor.line_number)
            cursor.consume()

            if lines.is_genomic_position(line):
                strand = lines.extract_strand(line)
                if strand is None:
                    raise FormatError("could not parse strand", cursor.name, cursor.line_number)
                self.current_strand = strand
            elif lines.is_accession_line(line):
                if self.current_strand is None:
                    raise FormatError(f"no strand given before accessions of {self.current_query}",
                                      cursor.name, cursor.line_number)
                self.current_accession = lines.extract_accession(line)
                self.state = ParserState.IN_ALIGNMENT
                return

    def _parse_alignment(self, cursor: LineCursor) -> None:
        while True:
            line = cursor.peek()
            if line is None or lines.is_record_marker(line):
                if line is not None:
                    cursor.consume()
                raise FormatError(f"expecting 'Alignments' for {self.current_accession}",
                                  cursor.name, cursor.line_number)
            cursor.consume()
            if lines.is_alignment_block(line):
                break

        # two column header lines
        cursor.consume()
        cursor.consume()

        exons = self._read_exons(cursor)
        if not exons:
            raise FormatError(f"could not parse exon for {self.current_accession}",
                              cursor.name, cursor.line_number)

        gene_range = Range.spanning(exons)
        if gene_range.start > gene_range.end:
            raise FormatError(f"invalid gene range {gene_range.start}-{gene_range.end}",
                              cursor.name, cursor.line_number)

        gene = Gene(gene_range, self.current_strand)
        for exon in exons:
            gene.add_exon(exon)
        self.model.place_gene(self.current_accession, gene)
        self.genes_added += 1
        logging.debug(f"Placed {self.current_accession}: {gene.exon_count} exons "
                      f"over {gene_range.length} bp on strand {gene.strand}")

        self._reset_record()

    def _read_exons(self, cursor: LineCursor) -> List[Range]:
        exons = []
        offset = None
        if self.coordinate_mapping is not None:
            offset = self.coordinate_mapping.get(self.current_accession)

        while True:
            line = cursor.peek()
            if line is None:
                break
            coordinates = lines.extract_exon_coordinates(line)
            if coordinates is None:
                break
            cursor.consume()

            exon = Range(*coordinates)
            if offset is not None:
                exon = Range(exon.start - offset + 1, exon.end - offset + 1)
            exons.append(exon)

        return exons


class TabularParser:
    """Base class for converters with one whitespace separated record per line."""

    SOURCE = ''
    COLUMNS: List[str] = []

    def __init__(self, model: GeneModel):
        self.model = model
        self.genes_added = 0
        self.lines_skipped = 0

    def parse(self, cursor: LineCursor) -> None:
        logging.info(f"Parsing {self.SOURCE} records from {cursor.name}")
        genes_before = self.genes_added

        for line in cursor:
            fields = line.split()
            if len(fields) != len(self.COLUMNS):
                if fields:
                    logging.debug(f"Skipping line {cursor.line_number} of {cursor.name}: "
                                  f"{len(fields)} columns, expected {len(self.COLUMNS)}")
                    self.lines_skipped += 1
                continue

            record = dict(zip(self.COLUMNS, fields))
            try:
                gene = self._build_gene(record)
            except ValueError as e:
                raise FormatError(str(e), cursor.name, cursor.line_number)
            if gene is None:
                continue

            self.model.place_gene(self._sequence_name(record), gene)
            self.genes_added += 1

        logging.info(f"Parsed {self.genes_added - genes_before} genes from {cursor.name}")

    def _sequence_name(self, record: Dict[str, str]) -> str:
        raise NotImplementedError

    def _build_gene(self, record: Dict[str, str]) -> Optional[Gene]:
        raise NotImplementedError

    @staticmethod
    def _int_list(value: str, count: int) -> List[int]:
        """Parse the first count entries of a comma separated integer list."""
        values = [int(v) for v in value.split(',') if v]
        if len(values) < count:
            raise ValueError(f"expected {count} values in '{value}'")
        return values[:count]


class BlatParser(TabularParser):
    """Parse BLAT PSL lines, optionally dropping alignments with too many mismatches."""

    SOURCE = 'blat'
    COLUMNS = [
        'matches', 'misMatches', 'repMatches', 'nCount', 'qNumInsert', 'qBaseInsert',
        'tNumInsert', 'tBaseInsert', 'strand', 'qName', 'qSize', 'qStart', 'qEnd',
        'tName', 'tSize', 'tStart', 'tEnd', 'blockCount', 'blockSizes', 'qStarts', 'tStarts',
    ]

    def __init__(self, model: GeneModel, max_mismatches: Optional[int] = None):
        super().__init__(model)
        self.max_mismatches = max_mismatches
        self.records_filtered = 0

    def _sequence_name(self, record: Dict[str, str]) -> str:
        return record['tName']

    def _build_gene(self, record: Dict[str, str]) -> Optional[Gene]:
        if self.max_mismatches is not None and int(record['misMatches']) > self.max_mismatches:
            self.records_filtered += 1
            return None

        gene = Gene(Range(int(record['tStart']) + 1, int(record['tEnd'])), record['strand'][0])
        block_count = int(record['blockCount'])
        block_sizes = self._int_list(record['blockSizes'], block_count)
        block_starts = self._int_list(record['tStarts'], block_count)
        for start, size in zip(block_starts, block_sizes):
            gene.add_exon(Range(start + 1, start + size))
        return gene


class EncodeParser(TabularParser):
    """Parse UCSC/ENCODE genePred SQL dump lines, including the CDS range."""

    SOURCE = 'ENCODE'
    COLUMNS = [
        'name', 'chrom', 'strand', 'txStart', 'txEnd', 'cdsStart', 'cdsEnd', 'exonCount',
        'exonStarts', 'exonEnds', 'id', 'name2', 'cdsStartStat', 'cdsEndStat', 'exonFrames',
    ]

    def _sequence_name(self, record: Dict[str, str]) -> str:
        return record['chrom']

    def _build_gene(self, record: Dict[str, str]) -> Optional[Gene]:
        gene = Gene(Range(int(record['txStart']) + 1, int(record['txEnd'])), record['strand'])
        gene.name = record['name']
        gene.attributes = {'Name2': record['name2']}

        cds_start, cds_end = int(record['cdsStart']), int(record['cdsEnd'])
        # cdsStart == cdsEnd marks a non-coding transcript
        if cds_start > 0 and cds_end > 0 and cds_start < cds_end:
            gene.cds_range = Range(cds_start + 1, cds_end)

        exon_count = int(record['exonCount'])
        exon_starts = self._int_list(record['exonStarts'], exon_count)
        exon_ends = self._int_list(record['exonEnds'], exon_count)
        for start, end in zip(exon_starts, exon_ends):
            gene.add_exon(Range(start + 1, end))
        return gene


def load_coordinate_mapping(file_path: str) -> Dict[str, int]:
    """Load an accession -> offset table; lines of any other shape are ignored."""
    logging.info(f"Loading coordinate mapping from {file_path}")
    mapping = {}
    with open(file_path, 'r') as f:
        for line in f:
            entry = lines.extract_mapping_entry(line)
            if entry:
                accession, offset = entry
                mapping[accession] = offset
    logging.info(f"Loaded {len(mapping)} coordinate mapping entries")
    return mapping
