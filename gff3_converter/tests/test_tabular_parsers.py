#!/usr/bin/env python3

"""
Unit tests for the BLAT (PSL) and ENCODE (genePred) converters.
"""

import io
import os
import sys
import unittest

# Add the parent directory to the path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from gff3_converter.core.data_structures import GeneModel, Range
from gff3_converter.core.exceptions import FormatError
from gff3_converter.core.parsers import BlatParser, EncodeParser
from gff3_converter.core.scanner import LineCursor
from gff3_converter.tests.fixtures import (
    PSL_HEADER, PSL_LINE_CHR1, PSL_LINE_CHR1_MISMATCHES,
    ENCODE_LINE_CODING, ENCODE_LINE_NONCODING
)


def cursor_for(text: str, name: str = "input.txt") -> LineCursor:
    return LineCursor(io.StringIO(text), name)


class TestBlatParser(unittest.TestCase):
    """Test PSL conversion and the mismatch filter."""

    def test_psl_line(self):
        model = GeneModel()
        BlatParser(model).parse(cursor_for(PSL_LINE_CHR1))

        gene = model['chr1'].genes[0]
        self.assertEqual(gene.range, Range(1000, 1149))
        self.assertEqual(gene.strand, '+')
        self.assertEqual(gene.exons, [Range(1000, 1019), Range(1120, 1149)])
        self.assertEqual(model['chr1'].range, Range(1000, 1149))

    def test_header_lines_are_skipped(self):
        model = GeneModel()
        parser = BlatParser(model)
        parser.parse(cursor_for(PSL_HEADER + PSL_LINE_CHR1))
        self.assertEqual(model.gene_count, 1)
        self.assertEqual(parser.lines_skipped, 4)

    def test_sequence_range_covers_all_alignments(self):
        model = GeneModel()
        BlatParser(model).parse(cursor_for(PSL_LINE_CHR1_MISMATCHES + PSL_LINE_CHR1))
        sequence = model['chr1']
        self.assertEqual(sequence.range, Range(1000, 5049))
        self.assertEqual([g.strand for g in sequence.genes], ['-', '+'])

    def test_mismatch_filter(self):
        model = GeneModel()
        parser = BlatParser(model, max_mismatches=2)
        parser.parse(cursor_for(PSL_LINE_CHR1 + PSL_LINE_CHR1_MISMATCHES))
        self.assertEqual(model.gene_count, 1)
        self.assertEqual(parser.records_filtered, 1)

        model = GeneModel()
        BlatParser(model, max_mismatches=3).parse(cursor_for(PSL_LINE_CHR1_MISMATCHES))
        self.assertEqual(model.gene_count, 1)

    def test_translated_strand_uses_first_character(self):
        model = GeneModel()
        BlatParser(model).parse(cursor_for(PSL_LINE_CHR1.replace("\t+\t", "\t-+\t")))
        self.assertEqual(model['chr1'].genes[0].strand, '-')

    def test_bad_number_is_format_error(self):
        line = PSL_LINE_CHR1.replace("\t999\t1149\t", "\tabc\t1149\t")
        with self.assertRaises(FormatError) as ctx:
            BlatParser(GeneModel()).parse(cursor_for(PSL_HEADER + line, "hits.psl"))
        self.assertEqual(ctx.exception.filename, "hits.psl")
        self.assertEqual(ctx.exception.line_number, 6)

    def test_short_block_list_is_format_error(self):
        line = PSL_LINE_CHR1.replace("\t20,30,\t", "\t20,\t")
        with self.assertRaises(FormatError):
            BlatParser(GeneModel()).parse(cursor_for(line))

    def test_invalid_strand_is_format_error(self):
        with self.assertRaises(FormatError):
            BlatParser(GeneModel()).parse(cursor_for(PSL_LINE_CHR1.replace("\t+\t", "\t?\t")))


class TestEncodeParser(unittest.TestCase):
    """Test genePred conversion."""

    def test_coding_transcript(self):
        model = GeneModel()
        EncodeParser(model).parse(cursor_for(ENCODE_LINE_CODING))

        gene = model['chr2'].genes[0]
        self.assertEqual(gene.range, Range(100, 600))
        self.assertEqual(gene.strand, '-')
        self.assertEqual(gene.name, 'NM_1')
        self.assertEqual(gene.attributes, {'Name2': 'GENE1'})
        self.assertEqual(gene.cds_range, Range(150, 450))
        self.assertEqual(gene.exons, [Range(100, 200), Range(300, 400), Range(500, 600)])

    def test_noncoding_transcript_has_no_cds(self):
        model = GeneModel()
        EncodeParser(model).parse(cursor_for(ENCODE_LINE_NONCODING))
        gene = model['chr2'].genes[0]
        self.assertIsNone(gene.cds_range)
        self.assertEqual(gene.exons, [Range(1000, 1500)])

    def test_genes_share_sequence(self):
        model = GeneModel()
        parser = EncodeParser(model)
        parser.parse(cursor_for(ENCODE_LINE_CODING + "\n" + ENCODE_LINE_NONCODING))
        self.assertEqual(list(model), ['chr2'])
        self.assertEqual(model['chr2'].range, Range(100, 1500))
        self.assertEqual(parser.genes_added, 2)
        self.assertEqual(parser.lines_skipped, 0)

    def test_invalid_strand_is_format_error(self):
        line = ENCODE_LINE_CODING.replace("\t-\t", "\t.\t")
        with self.assertRaises(FormatError) as ctx:
            EncodeParser(GeneModel()).parse(cursor_for(line, "genes.txt"))
        self.assertEqual(ctx.exception.line_number, 1)
        self.assertIn("not a valid strand", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
