#!/usr/bin/env python3

"""
Conversion driver.

Parses every input into one gene model, then writes the model as GFF3.
"""

import sys
import logging
from typing import Dict, List, Optional, TextIO

from .config import ConverterConfig
from .data_structures import GeneModel
from .exceptions import UsageError
from .generators import GFF3Writer
from .parsers import GMAPParser, BlatParser, EncodeParser, load_coordinate_mapping
from .scanner import LineCursor
from ..utils.performance_monitor import PerformanceMonitor

STDIN_NAME = '-'


class ConversionPipeline:
    """Coordinate parsing of all inputs and the single GFF3 write."""

    def __init__(self, config: ConverterConfig):
        self.config = config
        self.monitor = PerformanceMonitor(memory_limit_mb=config.memory_limit_mb)
        self.model = GeneModel()
        self.coordinate_mapping: Optional[Dict[str, int]] = None
        self.parser = None

    def run(self, input_paths: List[str], output: TextIO) -> int:
        """
        Convert all inputs and write GFF3 to output.

        Inputs are read one after the other; '-' reads standard input.
        Nothing is written unless every input parses.

        Returns:
            Number of genes written
        """
        self.parse(input_paths)
        return self.write(output)

    def parse(self, input_paths: List[str]) -> GeneModel:
        """Parse all inputs into the model."""
        if not input_paths:
            raise UsageError("no input files given (use '-' for standard input)")

        logging.info(f"Converting {len(input_paths)} {self.config.input_format} input(s)")

        self.parser = self._create_parser()
        self._parse_inputs(input_paths)
        return self.model

    def write(self, output: TextIO) -> int:
        """Write the parsed model as GFF3; returns the number of genes written."""
        gene_count = self._generate_output(output)
        self.monitor.log_performance_report()
        return gene_count

    def _create_parser(self):
        """Build the parser for the configured input format, bound to the model."""
        input_format = self.config.input_format

        if self.config.max_mismatches is not None and input_format != 'blat':
            raise UsageError("a mismatch threshold only applies to blat input")
        if self.config.coordinate_mapping_file and input_format != 'gmap':
            raise UsageError("a coordinate mapping only applies to gmap input")

        if input_format == 'gmap':
            if self.config.coordinate_mapping_file:
                self.coordinate_mapping = load_coordinate_mapping(self.config.coordinate_mapping_file)
            return GMAPParser(self.model, self.coordinate_mapping)
        elif input_format == 'blat':
            return BlatParser(self.model, self.config.max_mismatches)
        return EncodeParser(self.model)

    def _parse_inputs(self, input_paths: List[str]) -> None:
        with self.monitor.phase_context("input_parsing"):
            for path in input_paths:
                if path == STDIN_NAME:
                    self.parser.parse(LineCursor(sys.stdin, '<stdin>'))
                else:
                    with open(path, 'r') as f:
                        self.parser.parse(LineCursor(f, path))

                self.monitor.record_operations(1)
                if self.config.enable_memory_monitoring:
                    self.monitor.check_memory_limit()

            logging.info(f"Model holds {self.model.gene_count} genes "
                         f"on {len(self.model)} sequences")

    def _generate_output(self, output: TextIO) -> int:
        with self.monitor.phase_context("output_generation"):
            writer = GFF3Writer(self.config.source_label)
            gene_count = writer.write(self.model, output)
            self.monitor.record_operations(gene_count)
        return gene_count
