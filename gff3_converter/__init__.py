#!/usr/bin/env python3

"""
GFF3 converters for alignment output.

Turns GMAP alignment reports, BLAT PSL files and UCSC/ENCODE genePred
dumps into GFF3 gene models.

Modules:
- core: Data structures, parsers, GFF3 output, configuration and errors
- utils: Performance monitoring
- cli: Command-line entry point (gff3-convert)
- tests: Unit tests
"""

__version__ = "1.0.0"

from .core.data_structures import Range, Gene, Sequence, GeneModel
from .core.exceptions import (
    ConversionError, UsageError, FormatError, RecoverableSkip,
    ConfigurationError, MemoryLimitError
)
from .core.config import ConverterConfig, load_config
from .core.scanner import LineCursor
from .core.parsers import GMAPParser, BlatParser, EncodeParser, load_coordinate_mapping
from .core.generators import GFF3Writer
from .core.pipeline import ConversionPipeline

__all__ = [
    # Driver
    'ConversionPipeline',
    # Data structures
    'Range', 'Gene', 'Sequence', 'GeneModel',
    # Parsing and output
    'LineCursor', 'GMAPParser', 'BlatParser', 'EncodeParser',
    'load_coordinate_mapping', 'GFF3Writer',
    # Exceptions
    'ConversionError', 'UsageError', 'FormatError', 'RecoverableSkip',
    'ConfigurationError', 'MemoryLimitError',
    # Configuration
    'ConverterConfig', 'load_config'
]
