#!/usr/bin/env python3

"""
Core module for the GFF3 converters.

Contains the gene model, the line cursor and classifiers, the parsers, the
GFF3 writer, exception types and configuration management.
"""

from .data_structures import Range, Gene, Sequence, GeneModel
from .exceptions import (
    ConversionError, UsageError, FormatError, RecoverableSkip,
    ConfigurationError, MemoryLimitError
)
from .config import ConverterConfig, load_config

__all__ = [
    'Range', 'Gene', 'Sequence', 'GeneModel',
    'ConversionError', 'UsageError', 'FormatError', 'RecoverableSkip',
    'ConfigurationError', 'MemoryLimitError',
    'ConverterConfig', 'load_config'
]
