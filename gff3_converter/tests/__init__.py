#!/usr/bin/env python3

"""
Test suite for the GFF3 converters.

Unit tests covering:
- Gene model data structures and their invariants
- Line cursor and line classifiers
- GMAP state machine, including skipped and malformed records
- BLAT and ENCODE tabular converters
- GFF3 output
- Configuration, driver and command line
"""
