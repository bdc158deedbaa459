#!/usr/bin/env python3

"""
Line classifiers for GMAP alignment reports and coordinate mapping files.

Each classifier looks at a single line and either answers a yes/no
question or extracts a value, returning None when the line does not have
the expected shape. The GMAP parser builds its state transitions on these
and never matches text itself.
"""

import re
from typing import Optional, Tuple

RECORD_MARKER = '>'

_PATH_COUNT_RE = re.compile(r'^Paths \((\d+)\):')
_STRAND_RE = re.compile(r'^.*\(([+-])')
_EXON_RE = re.compile(r'^.*:(\d+)-(\d+)')
_MAPPING_RE = re.compile(r'^(\S+)\s+(\d+)')


def is_record_marker(line: str) -> bool:
    """Check if a line opens a new query record."""
    return line.startswith(RECORD_MARKER)


def extract_record_name(line: str) -> str:
    """Get the query name from a record marker line (first word after '>')."""
    parts = line[len(RECORD_MARKER):].split()
    return parts[0] if parts else ""


def is_paths_line(line: str) -> bool:
    return line.startswith('Paths')


def extract_path_count(line: str) -> Optional[int]:
    """Get N from a 'Paths (N):' announcement."""
    match = _PATH_COUNT_RE.match(line)
    return int(match.group(1)) if match else None


def is_genomic_position(line: str) -> bool:
    return 'Genomic pos:' in line


def extract_strand(line: str) -> Optional[str]:
    """Get the strand from the last '(+' or '(-' on a genomic position line."""
    match = _STRAND_RE.match(line)
    return match.group(1) if match else None


def is_accession_line(line: str) -> bool:
    return 'Accessions:' in line


def extract_accession(line: str) -> str:
    """Get the accession: the text between the first and second colon."""
    return line.split(':')[1].strip()


def is_alignment_block(line: str) -> bool:
    return line.startswith('Alignments:')


def extract_exon_coordinates(line: str) -> Optional[Tuple[int, int]]:
    """Get the last ':start-end' pair on an alignment line, as written."""
    if ':' not in line:
        return None
    match = _EXON_RE.match(line)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def extract_mapping_entry(line: str) -> Optional[Tuple[str, int]]:
    """Get (accession, offset) from a coordinate mapping line."""
    match = _MAPPING_RE.match(line)
    if not match:
        return None
    return match.group(1), int(match.group(2))
