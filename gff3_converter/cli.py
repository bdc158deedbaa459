#!/usr/bin/env python3

"""
Command-line interface for the GFF3 converters.
"""

import argparse
import sys
import logging

from gff3_converter.core.config import INPUT_FORMATS, load_config
from gff3_converter.core.exceptions import ConversionError
from gff3_converter.core.pipeline import ConversionPipeline


def setup_logging(log_level: str = "INFO") -> None:
    """Set up logging configuration (standard error, so GFF3 can go to stdout)."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='gff3-convert',
        description="Convert GMAP, BLAT (PSL) or ENCODE genePred output to GFF3",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # GMAP alignment report
  gff3-convert gmap_output.txt > genes.gff3

  # GMAP with contig offsets, reading standard input
  gff3-convert --coordinate-mapping contigs.txt - < gmap_output.txt

  # BLAT, keeping alignments with at most 2 mismatches
  gff3-convert --format blat --max-mismatches 2 hits.psl --output genes.gff3
        """
    )

    parser.add_argument(
        'inputs',
        nargs='*',
        metavar='INPUT',
        help="Input files ('-' for standard input)"
    )
    parser.add_argument(
        '--format',
        choices=INPUT_FORMATS,
        help='Input format (default: gmap)'
    )
    parser.add_argument(
        '-m', '--max-mismatches',
        type=int,
        help='Drop BLAT alignments with more mismatches than this'
    )
    parser.add_argument(
        '--coordinate-mapping',
        help='Accession/offset table used to translate GMAP exon coordinates'
    )
    parser.add_argument(
        '--source',
        help='Source column for the GFF3 output (default: depends on format)'
    )
    parser.add_argument(
        '-o', '--output',
        help='Output GFF3 file (default: standard output)'
    )
    parser.add_argument(
        '--config',
        help='Configuration file (JSON or YAML)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Logging level (default: WARNING)'
    )
    parser.add_argument(
        '--memory-limit',
        type=int,
        help='Memory limit in MB (default: 4096)'
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        config = load_config(config_path=args.config, use_env=True)

        # Override config with command line arguments
        if args.format is not None:
            config.input_format = args.format
        if args.max_mismatches is not None:
            config.max_mismatches = args.max_mismatches
        if args.coordinate_mapping is not None:
            config.coordinate_mapping_file = args.coordinate_mapping
        if args.source is not None:
            config.source = args.source
        if args.memory_limit is not None:
            config.memory_limit_mb = args.memory_limit

        # Re-validate after CLI overrides.
        config.validate()

        if config.debug_mode:
            logging.getLogger().setLevel(logging.DEBUG)

        pipeline = ConversionPipeline(config)
        pipeline.parse(args.inputs)
        # output is only opened once every input has parsed
        if args.output:
            with open(args.output, 'w') as f:
                pipeline.write(f)
        else:
            pipeline.write(sys.stdout)
        return 0

    except OSError as e:
        logger.error(f"File error: {e}")
        return 1
    except ConversionError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        logger.debug("Full traceback:", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
