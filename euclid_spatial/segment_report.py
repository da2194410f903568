#!/usr/bin/env python3

# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Main user entry point - orchestrates loading, analysis, and exporting."""

import argparse
import logging
import sys
from pathlib import Path

from euclid_spatial import path_utils, xml_io
from euclid_spatial.errors import SpatialError
from euclid_spatial.logging_config import setup_logging
from euclid_spatial.segment_analyzer import SegmentAnalyzer

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments with smart defaults."""
    parser = argparse.ArgumentParser(
        description="Analyze 3D line segments described in a YAML job file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use default config
  %(prog)s

  # Specify input config
  %(prog)s --input my_job.yaml

  # Specify both input and output
  %(prog)s --input my_job.yaml --output my_report.json

  # Also write one XML document per segment
  %(prog)s --input my_job.yaml --xml xml_out/

  # Verbose output
  %(prog)s --input my_job.yaml --verbose
        """
    )

    default_config = Path(__file__).parent.parent / "config" / "segment_job.yaml"

    parser.add_argument(
        '--input', '-i',
        type=str,
        default=str(default_config) if default_config.exists() else None,
        help='Input YAML job file (default: config/segment_job.yaml)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Output JSON file (default: auto-generated in <input dir>/generated/)'
    )

    parser.add_argument(
        '--xml',
        type=str,
        default=None,
        help='Directory to write <segment name>.xml documents to'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log detailed information during analysis'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Orchestrate loading, analysis, and exporting of segments."""
    args = parse_arguments(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.input is None:
        logger.error("No input file specified and default config not found")
        logger.error("Use --input to specify a YAML job file")
        return 1

    try:
        logger.debug("Loading job from: %s", args.input)
        records, parameters, plane = path_utils.load_segment_job(args.input)

        logger.debug("  Job: %s", Path(args.input).stem)
        logger.debug("  Number of segments: %d", len(records))
        logger.debug("  Probe points: %d", len(parameters['probe_points']))
        logger.debug("  Clamp to segment: %s", parameters['clamp_to_segment'])
        logger.debug("  Reference plane: %s", plane)

        analyzer = SegmentAnalyzer(parameters)

        for record in records:
            line = record.line_segment
            logger.debug("  Processing %s: %s", record.name, line)

            if not analyzer.analyze(record, plane):
                logger.error("Failed to analyze segment '%s'", record.name)
                return 1

            logger.debug("    Length: %.6g", line.length())

        parallel_pairs = analyzer.parallel_pairs(records)
        logger.info("Analyzed %d segment(s), %d parallel pair(s)", len(records), len(parallel_pairs))

        if args.output is None:
            output_path = path_utils.auto_generate_output_path(args.input)
            logger.debug("Auto-generated output path: %s", output_path)
        else:
            output_path = Path(args.output)

        metadata = {
            'input_file': str(Path(args.input).resolve()),
            'clamp_to_segment': parameters['clamp_to_segment'],
            'angle_tolerance_deg': parameters.get('angle_tolerance_deg'),
        }

        path_utils.export_to_json(records, output_path, parallel_pairs, metadata)
        logger.info("Report written to %s", output_path)

        if args.xml:
            xml_dir = Path(args.xml)
            xml_dir.mkdir(parents=True, exist_ok=True)
            for record in records:
                xml_io.write_segment_file(record.line_segment, xml_dir / f"{record.name}.xml")
            logger.info("XML documents written to %s", xml_dir)

        return 0

    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except (SpatialError, ValueError) as e:
        logger.error("Invalid job - %s", e)
        return 1
    except Exception as e:
        logger.error("%s", e)
        logger.debug("Traceback", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
