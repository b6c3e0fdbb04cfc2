#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
sections2tex.py - Chapter/section LaTeX file generator.

This script reads question bank documents with "sections" and "questions"
lists and writes one LaTeX file per section that has questions. Each file
inputs the matching question fragments produced by questions2tex.py.

Date: 2026-10-19

Usage:
    python sections2tex.py [options]

Examples:
    python sections2tex.py                                   # Run configured jobs
    python sections2tex.py --job 50Ohm/50Ohm_NE.json:tex_sections
    python sections2tex.py --fragment-dir fragen -v 3
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for module imports
sys.path.append(str(Path(__file__).parent.parent))

from texbank.config_manager import ConfigManager
from texbank.display_utils import TerminalDisplay, Icons
from texbank.section_writer import SectionFileProcessor


def parse_job(value: str) -> dict:
    """Parse a 'JSON_PATH:OUTPUT_DIR' job argument."""
    json_path, sep, output_dir = value.rpartition(':')
    if not sep or not json_path or not output_dir:
        raise argparse.ArgumentTypeError(f"expected JSON_PATH:OUTPUT_DIR, got '{value}'")
    return {"json_path": json_path, "output_dir": output_dir}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Group question fragments into chapter/section LaTeX files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                    # Run the configured jobs
  %(prog)s --job a.json:out_a --job b.json:out_b
  %(prog)s -c my_config.json                  # Use custom config file
        """
    )

    parser.add_argument(
        '--job',
        action='append',
        type=parse_job,
        metavar='JSON_PATH:OUTPUT_DIR',
        help='Conversion job; repeat for several (default: jobs from config)'
    )

    parser.add_argument(
        '--fragment-dir',
        help='Fragment directory used in \\input lines (default: tex_fragen)'
    )

    parser.add_argument(
        '-c', '--config',
        help='Configuration file (default: config.json if exists)'
    )

    parser.add_argument(
        '-v', '--verbose',
        type=int,
        choices=[0, 1, 2, 3],
        default=2,
        help='Verbosity level (0-3, default: 2)'
    )

    args = parser.parse_args(argv)

    if not args.config:
        default_config = Path('config.json')
        if default_config.exists():
            args.config = str(default_config)

    config = ConfigManager(Path(args.config) if args.config else None, verbose=args.verbose)
    if args.job:
        config.set('sections.jobs', args.job)
    if args.fragment_dir:
        config.set('sections.fragment_subdir', args.fragment_dir)

    display = TerminalDisplay(verbose=args.verbose)
    display.header("sections2tex.py - Sections to LaTeX")

    start_time = time.time()
    jobs = config.get_jobs()
    if not jobs:
        display.warning("No conversion jobs configured")
        return 0

    processor = SectionFileProcessor(config, verbose=args.verbose)
    results = processor.run(jobs)

    failed_jobs = [r for r in results if r.get('error')]
    for result in results:
        if result.get('error'):
            display.error(f"{result['json_path']}: {result['error']}")
        else:
            display.success(f"{result['json_path']}: {result['files_written']} section files in '{result['output_dir']}'")

    display.summary_table({
        "Jobs": len(results),
        "Failed jobs": len(failed_jobs),
        "Section files written": sum(r['files_written'] for r in results),
        "Write failures": sum(len(r['write_failures']) for r in results),
        "Execution time (s)": time.time() - start_time,
    })
    display.info("Fragment directory", config.get('sections.fragment_subdir'), icon=Icons.FOLDER)

    return 1 if failed_jobs else 0


if __name__ == "__main__":
    sys.exit(main())
