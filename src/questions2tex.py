#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
questions2tex.py - JSON question catalogue to LaTeX fragment converter.

This script collects every question from a nested JSON question catalogue and
writes one LaTeX fragment file per question, named after the question number.

Date: 2026-10-19

Usage:
    python questions2tex.py [options]

Examples:
    python questions2tex.py                              # Use defaults
    python questions2tex.py -i Fragen/katalog.json -o tex_fragen
    python questions2tex.py -v 3                         # Show every fragment
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
from texbank.errors import ConversionError
from texbank.file_io import load_json_document
from texbank.question_extractor import extract_questions
from texbank.question_writer import QuestionFragmentWriter


class QuestionProcessor:
    """Main processor for turning a question catalogue into fragment files."""

    def __init__(self, config: ConfigManager, verbose: int = 2):
        """Initialize the processor with a configuration."""
        self.config = config
        self.verbose = verbose
        self.display = TerminalDisplay(verbose=verbose)

        self.input_file = config.resolve_path(config.get('questions.input_file'))
        self.output_dir = config.resolve_path(config.get('questions.output_dir'))

    def run(self) -> bool:
        """
        Run the conversion.

        Returns:
            False if the catalogue could not be read or parsed
        """
        start_time = time.time()
        self.display.header("questions2tex.py - Questions to LaTeX fragments")
        self.display.info("Input file", self.input_file)
        self.display.info("Output directory", self.output_dir)

        try:
            catalogue = load_json_document(self.input_file, self.config.encoding)
            questions = extract_questions(catalogue, verbose=self.verbose)
        except ConversionError as e:
            self.display.error(f"Could not process '{self.input_file}'. "
                               "Make sure the file exists and is a valid question catalogue.")
            self.display.error(str(e))
            return False

        self.display.info("Questions found", len(questions), icon=Icons.SEARCH)

        writer = QuestionFragmentWriter(self.output_dir, encoding=self.config.encoding, verbose=self.verbose)
        try:
            files_created = writer.write_all(questions)
        except OSError as e:
            self.display.error(f"Cannot create output directory '{self.output_dir}': {e}")
            return False

        self.display.success(f"Done! Created {files_created} .tex files in '{self.output_dir}'.")
        self.display.summary_table({
            "Questions found": len(questions),
            "Fragments written": files_created,
            "Failures": len(writer.failed),
            "Execution time (s)": time.time() - start_time,
        })
        return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Convert a nested JSON question catalogue into LaTeX fragment files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Use default settings
  %(prog)s -v 3                     # Maximum verbosity
  %(prog)s -c my_config.json        # Use custom config file
        """
    )

    parser.add_argument(
        '-i', '--input',
        help='Input JSON catalogue (default: Fragen/fragenkatalog3b.json)'
    )

    parser.add_argument(
        '-o', '--output',
        help='Output directory for the fragments (default: tex_fragen)'
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

    # Check for default config.json if not specified
    if not args.config:
        default_config = Path('config.json')
        if default_config.exists():
            args.config = str(default_config)

    config = ConfigManager(Path(args.config) if args.config else None, verbose=args.verbose)
    if args.input:
        config.set('questions.input_file', args.input)
    if args.output:
        config.set('questions.output_dir', args.output)

    processor = QuestionProcessor(config, verbose=args.verbose)
    return 0 if processor.run() else 1


if __name__ == "__main__":
    sys.exit(main())
