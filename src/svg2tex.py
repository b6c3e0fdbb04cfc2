#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
svg2tex.py - SVG to TikZ batch converter.

Converts one or more SVG files into TikZ code files with svg2tikz. The output
of bild.svg is written to bild.tex in the same directory.

Date: 2026-10-19

Usage:
    python svg2tex.py file1.svg [file2.svg ...]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for module imports
sys.path.append(str(Path(__file__).parent.parent))

from texbank.config_manager import ConfigManager
from texbank.display_utils import TerminalDisplay
from texbank.svg_converter import SvgTikzConverter


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Convert SVG files into TikZ code files using svg2tikz"
    )
    parser.add_argument('files', nargs='*', help='SVG files to convert')
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

    display = TerminalDisplay(verbose=args.verbose)

    if not args.files:
        display.error("Error: No SVG files given.")
        print(f"Usage: {parser.prog} <file1.svg> [<file2.svg> ...]")
        return 1

    if not args.config and Path('config.json').exists():
        args.config = 'config.json'

    config = ConfigManager(Path(args.config) if args.config else None, verbose=args.verbose)
    converter = SvgTikzConverter(config, verbose=args.verbose)
    summary = converter.convert_files(args.files)

    display.summary_table({
        "Converted": len(summary['converted']),
        "Skipped": len(summary['skipped']),
        "Failed": len(summary['failed']),
    })
    display.success("Done.")
    return 1 if summary['failed'] else 0


if __name__ == "__main__":
    sys.exit(main())
