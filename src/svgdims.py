#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
svgdims.py - SVG dimension extractor.

Prints the width, height and viewBox of the root <svg> tag of each given file.
Without arguments, runs three built-in examples instead.

Date: 2026-10-19

Usage:
    python svgdims.py [file.svg ...]

Examples:
    python svgdims.py                       # Built-in examples
    python svgdims.py my_icon.svg logo.svg
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for module imports
sys.path.append(str(Path(__file__).parent.parent))

from texbank.display_utils import TerminalDisplay, Icons
from texbank.svg_dimensions import get_svg_dimensions


BUILTIN_EXAMPLES = [
    (
        "Explicit Width/Height (400px x 300px)",
        '<svg width="400px" height="300px" viewBox="0 0 400 300" xmlns="http://www.w3.org/2000/svg"><rect/></svg>',
    ),
    (
        "ViewBox Only (100 x 50 unitless)",
        '<svg viewBox="0 0 100 50" xmlns="http://www.w3.org/2000/svg"><circle/></svg>',
    ),
    (
        "Relative Dimensions (100% x auto), ViewBox 1000x500",
        '<svg xmlns="http://www.w3.org/2000/svg" width="100%" height="auto" viewBox="0 0 1000 500"><path/></svg>',
    ),
]


def process_svg_file(file_path: Path, display: TerminalDisplay) -> bool:
    """
    Read an SVG file and print its dimensions.

    Returns:
        False if the file could not be read or has no root tag
    """
    try:
        svg_content = file_path.read_text(encoding='utf-8')
    except FileNotFoundError:
        display.error(f"Error: File not found at path: {file_path}")
        return False
    except (OSError, UnicodeDecodeError) as e:
        display.error(f"An error occurred while reading the file: {e}")
        return False

    display.section(f"Analyzing File: {file_path}", icon=Icons.RULER)
    result = get_svg_dimensions(svg_content)
    display.svg_dimensions(result)
    return 'error' not in result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Extract width and height from the root <svg> tag of SVG files"
    )
    parser.add_argument('files', nargs='*', help='SVG files to analyze')
    parser.add_argument(
        '-v', '--verbose',
        type=int,
        choices=[0, 1, 2, 3],
        default=2,
        help='Verbosity level (0-3, default: 2)'
    )
    args = parser.parse_args(argv)

    display = TerminalDisplay(verbose=args.verbose)
    display.header("SVG Dimension Extractor", icon=Icons.RULER)

    if not args.files:
        display.info("No files provided", "running built-in examples instead")
        for index, (label, svg) in enumerate(BUILTIN_EXAMPLES, 1):
            display.section(f"[Example {index}] {label}", icon=Icons.RULER)
            display.svg_dimensions(get_svg_dimensions(svg))
        return 0

    ok = [process_svg_file(Path(f), display) for f in args.files]

    display.success("Processing complete")
    return 0 if all(ok) else 1


if __name__ == "__main__":
    sys.exit(main())
