# -*- coding: utf-8 -*-
"""
SVG to TikZ batch converter module.

Runs the external ``svg2tikz`` tool on each SVG file and writes the bare
TikZ code (``--codeonly``) next to the input with a ``.tex`` suffix.

Date: 2026-10-19
"""

import subprocess
from pathlib import Path
from typing import Dict, Iterable, List

from .config_manager import ConfigManager


class SvgTikzConverter:
    """Converts SVG files to TikZ code files, one at a time."""

    def __init__(self, config: ConfigManager, verbose: int = 2):
        """
        Initialize the converter.

        Args:
            config: Configuration manager instance
            verbose: Verbosity level (0-3)
        """
        self.verbose = verbose
        self.executable = config.get('svg2tikz.executable', 'svg2tikz')
        self.timeout = config.get('svg2tikz.timeout', 120)

    def build_command(self, svg_path: Path, output_path: Path) -> List[str]:
        return [self.executable, '--codeonly', f'--output={output_path}', str(svg_path)]

    def convert_file(self, svg_path: Path) -> bool:
        """
        Convert one SVG file.

        Returns:
            True if svg2tikz reported success
        """
        output_path = svg_path.with_suffix('.tex')
        if self.verbose >= 2:
            print(f"[TIKZ] Converting '{svg_path}' to '{output_path}'...")

        try:
            result = subprocess.run(
                self.build_command(svg_path, output_path),
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError:
            if self.verbose >= 1:
                print(f"[TIKZ] Error: '{self.executable}' not found. Is svg2tikz installed?")
            return False
        except subprocess.TimeoutExpired:
            if self.verbose >= 1:
                print(f"[TIKZ] Error: svg2tikz timed out after {self.timeout} seconds on '{svg_path}'")
            return False

        if result.returncode != 0:
            if self.verbose >= 1:
                print(f"[TIKZ] Error: svg2tikz could not convert '{svg_path}'")
                if result.stderr and self.verbose >= 3:
                    print(result.stderr.rstrip())
            return False

        if self.verbose >= 2:
            print("[TIKZ] Converted successfully.")
        return True

    def convert_files(self, paths: Iterable[Path]) -> Dict[str, List[str]]:
        """
        Convert a batch of files; bad paths and failures do not stop the batch.

        Returns:
            Dict with 'converted', 'skipped' and 'failed' path lists
        """
        summary: Dict[str, List[str]] = {"converted": [], "skipped": [], "failed": []}

        for path in paths:
            svg_path = Path(path)
            if not svg_path.is_file():
                if self.verbose >= 1:
                    print(f"[TIKZ] Warning: File '{svg_path}' does not exist. Skipping...")
                summary["skipped"].append(str(svg_path))
                continue

            if svg_path.suffix != '.svg':
                if self.verbose >= 1:
                    print(f"[TIKZ] Warning: '{svg_path}' is not an SVG file. Skipping...")
                summary["skipped"].append(str(svg_path))
                continue

            if self.convert_file(svg_path):
                summary["converted"].append(str(svg_path))
            else:
                summary["failed"].append(str(svg_path))

        return summary
