# -*- coding: utf-8 -*-
"""
Terminal display utilities for the conversion scripts.

Coloured headers, status lines and summary tables. Colours are switched off
automatically when stdout is not a terminal.

Date: 2026-10-19
"""

import sys
from typing import Any, Dict


class Colors:
    """ANSI color codes for terminal output."""
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    CYAN = '\033[36m'

    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_CYAN = '\033[96m'

    BOLD = '\033[1m'
    DIM = '\033[2m'

    RESET = '\033[0m'

    @staticmethod
    def disable():
        """Disable colors (for non-terminal output)."""
        for attr in dir(Colors):
            if not attr.startswith('_') and attr != 'disable':
                setattr(Colors, attr, '')


class Icons:
    """Unicode icons for terminal display."""
    CHECK = '✓'
    CROSS = '✗'
    ARROW = '→'
    INFO = 'ℹ'
    WARNING = '⚠'
    SEARCH = '🔎'
    FOLDER = '📁'
    HOURGLASS = '⏳'
    RULER = '📐'
    ROCKET = '🚀'


class TerminalDisplay:
    """Terminal display with colors and verbosity gating."""

    def __init__(self, use_colors: bool = True, verbose: int = 2):
        """Initialize display settings."""
        self.use_colors = use_colors and sys.stdout.isatty()
        self.verbose = verbose

        if not self.use_colors:
            Colors.disable()

    def header(self, text: str, icon: str = Icons.ROCKET):
        """Display a large header."""
        if self.verbose < 1:
            return
        width = 60
        print(f"{Colors.BRIGHT_CYAN}{'═' * width}{Colors.RESET}")
        print(f"{Colors.BRIGHT_CYAN}{icon} {Colors.BOLD}{text}{Colors.RESET}")
        print(f"{Colors.BRIGHT_CYAN}{'═' * width}{Colors.RESET}")

    def section(self, text: str, icon: str = Icons.HOURGLASS):
        """Display a section header."""
        if self.verbose < 2:
            return
        print()
        print(f"{Colors.BRIGHT_YELLOW}{icon} {Colors.BOLD}{text}{Colors.RESET}")
        print(f"{Colors.BRIGHT_YELLOW}{'─' * 60}{Colors.RESET}")

    def info(self, label: str, value: Any, icon: str = Icons.INFO):
        """Display an info line."""
        if self.verbose >= 2:
            print(f"{Colors.BLUE}{icon} {Colors.BOLD}{label}:{Colors.RESET} {value}")

    def success(self, text: str):
        """Display a success message."""
        if self.verbose >= 1:
            print(f"{Colors.GREEN}{Icons.CHECK} {text}{Colors.RESET}")

    def warning(self, text: str):
        """Display a warning message."""
        if self.verbose >= 1:
            print(f"{Colors.YELLOW}{Icons.WARNING} {text}{Colors.RESET}")

    def error(self, text: str):
        """Errors are shown at every verbosity level except 0."""
        if self.verbose >= 1:
            print(f"{Colors.RED}{Icons.CROSS} {text}{Colors.RESET}")

    def summary_table(self, stats: Dict[str, Any]):
        """Display a summary table."""
        if self.verbose < 2:
            return
        print(f"\n{Colors.BRIGHT_GREEN}┌{'─' * 40}┬{'─' * 17}┐{Colors.RESET}")
        print(f"{Colors.BRIGHT_GREEN}│{Colors.BOLD} {'Metric':<38} {Colors.RESET}{Colors.BRIGHT_GREEN}│{Colors.BOLD} {'Value':>15} {Colors.RESET}{Colors.BRIGHT_GREEN}│{Colors.RESET}")
        print(f"{Colors.BRIGHT_GREEN}├{'─' * 40}┼{'─' * 17}┤{Colors.RESET}")

        for key, value in stats.items():
            if isinstance(value, float):
                value_str = f"{value:.2f}"
            else:
                value_str = str(value)
            print(f"{Colors.BRIGHT_GREEN}│{Colors.RESET} {key:<38} {Colors.BRIGHT_GREEN}│{Colors.RESET} {value_str:>15} {Colors.BRIGHT_GREEN}│{Colors.RESET}")

        print(f"{Colors.BRIGHT_GREEN}└{'─' * 40}┴{'─' * 17}┘{Colors.RESET}")

    def svg_dimensions(self, result: Dict[str, Any]):
        """Display the outcome of an SVG dimension lookup."""
        if self.verbose < 1:
            return
        if result.get('error'):
            self.error(f"Error: {result['error']}")
            return

        print(f"{Colors.CYAN}[Status]{Colors.RESET} Source of Dimensions: {result['source']}")
        print(f"{Colors.CYAN}[Width]{Colors.RESET}   : {result.get('width') or 'N/A'}")
        print(f"{Colors.CYAN}[Height]{Colors.RESET}  : {result.get('height') or 'N/A'}")
        if result.get('unit') and result['unit'] != 'unknown':
            print(f"{Colors.CYAN}[Unit]{Colors.RESET}    : {result['unit']}")
        if result.get('viewBox'):
            print(f"{Colors.CYAN}[ViewBox]{Colors.RESET} : {result['viewBox']}")
        if result.get('message'):
            print(f"{Colors.YELLOW}[Message]{Colors.RESET} : {result['message']}")
