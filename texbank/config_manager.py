# -*- coding: utf-8 -*-
"""
Configuration manager module for handling paths and converter settings.

This module manages loading, validating, and accessing configuration settings
for the qbank2tex scripts. Every processor receives a ConfigManager instead of
reading module-level constants, so the same code runs against the real
catalogue tree or against a temporary directory.

Date: 2026-10-19
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, List, Optional


class ConfigManager:
    """Manages configuration settings for the qbank2tex scripts."""

    # Default configuration values
    DEFAULT_CONFIG = {
        "paths": {
            "base_dir": ""  # Empty means current working directory
        },
        "questions": {
            "input_file": "Fragen/fragenkatalog3b.json",
            "output_dir": "tex_fragen"
        },
        "sections": {
            "fragment_subdir": "tex_fragen",
            "jobs": [
                {
                    "json_path": "50Ohm/50Ohm_NE.json",
                    "output_dir": "tex_sections"
                }
            ]
        },
        "svg2tikz": {
            "executable": "svg2tikz",
            "timeout": 120
        },
        "output": {
            "encoding": "utf-8"
        }
    }

    def __init__(self, config_file: Optional[Path] = None, verbose: int = 2,
                 base_dir: Optional[Path] = None):
        """
        Initialize the configuration manager.

        Args:
            config_file: Path to configuration file (optional)
            verbose: Verbosity level (0-3)
            base_dir: Directory that relative paths are resolved against (overrides config)
        """
        self.verbose = verbose
        self.config_file = config_file
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and config_file.exists():
            self._load_config()
        elif config_file:
            if self.verbose >= 1:
                print(f"[CONFIG] Config file not found: {config_file}")
                print("[CONFIG] Using default configuration")

        if base_dir is not None:
            self.set('paths.base_dir', str(base_dir))

    def _load_config(self) -> None:
        """Load configuration from file and merge with defaults."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError("top level must be a JSON object")

            # Deep merge user config with defaults
            self.config = self._deep_merge(self.DEFAULT_CONFIG, user_config)

            if self.verbose >= 2:
                print(f"[CONFIG] Loaded configuration from {self.config_file}")

            self._validate_config()

        except json.JSONDecodeError as e:
            if self.verbose >= 1:
                print(f"[CONFIG] Error parsing config file: {e}")
                print("[CONFIG] Using default configuration")
        except (OSError, ValueError) as e:
            if self.verbose >= 1:
                print(f"[CONFIG] Error loading config file: {e}")
                print("[CONFIG] Using default configuration")

    def _deep_merge(self, default: Dict, user: Dict) -> Dict:
        """Deep merge user configuration with defaults."""
        result = copy.deepcopy(default)

        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _validate_config(self) -> None:
        """Validate configuration values."""
        tikz = self.config['svg2tikz']

        if not isinstance(tikz.get('timeout'), (int, float)) or tikz['timeout'] < 1:
            tikz['timeout'] = 1
            if self.verbose >= 1:
                print("[CONFIG] Warning: svg2tikz.timeout must be >= 1, setting to 1")

        if not tikz.get('executable'):
            tikz['executable'] = self.DEFAULT_CONFIG['svg2tikz']['executable']
            if self.verbose >= 1:
                print("[CONFIG] Warning: svg2tikz.executable is empty, using 'svg2tikz'")

        jobs = self.config['sections'].get('jobs')
        if not isinstance(jobs, list):
            self.config['sections']['jobs'] = []
            if self.verbose >= 1:
                print("[CONFIG] Warning: sections.jobs must be a list, ignoring it")
            return

        valid_jobs = []
        for index, job in enumerate(jobs):
            if isinstance(job, dict) and job.get('json_path') and job.get('output_dir'):
                valid_jobs.append(job)
            elif self.verbose >= 1:
                print(f"[CONFIG] Warning: sections.jobs[{index}] needs 'json_path' and 'output_dir', skipping")
        self.config['sections']['jobs'] = valid_jobs

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value (e.g., "questions.input_file")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any) -> None:
        """
        Set a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value
            value: Value to set
        """
        keys = key_path.split('.')
        config = self.config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value

    @property
    def base_dir(self) -> Path:
        base = self.get('paths.base_dir', '')
        return Path(base) if base else Path.cwd()

    @property
    def encoding(self) -> str:
        return self.get('output.encoding', 'utf-8')

    def resolve_path(self, path: str) -> Path:
        """Resolve a configured path against the base directory."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.base_dir / candidate

    def get_jobs(self) -> List[Dict[str, Path]]:
        """Return the section jobs with their paths resolved."""
        return [
            {
                "json_path": self.resolve_path(job['json_path']),
                "output_dir": self.resolve_path(job['output_dir'])
            }
            for job in self.get('sections.jobs', [])
        ]

    def save_config(self, output_file: Optional[Path] = None) -> None:
        """
        Save current configuration to file.

        Args:
            output_file: Path to save config (uses original file if not specified)
        """
        save_path = output_file or self.config_file

        if not save_path:
            if self.verbose >= 1:
                print("[CONFIG] No config file path specified")
            return

        try:
            with open(save_path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, ensure_ascii=False, indent=2)

            if self.verbose >= 2:
                print(f"[CONFIG] Saved configuration to {save_path}")

        except OSError as e:
            if self.verbose >= 1:
                print(f"[CONFIG] Error saving configuration: {e}")

    def __str__(self) -> str:
        """String representation of configuration."""
        return json.dumps(self.config, ensure_ascii=False, indent=2)
