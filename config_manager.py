"""Configuration management for the N-Queens search tools.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize search defaults, time limits, and benchmark settings.

File format (high-level)
------------------------
- search_settings: board size, strategy, secondary score, reporting interval
  and heap capacity hint for a single command line run.
- timeout_settings: per-strategy time limits in seconds (null = unlimited).
- benchmark_settings: N values, strategies, repetitions, and output directory.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist the configuration file.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_search_settings(self):
        """Return single-run search settings (n, strategy, secondary score, ...)."""
        return self.config.get("search_settings", {})

    def get_timeout_settings(self):
        """Return per-strategy timeout settings."""
        return self.config.get("timeout_settings", {})

    def get_benchmark_settings(self):
        """Return benchmark settings (sizes, strategies, runs, output dir)."""
        return self.config.get("benchmark_settings", {})

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
