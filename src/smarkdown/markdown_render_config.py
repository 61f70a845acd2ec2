"""Render configuration, stored as YAML."""

import logging
import os
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict

import yaml

from smarkdown.markdown_exceptions import MarkdownConfigError


@dataclass
class MarkdownRenderConfig:
    """Settings shared by the scanner, the render driver and the HTML renderer."""

    normalize_line_endings: bool = True
    reuse_unchanged_snapshot: bool = True
    bullet: str = "•"
    indent_unit_rem: float = 0.5
    code_language_prefix: str = "language-"

    @classmethod
    def create_default(cls) -> 'MarkdownRenderConfig':
        """Create a configuration with default values."""
        return cls()

    @classmethod
    def from_dict(cls, data: Any) -> 'MarkdownRenderConfig':
        """
        Create a configuration from a mapping, using defaults for missing keys.

        Args:
            data: Mapping of field names to values

        Returns:
            The configuration

        Raises:
            MarkdownConfigError: If data is not a mapping, has unknown keys, or has values of the wrong type
        """
        if data is None:
            return cls.create_default()

        if not isinstance(data, dict):
            raise MarkdownConfigError(
                f"Configuration must be a mapping, got {type(data).__name__}",
                {"type": type(data).__name__}
            )

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise MarkdownConfigError(f"Unknown configuration keys: {', '.join(unknown)}", {"unknown_keys": unknown})

        defaults = cls.create_default()
        values: Dict[str, Any] = {}
        for name, value in data.items():
            expected = type(getattr(defaults, name))

            # YAML has no separate float syntax for whole numbers.
            if expected is float and isinstance(value, int) and not isinstance(value, bool):
                value = float(value)

            if not isinstance(value, expected) or (expected is not bool and isinstance(value, bool)):
                raise MarkdownConfigError(
                    f"Configuration key '{name}' must be of type {expected.__name__}",
                    {"key": name, "expected": expected.__name__, "actual": type(value).__name__}
                )

            values[name] = value

        return cls(**values)

    @classmethod
    def load_from_file(cls, config_path: str) -> 'MarkdownRenderConfig':
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML file

        Returns:
            The configuration

        Raises:
            MarkdownConfigError: If the file is missing, unreadable or invalid
        """
        if not os.path.exists(config_path):
            raise MarkdownConfigError(f"Configuration file not found: {config_path}", {"path": config_path})

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

        except (OSError, yaml.YAMLError) as e:
            raise MarkdownConfigError(f"Failed to read configuration file {config_path}: {e}", {"path": config_path}) from e

        config = cls.from_dict(data)
        logging.getLogger("MarkdownRenderConfig").debug("Loaded render configuration from %s", config_path)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return asdict(self)

    def save_to_file(self, config_path: str) -> None:
        """
        Save the configuration to a YAML file.

        Args:
            config_path: Path to write
        """
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)
