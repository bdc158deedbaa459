#!/usr/bin/env python3

"""
Configuration management for the GFF3 converters.

Settings come from defaults, environment variables and an optional JSON or
YAML file; the command line overrides all of them.
"""

import os
import json
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

import yaml

from .exceptions import ConfigurationError

INPUT_FORMATS = ('gmap', 'blat', 'encode')

DEFAULT_SOURCES = {
    'gmap': 'gmap',
    'blat': 'blat',
    'encode': 'ENCODE',
}


@dataclass
class ConverterConfig:
    """Centralized configuration for a conversion run."""

    # Input settings
    input_format: str = 'gmap'
    max_mismatches: Optional[int] = None  # blat only
    coordinate_mapping_file: Optional[str] = None  # gmap only

    # Output settings
    source: Optional[str] = None  # defaults to the format's label

    # Performance settings
    memory_limit_mb: int = 4096
    enable_memory_monitoring: bool = True

    debug_mode: bool = False

    @classmethod
    def from_file(cls, config_path: str) -> 'ConverterConfig':
        """Load configuration from file (JSON or YAML)."""
        return cls.from_dict(cls.read_file(config_path))

    @staticmethod
    def read_file(config_path: str) -> Dict[str, Any]:
        """Read the raw settings mapping of a JSON or YAML configuration file."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                if config_path.lower().endswith(('.yaml', '.yml')):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")

        return config_data

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ConverterConfig':
        """Create configuration from dictionary."""
        # Filter out unknown keys
        known_keys = set(cls.__dataclass_fields__.keys())
        filtered_dict = {k: v for k, v in config_dict.items() if k in known_keys}

        try:
            return cls(**filtered_dict)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration parameters: {e}")

    @classmethod
    def from_env(cls) -> 'ConverterConfig':
        """Load configuration from environment variables."""
        config = cls()

        env_mappings = {
            'GFF3_CONVERT_FORMAT': ('input_format', str),
            'GFF3_CONVERT_SOURCE': ('source', str),
            'GFF3_CONVERT_MAX_MISMATCHES': ('max_mismatches', int),
            'GFF3_CONVERT_COORDINATE_MAPPING': ('coordinate_mapping_file', str),
            'GFF3_CONVERT_MEMORY_LIMIT_MB': ('memory_limit_mb', int),
            'GFF3_CONVERT_DEBUG_MODE': ('debug_mode', lambda x: x.lower() in ('true', '1', 'yes')),
        }

        for env_var, (field_name, converter) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                try:
                    setattr(config, field_name, converter(env_value))
                except (ValueError, TypeError) as e:
                    raise ConfigurationError(f"Invalid environment variable {env_var}: {e}")

        config.validate()
        return config

    @property
    def source_label(self) -> str:
        """Source column for the GFF3 output."""
        return self.source or DEFAULT_SOURCES[self.input_format]

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to file."""
        config_dict = self.to_dict()

        try:
            with open(config_path, 'w') as f:
                if config_path.lower().endswith(('.yaml', '.yml')):
                    yaml.safe_dump(config_dict, f, default_flow_style=False)
                else:
                    json.dump(config_dict, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}")

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.input_format not in INPUT_FORMATS:
            raise ConfigurationError(
                f"input_format must be one of {', '.join(INPUT_FORMATS)}, got '{self.input_format}'")

        if self.max_mismatches is not None and self.max_mismatches < 0:
            raise ConfigurationError("max_mismatches must be >= 0")

        if self.memory_limit_mb < 100:
            raise ConfigurationError("memory_limit_mb must be >= 100")

        if self.source is not None and not self.source.strip():
            raise ConfigurationError("source must not be empty")

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()


def load_config(config_path: Optional[str] = None,
                use_env: bool = True) -> ConverterConfig:
    """
    Load configuration with priority: file > environment > defaults.

    Args:
        config_path: Path to configuration file (optional)
        use_env: Whether to load environment variables

    Returns:
        ConverterConfig: Loaded configuration
    """
    config = ConverterConfig()

    if use_env:
        env_config = ConverterConfig.from_env()
        for field_name in ConverterConfig.__dataclass_fields__.keys():
            env_value = getattr(env_config, field_name)
            if env_value != getattr(config, field_name):
                setattr(config, field_name, env_value)

    if config_path:
        file_data = ConverterConfig.read_file(config_path)
        file_config = ConverterConfig.from_dict(file_data)
        # keys absent from the file keep their environment value
        for field_name in ConverterConfig.__dataclass_fields__.keys():
            if field_name in file_data:
                setattr(config, field_name, getattr(file_config, field_name))
        config.validate()

    return config
