"""Configuration models for hosts embedding the event emitter."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from ..utils.log_setup import setup_logging

logger = logging.getLogger(__name__)


# --- CUSTOM EXCEPTIONS ---

class EventEmitterError(Exception):
    """Base exception for event emitter errors."""


class ConfigError(EventEmitterError):
    """Configuration loading error."""


# --- CONFIGURATION DATACLASSES ---

@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str = "INFO"
    log_file: Optional[str] = None


# --- HELPER FUNCTIONS ---

def safe_load_dataclass(dclass_type, data: dict, section_name: str):
    """Safely load a dataclass from a dictionary.
    
    Ignores unknown keys and logs warnings for them.
    
    Args:
        dclass_type: Dataclass type to instantiate
        data: Dictionary with configuration data
        section_name: Name of config section (for logging)
        
    Returns:
        Instance of dclass_type with filtered data
    """
    valid_keys = {f.name for f in fields(dclass_type)}
    filtered_data = {}

    for k, v in data.items():
        if k in valid_keys:
            filtered_data[k] = v
        else:
            logger.warning(
                "Config warning: Unknown key '%s' in section '%s' ignored.",
                k, section_name
            )

    return dclass_type(**filtered_data)


@dataclass
class EmitterConfig:
    """Top-level configuration container."""
    logging: LoggingConfig

    @classmethod
    def load(cls, config_path: Path | str) -> 'EmitterConfig':
        """Load configuration from a YAML file.
        
        An empty file or a missing ``logging`` section yields defaults.
        
        Args:
            config_path: Path to the YAML file
            
        Returns:
            EmitterConfig instance with loaded configuration
            
        Raises:
            ConfigError: If file not found, YAML parsing fails, or a
                section is not a mapping
        """
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file '{path}' not found.")

        try:
            with path.open('r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at top level of '{path}'.")

        section = data.get('logging') or {}
        if not isinstance(section, dict):
            raise ConfigError("Section 'logging' must be a mapping.")

        return cls(logging=safe_load_dataclass(LoggingConfig, section, 'logging'))

    def apply(self) -> None:
        """Configure the logging subsystem from this configuration."""
        log_file = Path(self.logging.log_file) if self.logging.log_file else None
        setup_logging(self.logging.level, log_file)
