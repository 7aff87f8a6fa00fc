"""Configuration package for the event emitter."""

from .models import (
    EmitterConfig,
    LoggingConfig,
    EventEmitterError,
    ConfigError,
    safe_load_dataclass,
)

__all__ = [
    'EmitterConfig',
    'LoggingConfig',
    'EventEmitterError',
    'ConfigError',
    'safe_load_dataclass',
]
