"""Minimal synchronous event emitter."""

from .emitter import EventEmitter, Subscription
from .config import EmitterConfig, LoggingConfig, EventEmitterError, ConfigError
from .utils import setup_logging

__all__ = [
    'EventEmitter',
    'Subscription',
    'EmitterConfig',
    'LoggingConfig',
    'EventEmitterError',
    'ConfigError',
    'setup_logging',
]
