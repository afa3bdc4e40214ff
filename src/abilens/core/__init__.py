"""Core data models, configuration, interfaces and constants.

This package provides:
- Data models (LogEntry, DecodedParam, DecodedCall, DecodedLog, RegistryState)
- Configuration (RegistryConfig)
- Timer facility protocols (IScheduler, ITimerHandle)
"""

from abilens.core.config import RegistryConfig
from abilens.core.interfaces import IScheduler, ITimerHandle
from abilens.core.models import DecodedCall, DecodedLog, DecodedParam, LogEntry, RegistryState

__all__ = [
    "RegistryConfig",
    "IScheduler",
    "ITimerHandle",
    "DecodedCall",
    "DecodedLog",
    "DecodedParam",
    "LogEntry",
    "RegistryState",
]
