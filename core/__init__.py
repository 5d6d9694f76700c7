# File Attribute Helper - Core Module
"""
Core infrastructure for the file attribute helper: audit logging and settings.
"""

from .logger import AuditLogger, AuditEntry, ActionType, ActionStatus
from .config import load_config, save_config, DEFAULT_CONFIG

__all__ = [
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
    "load_config",
    "save_config",
    "DEFAULT_CONFIG",
]

__version__ = "0.1.0"
