"""
Utility modules for SkillGlobe Matcher.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from skillglobe.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    DATA_DIR,
)
from skillglobe.utils.constants import (
    AuditAction,
    MatchQuality,
    MatchScoreLevel,
    SeniorityLevel,
    SeniorityMatch,
    SkillLevel,
    TimeToQualify,
)
from skillglobe.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
)

__all__ = [
    # Config
    "AppSettings",
    "LoggingSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "DATA_DIR",
    # Constants
    "AuditAction",
    "MatchQuality",
    "MatchScoreLevel",
    "SeniorityLevel",
    "SeniorityMatch",
    "SkillLevel",
    "TimeToQualify",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
]
