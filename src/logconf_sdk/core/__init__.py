from .base_model_impl import BaseModel
from .errors import (
    CaptureAlreadyActiveError,
    ConfigurationWarning,
    LoggingConfigError,
    ResourceReleaseError,
)
from .levels import LEVEL_OFF, parse_level

__all__ = [
    "BaseModel",
    "CaptureAlreadyActiveError",
    "ConfigurationWarning",
    "LEVEL_OFF",
    "LoggingConfigError",
    "ResourceReleaseError",
    "parse_level",
]
