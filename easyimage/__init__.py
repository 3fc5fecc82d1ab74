"""
Public package interface for Easy Image settings.

Build ``Settings`` from the host's raw configuration, call ``normalize`` once,
then read ``transforms`` off each transform set.
"""

from __future__ import annotations

from easyimage.domain.types.settings import Settings
from easyimage.domain.types.transform import (
    ImageFormat,
    Interlace,
    TransformDescriptor,
    TransformMode,
    TransformPosition,
)
from easyimage.domain.types.transform_set import TransformSet
from easyimage.errors import (
    ConfigurationError,
    EasyImageError,
    InvalidConfigKeyError,
    InvalidConfigValueError,
    UnknownTransformSetError,
)
from easyimage.io.config import load_settings
from easyimage.io.env import EnvironmentDefaults

__all__ = [
    "Settings",
    "TransformSet",
    "TransformDescriptor",
    "ImageFormat",
    "Interlace",
    "TransformMode",
    "TransformPosition",
    "EasyImageError",
    "ConfigurationError",
    "InvalidConfigKeyError",
    "InvalidConfigValueError",
    "UnknownTransformSetError",
    "EnvironmentDefaults",
    "load_settings",
]
