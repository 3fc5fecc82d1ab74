"""
Build ``Settings`` from the raw configuration handed over by the host.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from easyimage.domain.types.settings import Settings
from easyimage.errors import InvalidConfigValueError
from easyimage.io.env import load_env

logger = logging.getLogger(__name__)


def load_settings(
    config: Optional[Mapping[str, Any]] = None,
    use_environment: bool = True,
    env_file: Optional[Union[str, Path]] = None,
) -> Settings:
    """
    Create settings from raw configuration layered over environment defaults.

    Keys are accepted in camelCase or snake_case; values from ``config``
    always win over the environment.

    Raises:
        InvalidConfigKeyError: If any key is outside the allow-list.
        InvalidConfigValueError: If a value fails validation.
    """
    merged: Dict[str, Any] = {}
    try:
        if use_environment:
            merged.update(load_env(env_file).as_config())
        for key, value in (config or {}).items():
            merged[Settings.field_name(key)] = value
        settings = Settings(**merged)
    except ValidationError as e:
        raise InvalidConfigValueError(f"Invalid Easy Image settings:\n{e}") from e

    logger.debug(
        "Loaded settings with %d transform sets (%s/%s)",
        len(settings.transform_sets),
        settings.format,
        settings.fallback_format,
    )
    return settings
