"""
Defaults for Easy Image settings provided through environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from easyimage.domain.types.transform import ImageFormat, Interlace

ENV_PREFIX = "EASY_IMAGE_"


class EnvironmentDefaults(BaseSettings):
    """
    Settings model for deployment-wide defaults via environment variables
    or other settings sources supported by `pydantic-settings`.

    Reads ``EASY_IMAGE_FORMAT``, ``EASY_IMAGE_FALLBACK_FORMAT``,
    ``EASY_IMAGE_QUALITY`` and ``EASY_IMAGE_INTERLACE``.
    """

    format: Optional[ImageFormat] = None
    fallback_format: Optional[ImageFormat] = None
    quality: Optional[int] = Field(default=None, ge=1, le=100)
    interlace: Optional[Interlace] = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        use_enum_values=True,
        extra="ignore",
    )

    def as_config(self) -> Dict[str, Any]:
        """Defined values keyed by settings field name."""
        return self.model_dump(exclude_none=True)


def load_env(env_file: Optional[Union[str, Path]] = None) -> EnvironmentDefaults:
    """Read environment defaults, optionally also from a dotenv file."""
    if env_file is None:
        return EnvironmentDefaults()
    return EnvironmentDefaults(_env_file=env_file)
