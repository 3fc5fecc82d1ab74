"""
Cascadable transform properties and the per-width transform descriptor.
"""

import enum
from typing import Any, Dict, FrozenSet, Optional

from pydantic import ConfigDict, Field

from easyimage.domain.types.base import BaseInfo


class ImageFormat(str, enum.Enum):
    JPG = "jpg"
    PNG = "png"
    GIF = "gif"
    WEBP = "webp"
    AVIF = "avif"


class TransformMode(str, enum.Enum):
    CROP = "crop"
    FIT = "fit"
    STRETCH = "stretch"
    LETTERBOX = "letterbox"


class TransformPosition(str, enum.Enum):
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    CENTER_LEFT = "center-left"
    CENTER_CENTER = "center-center"
    CENTER_RIGHT = "center-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"


class Interlace(str, enum.Enum):
    NONE = "none"
    LINE = "line"
    PLANE = "plane"
    PARTITION = "partition"


# Formats are resolved once on the settings, never per transform.
FORMAT_FIELDS: FrozenSet[str] = frozenset({"format", "fallback_format"})


class TransformProperties(BaseInfo):
    """
    Properties that cascade from the settings down into each transform set.

    ``None`` means "not defined here"; any other value, including ``False``
    and ``0``, is a definition and wins over whatever the parent provides.
    """

    format: Optional[ImageFormat] = Field(default=None, description="Primary output format")
    fallback_format: Optional[ImageFormat] = Field(
        default=None, description="Format served to clients without support for the primary one"
    )
    mode: Optional[TransformMode] = None
    position: Optional[TransformPosition] = None
    quality: Optional[int] = Field(default=None, ge=1, le=100)
    interlace: Optional[Interlace] = None
    fill: Optional[str] = Field(default=None, description="Fill colour used by letterbox mode")
    upscale: Optional[bool] = None
    aspect_ratio: Optional[float] = Field(default=None, gt=0, description="Width divided by height")

    @classmethod
    def cascadable_fields(cls) -> tuple:
        return tuple(TransformProperties.model_fields)

    def cascadable_values(self) -> Dict[str, Any]:
        """Defined cascadable properties keyed by field name."""
        values = {}
        for name in self.cascadable_fields():
            value = getattr(self, name)
            if value is not None:
                values[name] = value
        return values


class TransformDescriptor(BaseInfo):
    """Fully resolved transform for a single output width."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int = 0
    mode: Optional[TransformMode] = None
    position: Optional[TransformPosition] = None
    quality: Optional[int] = None
    interlace: Optional[Interlace] = None
    fill: Optional[str] = None
    upscale: Optional[bool] = None
    aspect_ratio: Optional[float] = None

    def as_transform(self) -> Dict[str, Any]:
        """Payload for the host image API: camelCase keys, unset values dropped."""
        return self.model_dump(exclude_none=True)
