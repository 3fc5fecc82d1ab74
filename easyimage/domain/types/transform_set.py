import logging
import math
from typing import Any, List, Mapping

from pydantic import Field, PositiveInt, PrivateAttr, field_validator

from easyimage.domain.types.transform import (
    FORMAT_FIELDS,
    TransformDescriptor,
    TransformProperties,
)

logger = logging.getLogger(__name__)


def height_for(width: int, aspect_ratio: float) -> int:
    """Height matching ``aspect_ratio``, rounding halves up."""
    return int(math.floor(width / aspect_ratio + 0.5))


class TransformSet(TransformProperties):
    """
    A named group of transforms that differ only by width.

    Properties left unset are filled from the settings by ``extend``;
    ``materialize_transforms`` then produces one descriptor per width.
    """

    widths: List[PositiveInt] = Field(..., description="Output widths in pixels")
    _transforms: List[TransformDescriptor] = PrivateAttr(default_factory=list)

    @field_validator("widths")
    def validate_widths(cls, v):
        if v is None or len(v) == 0:
            raise ValueError("At least one width must be provided for a transform set.")
        return v

    @property
    def transforms(self) -> List[TransformDescriptor]:
        """Descriptors produced so far, largest width first per materialization."""
        return self._transforms

    def extend(self, fallbacks: Mapping[str, Any]) -> None:
        """
        Fill unset cascadable properties from ``fallbacks``.

        Keys may be field names or camelCase aliases. Properties already
        defined on this set are kept. Keys that do not name a cascadable
        property are ignored.
        """
        cascadable = self.cascadable_fields()
        for key, value in fallbacks.items():
            name = self.field_name(key)
            if name not in cascadable:
                logger.debug("Ignoring non-cascadable key '%s'", key)
                continue
            if value is None or getattr(self, name) is not None:
                continue
            setattr(self, name, value)

    def materialize_transforms(self) -> List[TransformDescriptor]:
        """
        Build one descriptor per width, largest first, and append them to
        ``transforms``.

        Not idempotent: a second call appends another full copy.
        """
        if self.transforms:
            logger.warning(
                "Transforms already materialized (%d); appending another copy",
                len(self.transforms),
            )

        properties = {
            name: value
            for name, value in self.cascadable_values().items()
            if name not in FORMAT_FIELDS
        }
        created = []
        for width in sorted(self.widths, reverse=True):
            height = height_for(width, self.aspect_ratio) if self.aspect_ratio else 0
            created.append(TransformDescriptor(width=width, height=height, **properties))

        self._transforms.extend(created)
        logger.debug("Materialized %d transforms for widths %s", len(created), self.widths)
        return created
