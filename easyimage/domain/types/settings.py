"""
Top-level Easy Image settings and the cascade into transform sets.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import Field, model_validator

from easyimage.domain.types.transform import ImageFormat, TransformProperties
from easyimage.domain.types.transform_set import TransformSet
from easyimage.errors import InvalidConfigKeyError, UnknownTransformSetError

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = ImageFormat.AVIF.value
DEFAULT_FALLBACK_FORMAT = ImageFormat.WEBP.value


class Settings(TransformProperties):
    """
    Global defaults plus the catalog of named transform sets.

    Every cascadable property defined here is pushed down into the transform
    sets that leave it unset when ``normalize`` runs.
    """

    format: Optional[ImageFormat] = Field(
        default=DEFAULT_FORMAT, description="Primary output format"
    )
    fallback_format: Optional[ImageFormat] = Field(
        default=DEFAULT_FALLBACK_FORMAT,
        description="Format served to clients without support for the primary one",
    )
    transform_sets: Dict[str, TransformSet] = Field(
        default_factory=dict,
        description="Transform sets keyed by name, e.g. 'hero' or 'product-thumbnail'",
    )

    @model_validator(mode="before")
    @classmethod
    def _reject_unknown_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        unknown = cls.unknown_keys(data)
        transform_sets = data.get("transformSets", data.get("transform_sets")) or {}
        if isinstance(transform_sets, Mapping):
            for set_name, set_config in transform_sets.items():
                if isinstance(set_config, dict):
                    unknown.extend(
                        f"transformSets.{set_name}.{key}"
                        for key in TransformSet.unknown_keys(set_config)
                    )
        if unknown:
            raise InvalidConfigKeyError(unknown, owner="Easy Image top-level settings")
        return data

    @property
    def formats(self) -> Tuple[str, str]:
        """Primary and fallback format, in the order they should be offered."""
        return self.format, self.fallback_format

    def transform_set(self, name: str) -> TransformSet:
        try:
            return self.transform_sets[name]
        except KeyError:
            raise UnknownTransformSetError(name) from None

    def set_transform_sets(self, transform_sets: Mapping[str, Any]) -> "Settings":
        """
        Replace the full catalog of transform sets.

        Values may be ``TransformSet`` instances or raw config mappings. Format
        is not configurable per set; it is always taken from these settings.
        """
        self.transform_sets = dict(transform_sets)
        return self

    def set_format(self, format: str) -> "Settings":
        """Primary format images are transformed to. Defaults to avif."""
        self.format = format
        return self

    def set_fallback_format(self, fallback_format: str) -> "Settings":
        """Fallback format images are transformed to. Defaults to webp."""
        self.fallback_format = fallback_format
        return self

    def normalize(self, target_set_names: Optional[Iterable[str]] = None) -> None:
        """
        Cascade these settings into transform sets and materialize their transforms.

        Only the sets named in ``target_set_names`` are touched, or every set
        when it is omitted. Every name is resolved before any set is modified.
        Must run at most once per transform set.
        """
        if not self.format:
            self.format = DEFAULT_FORMAT
        if not self.fallback_format:
            self.fallback_format = DEFAULT_FALLBACK_FORMAT
        if self.format == self.fallback_format:
            logger.warning("Primary and fallback format are both '%s'", self.format)

        if target_set_names is None:
            names: List[str] = list(self.transform_sets)
        else:
            names = list(target_set_names)
        selected = [(name, self.transform_set(name)) for name in names]

        fallbacks = self.cascadable_values()
        for name, transform_set in selected:
            transform_set.extend(fallbacks)
            transform_set.materialize_transforms()
            logger.debug("Normalized transform set '%s'", name)
