"""
Base model shared by the settings types.
"""

from typing import Any, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, model_validator

from easyimage.errors import InvalidConfigKeyError


def _snake_to_camel(name: str) -> str:
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class BaseInfo(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=_snake_to_camel,
        serialize_by_alias=True,
        use_enum_values=True,
        validate_assignment=True,
        extra="forbid",
    )

    @classmethod
    def config_keys(cls) -> FrozenSet[str]:
        """Keys accepted in raw configuration, as field names and aliases."""
        keys = set()
        for name, field in cls.model_fields.items():
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
        return frozenset(keys)

    @classmethod
    def field_name(cls, key: str) -> str:
        """Resolve a config key (alias or name) to its field name; unknown keys pass through."""
        if key in cls.model_fields:
            return key
        for name, field in cls.model_fields.items():
            if field.alias == key:
                return name
        return key

    @classmethod
    def unknown_keys(cls, data: Dict[str, Any]) -> list:
        allowed = cls.config_keys()
        return [key for key in data if key not in allowed]

    @model_validator(mode="before")
    @classmethod
    def _reject_unknown_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            unknown = cls.unknown_keys(data)
            if unknown:
                raise InvalidConfigKeyError(unknown, owner=cls.__name__)
        return data
