"""
Tests for loading settings from raw configuration and the environment.
"""

import pytest

from easyimage.errors import InvalidConfigKeyError, InvalidConfigValueError
from easyimage.io.config import load_settings
from easyimage.io.env import EnvironmentDefaults

ENV_VARS = (
    "EASY_IMAGE_FORMAT",
    "EASY_IMAGE_FALLBACK_FORMAT",
    "EASY_IMAGE_QUALITY",
    "EASY_IMAGE_INTERLACE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_environment_defaults(monkeypatch):
    monkeypatch.setenv("EASY_IMAGE_FORMAT", "webp")
    monkeypatch.setenv("EASY_IMAGE_FALLBACK_FORMAT", "jpg")
    monkeypatch.setenv("EASY_IMAGE_QUALITY", "70")

    defaults = EnvironmentDefaults()
    assert defaults.as_config() == {"format": "webp", "fallback_format": "jpg", "quality": 70}

    settings = load_settings({})
    assert settings.formats == ("webp", "jpg")
    assert settings.quality == 70


def test_config_wins_over_environment(monkeypatch):
    monkeypatch.setenv("EASY_IMAGE_FALLBACK_FORMAT", "jpg")
    monkeypatch.setenv("EASY_IMAGE_QUALITY", "70")

    settings = load_settings({"fallbackFormat": "png", "quality": 90})
    assert settings.fallback_format == "png"
    assert settings.quality == 90


def test_environment_can_be_skipped(monkeypatch):
    monkeypatch.setenv("EASY_IMAGE_FORMAT", "jpg")
    settings = load_settings({}, use_environment=False)
    assert settings.format == "avif"


def test_env_file(tmp_path):
    env_file = tmp_path / "easyimage.env"
    env_file.write_text("EASY_IMAGE_INTERLACE=line\n")
    settings = load_settings(env_file=env_file)
    assert settings.interlace == "line"


def test_load_settings_builds_transform_sets():
    settings = load_settings(
        {"interlace": "plane", "transformSets": {"card": {"widths": [320, 640], "aspectRatio": 4 / 3}}},
        use_environment=False,
    )
    settings.normalize()
    card = settings.transform_set("card")
    assert [(t.width, t.height) for t in card.transforms] == [(640, 480), (320, 240)]
    assert card.transforms[0].as_transform()["interlace"] == "plane"


def test_unknown_keys_are_reported_by_name():
    with pytest.raises(InvalidConfigKeyError) as exc_info:
        load_settings({"foo": 1, "bar": 2}, use_environment=False)
    assert exc_info.value.keys == ["foo", "bar"]


def test_invalid_values_are_wrapped():
    with pytest.raises(InvalidConfigValueError) as exc_info:
        load_settings({"quality": 0}, use_environment=False)
    assert exc_info.value.__cause__ is not None


def test_invalid_environment_value_is_wrapped(monkeypatch):
    monkeypatch.setenv("EASY_IMAGE_FORMAT", "bmp")
    with pytest.raises(InvalidConfigValueError):
        load_settings({})


if __name__ == "__main__":
    pytest.main()
