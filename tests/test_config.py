from __future__ import annotations

import os

from typing import TYPE_CHECKING

import pytest

from rangefmt.config import Config
from rangefmt.config import boolean_normalizer


if TYPE_CHECKING:
    from collections.abc import Iterator


def test_config_defaults(config: Config) -> None:
    assert config.get("default-format") == "N"
    assert config.get("render.escape-output") is True
    assert config.get("render") == {"escape-output": True}


def test_config_get_missing_setting(config: Config) -> None:
    assert config.get("missing") is None
    assert config.get("render.missing", "fallback") == "fallback"


def test_config_merge(config: Config) -> None:
    config.merge({"render": {"escape-output": False}, "default-format": "P"})

    assert config.all() == {
        "default-format": "P",
        "render": {"escape-output": False},
    }


@pytest.mark.parametrize(
    ("env_value", "value"),
    [("true", True), ("1", True), ("false", False), ("0", False), ("TRUE", True)],
)
def test_config_get_boolean_from_environment_variable(
    config: Config, environ: Iterator[None], env_value: str, value: bool
) -> None:
    os.environ["RANGEFMT_RENDER_ESCAPE_OUTPUT"] = env_value

    assert config.get("render.escape-output") is value
    assert config.get("render") == {"escape-output": value}


def test_config_get_from_environment_variable(
    config: Config, environ: Iterator[None]
) -> None:
    os.environ["RANGEFMT_DEFAULT_FORMAT"] = "L - U"

    assert config.get("default-format") == "L - U"


def test_config_ignores_environment_when_disabled(environ: Iterator[None]) -> None:
    os.environ["RANGEFMT_DEFAULT_FORMAT"] = "P"

    assert Config(use_environment=False).get("default-format") == "N"


def test_config_create_returns_a_shared_instance() -> None:
    assert Config.create(reload=True) is Config.create()


def test_boolean_normalizer() -> None:
    assert boolean_normalizer("True")
    assert not boolean_normalizer("yes")
