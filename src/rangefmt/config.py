from __future__ import annotations

import logging
import os

from copy import deepcopy
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar


if TYPE_CHECKING:
    from collections.abc import Callable


logger = logging.getLogger(__name__)

_default_config: Config | None = None


def boolean_normalizer(val: str) -> bool:
    return val.lower() in ["true", "1"]


def merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> None:
    for k, v in d2.items():
        if k in d1 and isinstance(d1[k], dict) and isinstance(v, dict):
            merge_dicts(d1[k], v)
        else:
            d1[k] = v


class Config:
    default_config: ClassVar[dict[str, Any]] = {
        "default-format": "N",
        "render": {
            "escape-output": True,
        },
    }

    def __init__(self, use_environment: bool = True) -> None:
        self._config = deepcopy(self.default_config)
        self._use_environment = use_environment

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    def merge(self, config: dict[str, Any]) -> None:
        merge_dicts(self._config, config)

    def all(self) -> dict[str, Any]:
        def _all(config: dict[str, Any], parent_key: str = "") -> dict[str, Any]:
            all_ = {}

            for key in config:
                value = self.get(parent_key + key)
                if isinstance(value, dict):
                    all_[key] = _all(config[key], parent_key=parent_key + key + ".")
                    continue

                all_[key] = value

            return all_

        return _all(self.config)

    def get(self, setting_name: str, default: Any = None) -> Any:
        """
        Retrieve a setting value.
        """
        keys = setting_name.split(".")

        # Looking in the environment if the setting
        # is set via a RANGEFMT_* environment variable
        if self._use_environment:
            env = "RANGEFMT_" + "_".join(k.upper().replace("-", "_") for k in keys)
            env_value = os.getenv(env)
            if env_value is not None:
                logger.debug("Using %s from the environment", env)
                return self._get_normalizer(setting_name)(env_value)

        value = self._config
        for key in keys:
            if key not in value:
                return default

            value = value[key]

        if self._use_environment and isinstance(value, dict):
            # this is a configuration table, it is likely that we missed env vars
            return {k: self.get(f"{setting_name}.{k}") for k in value}

        return value

    @staticmethod
    def _get_normalizer(name: str) -> Callable[[str], Any]:
        if name in {"render.escape-output"}:
            return boolean_normalizer

        return lambda val: val

    @classmethod
    def create(cls, reload: bool = False) -> Config:
        global _default_config

        if _default_config is None or reload:
            _default_config = cls()

        return _default_config
