"""JSON file-based policy config adapter."""

import json
import logging
import os
import sys

from update_rules.domain.ports import ConfigPort

CONFIG_FILE_ENV_VAR = "UPDATE_RULES_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "update_rules.json"

_DEFAULTS = {
    "mode": "preset",
    "preset": "default",
    "frequency": "daily",
    "voluntary_gap": 1,
    "involuntary_gap": 3,
    "major_involuntary_gap": 0,
}

logger = logging.getLogger("update_rules.config")


def _config_dir() -> str:
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


def default_config_path() -> str:
    return os.getenv(CONFIG_FILE_ENV_VAR) or os.path.join(_config_dir(), DEFAULT_CONFIG_FILE)


class JsonConfigAdapter(ConfigPort):

    def __init__(self, path: str | None = None):
        self.path = path or default_config_path()

    def load(self) -> dict:
        cfg = dict(_DEFAULTS)
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"{self.path} must contain a JSON object")
            cfg.update(data)
            logger.debug("Loaded policy config from %s", self.path)
        return cfg

    def save(self, cfg: dict) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(cfg, f, indent=2)

    def is_configured(self) -> bool:
        return os.path.exists(self.path)
