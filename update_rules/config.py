"""Configuration: policy construction from settings, constants, and env overrides."""

import os

from update_rules.domain.errors import InvalidPolicyError
from update_rules.domain.model import PromptFrequency
from update_rules.domain.rules import DEFAULT_PRESET, Policy, conditional_policy, preset_policy

LOG_LEVEL_ENV_VAR = "UPDATE_RULES_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

DEFAULT_APP_NAME = "this app"

MODE_PRESET = "preset"
MODE_CONDITIONAL = "conditional"


def log_level(verbose: bool = False) -> str:
    if verbose:
        return "DEBUG"
    return os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def _as_int(cfg: dict, key: str) -> int:
    value = cfg.get(key)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise InvalidPolicyError(f"{key} must be a non-negative integer, got {value!r}")


def policy_from_config(cfg: dict) -> Policy:
    """Build a policy from a config dict (as loaded by JsonConfigAdapter)."""
    mode = str(cfg.get("mode", MODE_PRESET)).strip().lower()

    if mode == MODE_PRESET:
        return preset_policy(str(cfg.get("preset") or DEFAULT_PRESET))

    if mode == MODE_CONDITIONAL:
        try:
            frequency = PromptFrequency.from_name(str(cfg.get("frequency", "daily")))
        except ValueError as exc:
            raise InvalidPolicyError(str(exc)) from None
        return conditional_policy(
            frequency,
            _as_int(cfg, "voluntary_gap"),
            _as_int(cfg, "involuntary_gap"),
            _as_int(cfg, "major_involuntary_gap"),
        )

    raise InvalidPolicyError(f"Unknown policy mode {mode!r} (expected 'preset' or 'conditional')")
