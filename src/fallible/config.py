"""Layered configuration for the adapter policy.

Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

Configuration is only read when load_policy() is called; wrap_with_result()
uses DEFAULT_POLICY unless it is handed a policy.

Usage:
    policy = load_policy()
    safe_ratio = wrap_with_result(ratio, policy=policy)

    # FALLIBLE__ADAPTER__REJECT_NAN=false lets NaN through as Ok(nan)
"""

from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from fallible.exceptions import ConfigError

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})

_DEFAULTS: dict[str, object] = {
    "adapter": {
        "reject_nan": True,
        "reject_infinity": True,
        "log_captured": True,
    },
}


@dataclass(frozen=True)
class AdapterPolicy:
    """How wrap_with_result() treats numeric edge cases and captured faults.

    Attributes:
        reject_nan: Turn NaN return values into Err.
        reject_infinity: Turn positive or negative infinity into Err.
        log_captured: Log exceptions captured from the wrapped function.
    """

    reject_nan: bool = True
    reject_infinity: bool = True
    log_captured: bool = True


DEFAULT_POLICY = AdapterPolicy()


def create_config(
    yaml_path: str = "fallible.yaml",
    env_prefix: str = "FALLIBLE",
    defaults: dict[str, object] | None = None,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        overrides: Values that take priority over every other layer.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _parse_bool(raw: object, key: str) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigError(f"{key}: expected a boolean, got {raw!r}")


def load_policy(cfg: ConfigurationSet | None = None) -> AdapterPolicy:
    """Build an AdapterPolicy from configuration."""
    if cfg is None:
        cfg = create_config()
    return AdapterPolicy(
        reject_nan=_parse_bool(cfg["adapter.reject_nan"], "adapter.reject_nan"),
        reject_infinity=_parse_bool(cfg["adapter.reject_infinity"], "adapter.reject_infinity"),
        log_captured=_parse_bool(cfg["adapter.log_captured"], "adapter.log_captured"),
    )
