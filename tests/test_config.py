from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from config import ConfigurationSet

from fallible.config import DEFAULT_POLICY, AdapterPolicy, create_config, load_policy
from fallible.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all FALLIBLE__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("FALLIBLE__"):
            monkeypatch.delenv(key)


def test_create_config_returns_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/fallible.yaml")
    assert isinstance(cfg, ConfigurationSet)
    assert cfg["adapter.reject_nan"] is True
    assert cfg["adapter.reject_infinity"] is True
    assert cfg["adapter.log_captured"] is True


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    yaml_file = tmp_path / "fallible.yaml"
    yaml_file.write_text("adapter:\n  reject_nan: false\n")
    cfg = create_config(yaml_path=str(yaml_file))
    assert cfg["adapter.reject_nan"] is False
    # Defaults still apply for unset keys
    assert cfg["adapter.reject_infinity"] is True


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_file = tmp_path / "fallible.yaml"
    yaml_file.write_text("adapter:\n  reject_infinity: true\n")

    monkeypatch.setenv("FALLIBLE__ADAPTER__REJECT_INFINITY", "no")

    cfg = create_config(yaml_path=str(yaml_file))
    assert cfg["adapter.reject_infinity"] == "no"  # env vars are strings
    assert load_policy(cfg).reject_infinity is False


def test_overrides_take_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE__ADAPTER__LOG_CAPTURED", "true")
    cfg = create_config(yaml_path="/nonexistent/fallible.yaml", overrides={"adapter": {"log_captured": False}})
    assert cfg["adapter.log_captured"] is False


class TestLoadPolicy:
    def test_defaults_match_default_policy(self) -> None:
        policy = load_policy(create_config(yaml_path="/nonexistent/fallible.yaml"))
        assert policy == DEFAULT_POLICY
        assert policy == AdapterPolicy(reject_nan=True, reject_infinity=True, log_captured=True)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", True), ("TRUE", True), ("Yes", True), ("on", True), ("0", False), ("false", False), (" off ", False)],
    )
    def test_boolean_strings(self, raw: str, expected: bool, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FALLIBLE__ADAPTER__REJECT_NAN", raw)
        policy = load_policy(create_config(yaml_path="/nonexistent/fallible.yaml"))
        assert policy.reject_nan is expected

    def test_invalid_boolean_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FALLIBLE__ADAPTER__REJECT_NAN", "maybe")
        with pytest.raises(ConfigError, match="adapter.reject_nan: expected a boolean"):
            load_policy(create_config(yaml_path="/nonexistent/fallible.yaml"))

    def test_reads_default_config_when_none_given(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "fallible.yaml").write_text("adapter:\n  log_captured: false\n")
        assert load_policy().log_captured is False

    def test_policy_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_POLICY.reject_nan = False  # type: ignore[misc]
