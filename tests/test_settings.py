from __future__ import annotations

import pytest

from config.settings import OrgChartSettings, load_settings

ENV_VARS = (
    "ORG_SHEET_URL", "ORG_FETCH_TIMEOUT", "ORG_CACHE_TTL", "ORG_GROUPING_MODE",
    "ORG_STRICT_NAMES", "ORG_ROLE_RULES_PATH", "ORG_CHART_HEIGHT", "ORG_USE_DEMO_DATA",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    cfg = load_settings()
    assert cfg == OrgChartSettings()
    assert cfg.demo_mode is True


def test_env_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORG_SHEET_URL", " http://sheet/csv ")
    monkeypatch.setenv("ORG_FETCH_TIMEOUT", "30")
    monkeypatch.setenv("ORG_CACHE_TTL", "0")
    monkeypatch.setenv("ORG_GROUPING_MODE", "Department")
    monkeypatch.setenv("ORG_STRICT_NAMES", "yes")
    monkeypatch.setenv("ORG_CHART_HEIGHT", "900")

    cfg = load_settings()

    assert cfg.sheet_url == "http://sheet/csv"
    assert cfg.fetch_timeout == 30.0
    assert cfg.cache_ttl == 0
    assert cfg.grouping_mode == "department"
    assert cfg.strict_names is True
    assert cfg.chart_height == 900
    assert cfg.demo_mode is False


def test_demo_flag_forces_demo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORG_SHEET_URL", "http://sheet/csv")
    monkeypatch.setenv("ORG_USE_DEMO_DATA", "on")
    assert load_settings().demo_mode is True


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORG_GROUPING_MODE", "department")
    assert load_settings(grouping_mode="subdepartment").grouping_mode == "subdepartment"


def test_unknown_override_key_raises() -> None:
    with pytest.raises(TypeError):
        load_settings(not_a_real_key=True)


@pytest.mark.parametrize(
    "name, value",
    [
        ("ORG_GROUPING_MODE", "matrix"),
        ("ORG_STRICT_NAMES", "maybe"),
        ("ORG_CHART_HEIGHT", "50"),
        ("ORG_FETCH_TIMEOUT", "0"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()
