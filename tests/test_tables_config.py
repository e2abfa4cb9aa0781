import pytest

from osrs_hiscores.config import (
    ACTIVITY_COUNT,
    ACTIVITY_NAMES,
    SKILL_COUNT,
    SKILL_NAMES,
    ClientSettings,
    activity_index,
    activity_name,
    skill_index,
    skill_name,
)
from osrs_hiscores.config.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


def test_table_sizes_and_order():
    assert SKILL_COUNT == 24
    assert ACTIVITY_COUNT == 40
    assert SKILL_NAMES[0] == "Overall"
    assert SKILL_NAMES[-1] == "Construction"
    assert ACTIVITY_NAMES[0] == "League Points"
    assert ACTIVITY_NAMES[-1] == "King Black Dragon"
    assert len(set(SKILL_NAMES)) == SKILL_COUNT
    assert len(set(ACTIVITY_NAMES)) == ACTIVITY_COUNT


def test_name_lookups():
    assert skill_name(3) == "Strength"
    assert skill_index("  hitpoints ") == 4
    assert activity_name(22) == "Chambers of Xeric"
    assert activity_index("chambers of xeric: challenge mode") == 23
    with pytest.raises(IndexError):
        skill_name(24)
    with pytest.raises(IndexError):
        activity_name(-1)
    with pytest.raises(KeyError):
        activity_index("Zulrah")


def test_client_settings_from_env(monkeypatch):
    monkeypatch.setenv("OSRS_HISCORES_BASE_URL", "http://localhost:8080/hiscore/")
    monkeypatch.setenv("OSRS_HISCORES_TIMEOUT", "2.5")
    settings = ClientSettings.from_env()
    assert settings.base_url == "http://localhost:8080/hiscore"
    assert settings.timeout == pytest.approx(2.5)


def test_client_settings_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.delenv("OSRS_HISCORES_BASE_URL", raising=False)
    monkeypatch.setenv("OSRS_HISCORES_TIMEOUT", "soon")
    settings = ClientSettings.from_env()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT


@pytest.mark.parametrize("raw", ["0", "-3"])
def test_client_settings_non_positive_timeout_falls_back(monkeypatch, raw):
    monkeypatch.setenv("OSRS_HISCORES_TIMEOUT", raw)
    assert ClientSettings.from_env().timeout == DEFAULT_TIMEOUT
