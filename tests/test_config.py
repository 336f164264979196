# tests/test_config.py

import pytest

from caljalali import JalaliDateTime, ValidationError, parse
from caljalali.core.config import ENV_DEFAULT_ZONE, Settings, reset_settings
from caljalali.core.zones import resolve_zone, zone_name


@pytest.fixture
def env_zone(monkeypatch):
    def _set(value):
        monkeypatch.setenv(ENV_DEFAULT_ZONE, value)
        reset_settings()

    yield _set
    monkeypatch.delenv(ENV_DEFAULT_ZONE, raising=False)
    reset_settings()


def test_settings_from_env():
    assert Settings.from_env({}).default_zone is None
    assert Settings.from_env({ENV_DEFAULT_ZONE: "   "}).default_zone is None
    assert Settings.from_env({ENV_DEFAULT_ZONE: " Asia/Tehran "}).default_zone == "Asia/Tehran"


def test_default_zone_from_environment(env_zone):
    env_zone("Asia/Tehran")
    t = JalaliDateTime(1400, 1, 1)
    assert zone_name(t.tz) == "Asia/Tehran"

    p = parse("%Y/%m/%d %H:%M:%S", "1400/01/01 00:00:00")
    assert zone_name(p.tz) == "Asia/Tehran"


def test_bad_zone_in_environment(env_zone):
    env_zone("Not/AZone")
    with pytest.raises(ValidationError):
        JalaliDateTime(1400, 1, 1)


def test_without_setting_falls_back_to_host_zone(monkeypatch):
    monkeypatch.delenv(ENV_DEFAULT_ZONE, raising=False)
    reset_settings()
    assert JalaliDateTime(1400, 1, 1).tz is not None


def test_resolve_zone_variants():
    from datetime import timezone

    assert resolve_zone("UTC") is timezone.utc
    assert resolve_zone("utc") is timezone.utc
    assert resolve_zone(timezone.utc) is timezone.utc
    assert zone_name(resolve_zone("Asia/Tehran")) == "Asia/Tehran"
    with pytest.raises(ValidationError):
        resolve_zone(3.5)
