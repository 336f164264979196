# tests/test_zones.py

import time
from datetime import timezone

import pytest

from caljalali import JalaliDateTime
from caljalali.core.config import ENV_DEFAULT_ZONE, reset_settings
from caljalali.core.zones import LocalZone, local_zone, zone_name

# US Eastern as a POSIX rule, so no zone database is needed
EASTERN = "EST+05EDT,M3.2.0,M11.1.0"


@pytest.fixture
def host_tz(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.delenv(ENV_DEFAULT_ZONE, raising=False)
    reset_settings()

    def _set(value):
        monkeypatch.setenv("TZ", value)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
    reset_settings()


def test_default_is_the_host_zone(host_tz):
    host_tz(EASTERN)
    t = JalaliDateTime(1403, 1, 1)
    assert t.tz is local_zone()
    assert isinstance(t.tz, LocalZone)
    assert zone_name(t.tz) == "Local"


def test_host_zone_follows_daylight_saving(host_tz):
    host_tz(EASTERN)
    summer = JalaliDateTime(1403, 4, 1, 12)
    winter = JalaliDateTime(1403, 10, 1, 12)
    assert summer.zone() == ("EDT", -14400)
    assert winter.zone() == ("EST", -18000)
    assert winter.unix_seconds() - summer.unix_seconds() == 183 * 86400 + 3600
    assert winter.format("%z") == "-0500"


def test_elapsed_days_across_host_offset_change(host_tz):
    host_tz(EASTERN)
    later = JalaliDateTime(1403, 4, 1, 12).add_days(183)
    assert (later.month, later.day, later.hour) == (10, 1, 11)


def test_local_relabels_wall_clock(host_tz):
    host_tz(EASTERN)
    t = JalaliDateTime(1403, 10, 1, 12, tz=timezone.utc).local()
    assert (t.month, t.day, t.hour) == (10, 1, 12)
    assert t.zone()[1] == -18000
    assert t.utc().hour == 17
