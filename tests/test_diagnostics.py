# tests/test_diagnostics.py

from datetime import date

from caljalali.diagnostics.pretty_month import jalali_month_calendar
from caljalali.diagnostics.round_trip import roundtrip_test


def test_month_grid_starts_on_saturday(capsys):
    # 1 Farvardin 1400 fell on a Sunday: one blank Saturday cell
    weeks = jalali_month_calendar(1400, 1)
    assert weeks[0][0][0].strip() == ""
    assert weeks[0][1][0].strip() == "1"
    assert all(len(wk) == 7 for wk in weeks)
    filled = [c for wk in weeks for c in wk if c[0].strip()]
    assert len(filled) == 31
    capsys.readouterr()


def test_roundtrip_before_1600():
    assert roundtrip_test(2000, date(700, 1, 1), date(1600, 1, 1), 7, max_failures=1) == 0
