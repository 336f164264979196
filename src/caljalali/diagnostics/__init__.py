"""Diagnostics package.

- pretty_month, round_trip: always available, standard library only
- nowruz_scatter: needs the optional "diagnostics" extra (numpy, matplotlib)
"""

__all__ = ["pretty_month", "round_trip", "nowruz_scatter"]
