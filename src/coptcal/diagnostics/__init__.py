"""Diagnostics package.

- pretty_month, new_years_table, round_trip: standard library only
- nayrouz_scatter: needs the `diagnostics` extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "nayrouz_scatter"]
