"""Diagnostics package.

- pretty_month, new_years_table, round_trip: always available, stdlib only
- new_year_scatter: optional (requires the ``diagnostics`` extra)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "new_year_scatter"]
