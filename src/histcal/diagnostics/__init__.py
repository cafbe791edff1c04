"""Diagnostics package.

- round_trip, cutover_table: always available, standard library only
- year_lengths: plots, requires the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "cutover_table", "year_lengths"]
