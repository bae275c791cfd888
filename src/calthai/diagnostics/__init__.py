"""Diagnostics package.

Light-weight command-line checks, each a module with a `main(argv)`:
- pretty_month: print a BE month grid as the picker lays it out
- round_trip: randomized canonical/display round-trip sweep
"""

__all__ = ["pretty_month", "round_trip"]
