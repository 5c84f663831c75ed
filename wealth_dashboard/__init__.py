"""Personal-finance dashboard with a derived-metrics aggregation engine."""

__version__ = "0.1.0"
