"""teamops - Task prioritization and assignment-recommendation engine."""

__version__ = "0.1.0"
