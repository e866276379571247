"""Opening trainer: replay recorded PGN lines and drill them move by move."""

__version__ = "0.1.0"
