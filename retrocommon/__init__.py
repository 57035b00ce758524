"""Path name handling, UTF conversion helpers and C-style string utilities."""

__version__ = "0.1.0"