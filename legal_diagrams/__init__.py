"""Legal entity diagram validation, statistics and merge service."""

__version__ = "0.1.0"
