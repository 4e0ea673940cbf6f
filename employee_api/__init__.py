"""Employee API — employee records and their benefits over HTTP."""

__version__ = "1.0.0"
