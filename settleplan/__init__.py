"""Turn-based simulation of settlement development plans with facility selection policies."""

__version__ = "0.1.0"