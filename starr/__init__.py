"""Connection settings and custom script event helpers for the Starr applications."""

__version__ = "0.1.0"