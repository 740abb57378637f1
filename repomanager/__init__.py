# repomanager/__init__.py
"""Tracks installed packages and resolves their layered configuration."""

__version__ = "0.1.0"
