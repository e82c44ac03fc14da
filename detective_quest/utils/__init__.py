"""Utility modules for Detective Quest."""

from .logging import setup_logging

__all__ = ["setup_logging"]
