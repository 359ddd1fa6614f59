"""Detect order-dependent CSS declarations on rendered pages."""

__version__ = "0.1.0"
