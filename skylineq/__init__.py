"""Skyline queries over two-attribute product datasets read from CSV files."""

__version__ = "0.1.0"