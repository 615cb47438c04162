"""Conversion between Bora's ASCII layout and UTF-8 Serbian Cyrillic or Latin text."""

__version__ = "1.0.0"
__all__ = ["common", "cyrillic", "latin", "to_borin"]