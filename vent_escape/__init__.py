"""Vent Escape - crawl through the ducts before your oxygen runs out."""

__version__ = "0.1.0"
