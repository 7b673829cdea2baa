"""Unsplash URL, settings and alias helpers, and the splash command."""

__version__ = "4.0.0"