"""Serves the Janatonese Flutter web app, building it at startup when Flutter is installed."""

__version__ = "1.0.0"
