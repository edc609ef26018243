"""Helpers for comparing, measuring, converting, copying, splitting, reading and writing text."""

__version__ = "0.1.0"