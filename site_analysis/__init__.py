"""Heuristic accessibility, performance and compliance analysis of web pages."""

__version__ = "0.1.0"
