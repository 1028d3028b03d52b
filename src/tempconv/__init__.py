"""Kernighan & Ritchie temperature conversion table exercises."""

__version__ = "0.1.0"
