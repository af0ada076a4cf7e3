"""Grocery receipt logging and price tracking toolkit."""

__version__ = "0.1.0"
