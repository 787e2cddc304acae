"""Rank local OS processes as debugger attach candidates."""

__version__ = "0.1.0"
