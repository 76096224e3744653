"""Content graph and feed assembly engine."""

__version__ = "0.1.0"
