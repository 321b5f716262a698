"""Bot Console - management backend for Discord bots."""

__version__ = "1.0.0"
