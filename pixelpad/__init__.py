"""A keyboard-driven pixel sandbox with a per-key event jump table."""

__version__ = "0.1.0"