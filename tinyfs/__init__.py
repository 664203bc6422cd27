"""An in-memory tree file system with a command shell and a text-screen model."""

__version__ = "0.1.0"
__all__ = ["filesystem", "screen", "shell"]