"""C-style character, string, memory, list, line-reading and printf helpers, and a two-command pipeline runner."""

__version__ = "0.1.0"