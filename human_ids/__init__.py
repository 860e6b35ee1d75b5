"""Generate random, human-readable identifiers from word lists."""

__version__ = "0.1.1"
__all__ = ["__version__"]