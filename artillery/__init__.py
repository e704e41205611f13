"""Two-player artillery duel on destructible terrain."""

__version__ = "0.1.0"
__all__ = ["__version__"]