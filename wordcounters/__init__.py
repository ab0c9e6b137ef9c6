"""Count word frequencies in text files in the background and report the top words."""

__version__ = "0.1.0"
__all__ = ["__version__"]