"""Small command-line tools: a word counter and a checker for flat JSON objects of string pairs."""

__version__ = "0.1.0"
__all__ = ["wc", "jsoncheck"]