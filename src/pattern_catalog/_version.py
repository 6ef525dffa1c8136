"""Version information for the pattern catalog package."""

__version__ = "1.0.0"
