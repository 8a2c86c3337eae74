"""Branch-based versioning for multi-module builds."""

__version__ = "0.4.0"
