"""Power unit configuration for asset management."""

__version__ = "0.1.0"
