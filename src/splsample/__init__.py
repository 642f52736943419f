"""Distribution-sensitive sampling of configurable-system variants."""

__version__ = "0.1.0"
