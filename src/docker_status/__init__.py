"""Docker Status: Docker containers grouped by compose project."""

__version__ = "0.1.0"
