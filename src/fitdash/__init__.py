"""fitdash - personal fitness dashboard."""

__version__ = "0.1.0"
