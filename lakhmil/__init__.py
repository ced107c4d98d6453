"""INR lakh/crore <-> USD K/M/B conversion service."""

__version__ = "0.1.0"
