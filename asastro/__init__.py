"""Interactive two-dimensional N-body simulation of the solar system."""

__version__ = "1.0.0"