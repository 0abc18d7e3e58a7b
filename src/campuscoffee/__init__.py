"""campuscoffee — import campus coffee points of sale from OpenStreetMap."""

__version__ = "0.1.0"
