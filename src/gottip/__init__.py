"""Got Tip? - a single-window tip calculator."""
__version__ = "1.0.0"
