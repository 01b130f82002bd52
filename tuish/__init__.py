"""tuish - terminal menu for launching shell aliases"""

__version__ = "0.1.0"
