"""The Gilded Desk: productivity suite backend"""

__version__ = "1.0.0"
