"""Pragyan rover mission simulator: lunar day operations on a tile grid."""

__version__ = "0.1.0"
