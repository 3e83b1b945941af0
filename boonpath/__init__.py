"""Boonpath - shortest paths on grids with a one-time wall break."""

__version__ = "1.0.0"
