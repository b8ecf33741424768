"""RRT motion planning for geometric and kinodynamic 2D robots."""

__version__ = "0.1.0"