"""Interactive console shop for configuring PC and Mac computers and listing their specs."""

__version__ = "0.1.0"