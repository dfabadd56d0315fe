"""Binary tree, binary search tree and small weighted graph algorithms."""

__version__ = "0.1.0"