"""An unbalanced binary search tree with traversals and a self-check command."""

__version__ = "1.0.0"
__all__ = ["selfcheck", "tree"]