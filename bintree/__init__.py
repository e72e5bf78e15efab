"""Binary tree nodes with parent links, traversals, measures and an ASCII renderer."""

__version__ = "0.1.0"
__all__ = ["node", "measures", "printing"]