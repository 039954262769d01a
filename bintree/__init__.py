"""Binary tree nodes with parent links, their queries, and ASCII drawings."""

__version__ = "0.1.0"
__all__ = ["node", "render"]