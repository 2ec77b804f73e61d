"""Binary trees of integers: construction, inspection, traversal and drawing."""

__version__ = "0.1.0"
__all__ = ["properties", "render", "traversal", "tree"]