"""Exception types raised by tree construction and layout strategies."""


class TreeLayoutError(Exception):
    """Base error for the package."""


class MalformedTreeError(TreeLayoutError, ValueError):
    """Edge map does not describe a single rooted tree."""


class UnsupportedShapeError(TreeLayoutError):
    """Tree shape is outside what a strategy can lay out."""
