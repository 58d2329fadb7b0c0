"""Exception hierarchy for phpdoc-tree.

This module defines the exceptions that cross the package boundary.
All exceptions inherit from PhpDocTreeError, providing a consistent error handling interface.
Structural surprises inside a tree never raise; only unavailable input does.
"""


class PhpDocTreeError(Exception):
    """Base exception for all phpdoc-tree errors."""


class SourceUnavailableError(PhpDocTreeError):
    """Raised when the source tree file cannot be read."""


class TreeLoadError(PhpDocTreeError):
    """Raised when a syntax tree cannot be built from the input at all."""
