"""Domain models and types for pocketbank.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from pocketbank.domain.models import Money, Username

__all__ = ["Money", "Username"]
