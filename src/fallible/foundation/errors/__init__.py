"""Exception types for fallible.

- FallibleError: Root of the hierarchy
- UnwrapError: Extraction from the wrong Result variant
- NoAttemptsError: Err payload of retry() with max_attempts <= 0
"""

from .errors import FallibleError, NoAttemptsError, UnwrapError

__all__ = ["FallibleError", "UnwrapError", "NoAttemptsError"]
