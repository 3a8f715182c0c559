"""Monadic error handling.

Provides Result/Either and Option types for type-safe error propagation with:
- Railway-oriented programming patterns
- Functor/Applicative/Monad instances
- Fail-fast and accumulating collection operations
- Adapters from exceptions, None, Options and booleans

Example:
    >>> from fallible.monads import Result, Ok, Err
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("division by zero")
    ...     return Ok(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .flat_map(lambda x: Ok(x + 1))
    ... )
    >>> assert result.get_or_raise() == 11.0
"""

from .adapters import (
    catching,
    from_boolean,
    from_nullable,
    from_option,
    retry,
    run_catching,
    run_catching_with,
)
from .aggregate import (
    all_ok,
    any_ok,
    collect_results,
    combine,
    first_ok,
    fold,
    lift,
    lift2,
    map2,
    map3,
    partition,
    sequence,
    traverse,
    zip,
)
from .option import Nothing, Option, Some, from_value, none_value, some_of
from .result import Err, Ok, Result

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "Option",
    "Some",
    "Nothing",
    "some_of",
    "none_value",
    "from_value",
    # Collection operations
    "combine",
    "zip",
    "map2",
    "map3",
    "fold",
    "sequence",
    "traverse",
    "first_ok",
    "all_ok",
    "any_ok",
    "partition",
    "collect_results",
    "lift",
    "lift2",
    # Adapters
    "run_catching",
    "run_catching_with",
    "catching",
    "retry",
    "from_nullable",
    "from_option",
    "from_boolean",
]
