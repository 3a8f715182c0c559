"""fallible - Result and Option types for error handling without exceptions.

Describe sequences of fallible operations as values: each step returns an
Ok or an Err, combinators thread them together, and errors only turn back
into exceptions at an explicit get_or_raise().

Quick Start:
    >>> from fallible import Ok, Err, run_catching, sequence
    >>>
    >>> run_catching(lambda: int("42")).map(lambda n: n * 2)
    Ok(84)
    >>> sequence([Ok(1), Err("bad"), Ok(3)])
    Err('bad')

Retrying flaky calls:
    >>> from fallible import retry, ExponentialBackoff
    >>> retry(fetch, max_attempts=5, backoff=ExponentialBackoff(initial_ms=200))  # doctest: +SKIP

Configuration via environment (FALLIBLE_RETRY_MAX_ATTEMPTS, FALLIBLE_LOG_LEVEL, ...):
    >>> from fallible import get_settings
    >>> get_settings().retry.max_attempts
    3
"""

import logging

from .foundation import (
    FallibleError,
    FallibleSettings,
    NoAttemptsError,
    UnwrapError,
    clear_settings_cache,
    configure_logging,
    get_settings,
)
from .monads import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    all_ok,
    any_ok,
    catching,
    collect_results,
    combine,
    first_ok,
    fold,
    from_boolean,
    from_nullable,
    from_option,
    from_value,
    lift,
    lift2,
    map2,
    map3,
    none_value,
    partition,
    retry,
    run_catching,
    run_catching_with,
    sequence,
    some_of,
    traverse,
    zip,
)
from .retry import Backoff, ConstantBackoff, ExponentialBackoff, LinearBackoff, RetryPolicy

logging.getLogger("fallible").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core types
    "Result", "Ok", "Err",
    "Option", "Some", "Nothing", "some_of", "none_value", "from_value",
    # Collection operations
    "combine", "zip", "map2", "map3", "fold", "sequence", "traverse",
    "first_ok", "all_ok", "any_ok", "partition", "collect_results", "lift", "lift2",
    # Adapters
    "run_catching", "run_catching_with", "catching", "retry",
    "from_nullable", "from_option", "from_boolean",
    # Retry configuration
    "RetryPolicy", "Backoff", "ConstantBackoff", "LinearBackoff", "ExponentialBackoff",
    # Errors
    "FallibleError", "UnwrapError", "NoAttemptsError",
    # Settings
    "FallibleSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
