"""Retry configuration: backoff strategies and RetryPolicy."""

from .backoff import Backoff, ConstantBackoff, ExponentialBackoff, LinearBackoff
from .policy import RetryPolicy

__all__ = [
    "Backoff",
    "ConstantBackoff",
    "LinearBackoff",
    "ExponentialBackoff",
    "RetryPolicy",
]
