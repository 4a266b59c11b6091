"""
Credential failover engine.

Drives one logical call through up to N physical attempts (N = number of
credentials), rotating to the next credential after every transport
failure or malformed response and pausing a fixed interval in between.
Safety blocks and filtered responses end the call immediately.

Main Components:
    - FailoverEngine: The attempt loop
    - CallOutcome: Structured result of a call that did not exhaust the pool
    - RetryMetadata: Immutable attempt history
    - RetryExhausted: Raised when every credential failed

Usage:
    >>> from gemini_gateway.retry import FailoverEngine
    >>> engine = FailoverEngine(client, pool)
    >>> outcome = await engine.execute(request)
"""

from gemini_gateway.retry.engine import FailoverEngine
from gemini_gateway.retry.exceptions import RetryExhausted
from gemini_gateway.retry.metadata import CallOutcome, RetryMetadata

__all__ = [
    "FailoverEngine",
    "CallOutcome",
    "RetryExhausted",
    "RetryMetadata",
]
