"""
Credential pool with a cyclic cursor.

Holds the ordered set of interchangeable API keys and the position of the
key currently in use. The cursor is process-wide state: a rotation made by
one call determines the starting key of the next call.
"""

from typing import Sequence

import structlog

from gemini_gateway.monitoring.metrics import credential_rotations_total


logger = structlog.get_logger(__name__)


def mask_credential(credential: str) -> str:
    """
    Mask a credential for safe display in logs.

    Shows the last 6 characters for keys long enough to keep them
    unrecognisable (e.g. "...BunRD0"), "***" otherwise.
    """
    if len(credential) > 6:
        return f"...{credential[-6:]}"
    return "***"


class CredentialPool:
    """
    Ordered, cyclic set of API keys.

    The pool is built once from configuration and never resized. There is
    no locking: overlapping calls may interleave rotations.
    """

    def __init__(self, credentials: Sequence[str], start_index: int = 0):
        if not credentials:
            raise ValueError("CredentialPool requires at least one credential")
        if not 0 <= start_index < len(credentials):
            raise ValueError(
                f"start_index must be in [0, {len(credentials)}), got {start_index}"
            )

        self._credentials: tuple[str, ...] = tuple(credentials)
        self._current = start_index

        logger.info(
            "Credential pool initialized",
            size=len(self._credentials),
            start_index=start_index,
        )

    @property
    def index(self) -> int:
        """Position of the credential currently in use."""
        return self._current

    def current(self) -> str:
        """Return the credential at the cursor without moving it."""
        return self._credentials[self._current]

    def rotate(self) -> int:
        """Advance the cursor to the next credential (wrapping) and return its index."""
        previous = self._current
        self._current = (self._current + 1) % len(self._credentials)
        credential_rotations_total.inc()

        logger.info(
            "Switching credential",
            from_index=previous,
            to_index=self._current,
            credential=mask_credential(self._credentials[self._current]),
        )
        return self._current

    def __len__(self) -> int:
        return len(self._credentials)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, index={self._current})"
