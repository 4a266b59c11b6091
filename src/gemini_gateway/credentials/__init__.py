"""
Credential management.

Components:
- CredentialPool: ordered cyclic set of API keys with a shared cursor
- mask_credential: log-safe rendering of a key
"""

from gemini_gateway.credentials.pool import CredentialPool, mask_credential

__all__ = [
    "CredentialPool",
    "mask_credential",
]
