"""
Gemini Gateway: multi-credential failover for the Gemini generateContent API.

Submits generation requests under one of several interchangeable API keys,
classifies each provider response (text, safety block, filtered, malformed)
and transparently retries under the next key until success or exhaustion.

Architecture: Request builder + credential pool + failover engine over httpx
"""

__version__ = "0.1.0"
