"""
Unit tests for the Gemini gateway.

Test individual components in isolation:
- Credential pool (rotation, wrap-around)
- Prompt builder (chat and outline payloads)
- Response classifier (decision order, ill-typed bodies)
- Gemini client (httpx.MockTransport)
- Failover engine (attempt loop, terminal outcomes, exhaustion)
- Public service (end-to-end scenarios)
"""
