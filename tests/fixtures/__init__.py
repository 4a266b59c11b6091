"""
Test fixtures for the Gemini gateway.

Contains sample generateContent response bodies:
- gemini_success.json: Normal completion with text
- gemini_blocked.json: Prompt rejected (promptFeedback.blockReason)
- gemini_filtered.json: Candidate cut by SAFETY with no text
- gemini_empty_stop.json: STOP finish reason but no text
"""
