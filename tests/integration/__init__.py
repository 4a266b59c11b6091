"""
Integration tests for the Gemini gateway.

Real calls against the Gemini API, marked with @pytest.mark.integration.
Skipped unless GEMINI_TEST_API_KEY is set.
"""
