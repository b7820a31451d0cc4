"""API tests package.

Tests for REST API endpoints using TestClient:
- Request binding
- Response formatting
- Error handling
- HTTP status codes

Note:
    test_articles_api.py stubs the dispatcher to test the presentation
    layer in isolation. test_articles_end_to_end.py runs the full stack.
"""
