"""Test suite for the newsletter API.

Test structure follows the test pyramid:
- unit/: Unit tests - domain and application logic in isolation
- integration/: Integration tests - persistence against a real SQLite file
- api/: API endpoint tests - HTTP request/response cycle
"""
