"""
Test Suite for the Authentication Service

This package contains tests for the signup/signin service including:
- Unit tests for the auth manager and its collaborators
- Endpoint tests for the HTTP contract
- Model and configuration tests
- Signup/signin flow tests against an in-memory collection
"""
