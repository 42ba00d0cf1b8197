"""
Test Suite for the User Auth API

This package contains tests for the authentication service including:
- Endpoint tests for register, login and profile lookup
- Unit tests for hashing, tokens, the user store and configuration
- Integration tests, in-memory and against a live MongoDB
- Locust load testing profile
"""
