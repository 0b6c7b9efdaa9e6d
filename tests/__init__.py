"""Test package for Vault QA.

Unit tests cover isolated logic, integration tests cover the API client
and flows talking HTTP to an in-process fake backend.

Structure:
    - unit/: Individual function and class tests
    - integration/: Client, flows and host app over real HTTP

Leverages pytest with pytest-check for soft assertions.
"""
