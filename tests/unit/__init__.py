"""Unit tests for individual components in isolation.

Coverage:
    - config: Environment loading and validation
    - models: Pydantic validation and serialization
    - ui: Flow state machines, snippet display, view mode, markdown

Uses AsyncMock for the API client. Leverages pytest-check for multiple
assertions per test.
"""
