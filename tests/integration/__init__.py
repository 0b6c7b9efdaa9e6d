"""Integration tests for components working together.

No mocks for core functionality: the API client sends real HTTP requests
to a fake question/upload service mounted through ASGITransport.

Coverage:
    - VaultAPIClient requests, decoding and error mapping
    - Question and upload flows end to end
    - FastAPI host endpoints
"""
