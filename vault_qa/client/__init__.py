"""HTTP client for the external question-answering API.

Counterpart of the browser-side API helper: one method per endpoint,
one exception type for every failure.
"""

from vault_qa.client.api_client import APIError, VaultAPIClient

__all__ = ["APIError", "VaultAPIClient"]
