"""Testing utilities for code built on the SoftLayer client.

Example:
    ```python
    from softlayer_client_core.testing import RecordingTransport, create_xmlrpc_response


    def test_account_lookup():
        transport = RecordingTransport(lambda request: create_xmlrpc_response({"id": 1}))
        client = Client(username="jdoe", api_key="key", transport=transport)
        assert client["Account"].getObject() == {"id": 1}
    ```
"""

from softlayer_client_core.testing.factories import (
    RecordingTransport,
    create_fault_response,
    create_xmlrpc_response,
    parse_xmlrpc_request,
)

__all__ = [
    "RecordingTransport",
    "create_fault_response",
    "create_xmlrpc_response",
    "parse_xmlrpc_request",
]
