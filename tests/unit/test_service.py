"""Tests for XML-RPC service calls."""

import httpx
import pytest

from softlayer_client_core import Client, Service
from softlayer_client_core.errors import APIError, NotFoundError, ServerError, UnauthorizedError
from softlayer_client_core.testing import (
    RecordingTransport,
    create_fault_response,
    create_xmlrpc_response,
    parse_xmlrpc_request,
)


def make_client(resolver, handler, **options):
    transport = RecordingTransport(handler)
    client = Client(resolver=resolver, transport=transport, **options)
    return client, transport


class TestServiceCall:
    """Test the request a Service sends and how it decodes the response."""

    @pytest.mark.unit
    def test_posts_to_service_url(self, resolver):
        client, transport = make_client(
            resolver,
            lambda request: create_xmlrpc_response({"id": 1}),
            endpoint_url="https://api.example.test/xmlrpc/v3/",
        )

        result = client["Account"].getObject()

        assert result == {"id": 1}
        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.example.test/xmlrpc/v3/SoftLayer_Account"

    @pytest.mark.unit
    def test_sends_authentication_headers_first(self, resolver):
        client, transport = make_client(
            resolver, lambda request: create_xmlrpc_response(True), username="jdoe", api_key="key"
        )

        client["Virtual_Guest"].call("powerOn", 123, "now")

        method_name, params = parse_xmlrpc_request(transport.requests[0])
        assert method_name == "powerOn"
        assert params[0] == {"headers": {"authenticate": {"username": "jdoe", "apiKey": "key"}}}
        assert params[1:] == (123, "now")

    @pytest.mark.unit
    def test_anonymous_headers(self, resolver):
        client, transport = make_client(resolver, lambda request: create_xmlrpc_response([]))

        client["Location"].getDatacenters()

        _, params = parse_xmlrpc_request(transport.requests[0])
        assert params[0] == {"headers": {}}

    @pytest.mark.unit
    def test_sends_user_agent(self, resolver):
        client, transport = make_client(
            resolver, lambda request: create_xmlrpc_response(None), user_agent="my-tool/1.0"
        )

        client["Account"].getObject()

        assert transport.requests[0].headers["User-Agent"] == "my-tool/1.0"
        assert transport.requests[0].headers["Content-Type"] == "text/xml"

    @pytest.mark.unit
    def test_uses_network_timeout(self, resolver):
        client, transport = make_client(resolver, lambda request: create_xmlrpc_response(None), timeout=12)

        client["Account"].getObject()

        assert transport.requests[0].extensions["timeout"]["read"] == 12

    @pytest.mark.unit
    def test_private_attributes_are_not_remote_methods(self, resolver):
        client, _ = make_client(resolver, lambda request: create_xmlrpc_response(None))

        with pytest.raises(AttributeError):
            client["Account"]._private

    @pytest.mark.unit
    def test_repr(self, resolver):
        client, _ = make_client(resolver, lambda request: create_xmlrpc_response(None))

        assert "SoftLayer_Account" in repr(Service("SoftLayer_Account", client=client))


class TestServiceErrors:
    """Test that API failures raise and are not retried."""

    @pytest.mark.unit
    def test_fault_raises_api_error(self, resolver):
        client, transport = make_client(
            resolver,
            lambda request: create_fault_response("SoftLayer_Exception_ObjectNotFound", "Unable to find object"),
        )

        with pytest.raises(APIError) as exc_info:
            client["Account"].getObject()

        assert exc_info.value.fault_code == "SoftLayer_Exception_ObjectNotFound"
        assert "Unable to find object" in str(exc_info.value)
        assert len(transport.requests) == 1

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("status_code", "exc_class"),
        [(401, UnauthorizedError), (404, NotFoundError), (503, ServerError)],
    )
    def test_http_status_raises(self, resolver, status_code, exc_class):
        client, transport = make_client(resolver, lambda request: httpx.Response(status_code, text="nope"))

        with pytest.raises(exc_class) as exc_info:
            client["Account"].getObject()

        assert exc_info.value.status_code == status_code
        assert len(transport.requests) == 1

    @pytest.mark.unit
    def test_network_error_propagates(self, resolver):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(resolver, handler)

        with pytest.raises(httpx.ConnectError):
            client["Account"].getObject()
