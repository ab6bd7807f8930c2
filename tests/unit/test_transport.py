"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Tests for transports.
"""

import base64
import json

import httpx
import pytest

from esclient.exceptions import CodecError, TransportError
from esclient.transport.base import TransportRequest, TransportResponse, validate_method
from esclient.transport.http import HttpTransport, encode_body
from esclient.transport.mock import MockTransport


class TestTransportResponse:
    def test_decode_parses_json(self):
        response = TransportResponse(status_code=200, content=b'{"a": 1}')
        assert response.decode() == {"a": 1}

    def test_decode_consumes_body_once(self):
        response = TransportResponse(status_code=200, content=b'{"a": 1}')
        response.decode()
        assert response.consumed is True
        with pytest.raises(CodecError, match="already consumed"):
            response.decode()

    def test_decode_empty_body(self):
        with pytest.raises(CodecError, match="empty"):
            TransportResponse(status_code=200).decode()

    def test_decode_invalid_json(self):
        response = TransportResponse(status_code=200, content=b"<html>oops</html>")
        with pytest.raises(CodecError, match="not valid JSON"):
            response.decode()

    def test_decode_invalid_utf8(self):
        response = TransportResponse(status_code=200, content=b"\xff\xfe\x00")
        with pytest.raises(CodecError):
            response.decode()

    def test_from_json(self):
        response = TransportResponse.from_json(201, {"acknowledged": True})
        assert response.status_code == 201
        assert response.headers == {"content-type": "application/json"}
        assert json.loads(response.content) == {"acknowledged": True}


class TestValidateMethod:
    @pytest.mark.parametrize("method", ["get", "POST", "Put", "delete"])
    def test_accepts_supported_verbs(self, method):
        assert validate_method(method) == method.upper()

    def test_rejects_other_verbs(self):
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            validate_method("PATCH")


class TestMockTransport:
    def test_returns_mocked_response(self):
        expected = TransportResponse.from_json(200, {"ok": True})
        transport = MockTransport(responses={("POST", "/_refresh"): expected})

        result = transport.send(TransportRequest(method="POST", path="/_refresh"))
        assert result.status_code == 200
        assert result.decode() == {"ok": True}

    def test_shares_caller_route_table_even_when_empty(self):
        routes = {}
        transport = MockTransport(routes)
        routes[("GET", "/x")] = TransportResponse.from_json(200, {"ok": True})

        result = transport.send(TransportRequest(method="GET", path="/x"))
        assert result.status_code == 200
        assert result.decode() == {"ok": True}

    def test_each_send_gets_a_fresh_response(self):
        transport = MockTransport()
        transport.add_response("get", "/x", TransportResponse.from_json(200, [1]))

        first = transport.send(TransportRequest(method="GET", path="/x"))
        second = transport.send(TransportRequest(method="GET", path="/x"))
        assert first.decode() == [1]
        assert second.decode() == [1]

    def test_returns_404_for_unmocked(self):
        transport = MockTransport()
        result = transport.send(TransportRequest(method="GET", path="/unknown"))
        assert result.status_code == 404
        assert result.decode() == {"error": "not mocked"}

    def test_raises_configured_exception(self):
        transport = MockTransport({("DELETE", "/idx"): TransportError("refused")})
        with pytest.raises(TransportError, match="refused"):
            transport.send(TransportRequest(method="DELETE", path="/idx"))

    def test_tracks_sent_requests(self):
        transport = MockTransport()
        transport.send(TransportRequest(method="PUT", path="/idx", body={"a": {"b": "c"}}))
        assert len(transport.sent_requests) == 1
        assert transport.sent_requests[0].path == "/idx"
        assert transport.sent_requests[0].body == {"a": {"b": "c"}}

    def test_rejects_unsupported_method(self):
        transport = MockTransport()
        with pytest.raises(ValueError):
            transport.send(TransportRequest(method="HEAD", path="/"))
        assert transport.sent_requests == []

    def test_close_clears_state(self):
        transport = MockTransport(responses={("GET", "/x"): TransportResponse(status_code=200)})
        transport.send(TransportRequest(method="GET", path="/x"))
        transport.close()
        assert transport.sent_requests == []
        assert transport.is_connected is True  # mock is always "connected"


def _recording_transport(response: httpx.Response):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return response

    return httpx.MockTransport(handler), seen


class TestHttpTransport:
    def test_initialization_strips_trailing_slash(self):
        transport = HttpTransport(base_url="http://localhost:9200///")
        assert transport.base_url == "http://localhost:9200"

    def test_not_connected_until_first_request(self):
        mock, _ = _recording_transport(httpx.Response(200, json={}))
        transport = HttpTransport(base_url="http://es.test:9200", http_transport=mock)
        assert transport.is_connected is False
        transport.send(TransportRequest(method="GET", path="/"))
        assert transport.is_connected is True

    def test_close(self):
        mock, _ = _recording_transport(httpx.Response(200, json={}))
        transport = HttpTransport(base_url="http://es.test:9200", http_transport=mock)
        transport.send(TransportRequest(method="GET", path="/"))
        transport.close()
        assert transport.is_connected is False

    def test_sends_json_body(self):
        mock, seen = _recording_transport(httpx.Response(200, json={"acknowledged": True}))
        transport = HttpTransport(base_url="http://es.test:9200", http_transport=mock)

        response = transport.send(
            TransportRequest(method="PUT", path="/idx", body={"k": {"v": "w"}})
        )

        assert response.status_code == 200
        assert response.decode() == {"acknowledged": True}
        request = seen[0]
        assert request.method == "PUT"
        assert request.url.path == "/idx"
        assert request.headers["content-type"] == "application/json"
        assert request.content == b'{"k":{"v":"w"}}'

    def test_no_body_sends_empty_content(self):
        mock, seen = _recording_transport(httpx.Response(200, json={}))
        transport = HttpTransport(base_url="http://es.test:9200", http_transport=mock)
        transport.send(TransportRequest(method="POST", path="/_refresh"))
        assert seen[0].content == b""
        assert "content-type" not in seen[0].headers

    def test_non_2xx_is_returned_not_raised(self):
        mock, _ = _recording_transport(httpx.Response(404, json={"error": "missing"}))
        transport = HttpTransport(base_url="http://es.test:9200", http_transport=mock)
        response = transport.send(TransportRequest(method="GET", path="/nope"))
        assert response.status_code == 404

    def test_basic_auth(self):
        mock, seen = _recording_transport(httpx.Response(200, json={}))
        transport = HttpTransport(
            base_url="http://es.test:9200",
            username="elastic",
            password="secret",
            http_transport=mock,
        )
        transport.send(TransportRequest(method="GET", path="/"))
        expected = base64.b64encode(b"elastic:secret").decode("ascii")
        assert seen[0].headers["authorization"] == f"Basic {expected}"

    def test_api_key(self):
        mock, seen = _recording_transport(httpx.Response(200, json={}))
        transport = HttpTransport(
            base_url="http://es.test:9200", api_key="abc123", http_transport=mock
        )
        transport.send(TransportRequest(method="GET", path="/"))
        assert seen[0].headers["authorization"] == "ApiKey abc123"

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("Connection refused"),
            httpx.ReadTimeout("timed out"),
            httpx.RemoteProtocolError("peer closed connection"),
        ],
    )
    def test_network_failures_raise_transport_error(self, error):
        def handler(request: httpx.Request) -> httpx.Response:
            raise error

        transport = HttpTransport(
            base_url="http://es.test:9200", http_transport=httpx.MockTransport(handler)
        )
        with pytest.raises(TransportError) as exc_info:
            transport.send(TransportRequest(method="POST", path="/_refresh"))
        assert exc_info.value.__cause__ is error

    def test_rejects_unsupported_method(self):
        transport = HttpTransport(base_url="http://es.test:9200")
        with pytest.raises(ValueError):
            transport.send(TransportRequest(method="PATCH", path="/"))


def test_encode_body_is_compact():
    assert encode_body({"a": {"b": "c"}}) == b'{"a":{"b":"c"}}'


def test_encode_body_keeps_unicode():
    assert encode_body({"t": "café"}) == '{"t":"café"}'.encode("utf-8")
