"""Tests for nexugpt.core module."""

import pytest
import httpx

from nexugpt.core import (
    ProxyHTTPError,
    ProxyReply,
    describe_error,
    ensure_ok,
    send_request,
)


class TestProxyReply:
    """Tests for the tagged reply."""

    def test_success_renders_text(self):
        reply = ProxyReply.success("Hello!")
        assert reply.ok is True
        assert reply.render() == "Hello!"

    def test_failure_renders_error_prefix(self):
        reply = ProxyReply.failure("HTTP 500")
        assert reply.ok is False
        assert reply.text == ""
        assert reply.render() == "Error: HTTP 500"

    def test_empty_success_body_is_still_success(self):
        assert ProxyReply.success("").render() == ""


class TestErrors:
    """Tests for error helpers."""

    def test_http_error_carries_status(self):
        error = ProxyHTTPError(404)
        assert error.status == 404
        assert str(error) == "HTTP 404"

    def test_describe_error_prefers_message(self):
        assert describe_error(ValueError("bad value")) == "bad value"

    def test_describe_error_falls_back_to_class_name(self):
        assert describe_error(TimeoutError()) == "TimeoutError"

    def test_ensure_ok_raises_on_error_status(self, fake_response):
        with pytest.raises(ProxyHTTPError, match="HTTP 429"):
            ensure_ok(fake_response(429))

    def test_ensure_ok_passes_success_through(self, fake_response):
        response = fake_response(204)
        assert ensure_ok(response) is response


class TestSendRequest:
    """Tests for send_request()."""

    @pytest.mark.asyncio
    async def test_passes_request_through(self, fake_fetch, fake_response):
        fake_fetch.queue(fake_response(200, "ok"))

        reply = await send_request(
            fake_fetch, "https://proxy.test/", method="POST",
            headers={"Content-Type": "application/json"}, body="{}",
        )

        assert reply == ProxyReply.success("ok")
        assert fake_fetch.calls == [{
            "url": "https://proxy.test/",
            "method": "POST",
            "headers": {"Content-Type": "application/json"},
            "body": "{}",
        }]

    @pytest.mark.asyncio
    async def test_http_status_becomes_failure(self, fake_fetch, fake_response):
        fake_fetch.queue(fake_response(502, "Bad Gateway"))

        reply = await send_request(fake_fetch, "https://proxy.test/")

        assert reply == ProxyReply.failure("HTTP 502")

    @pytest.mark.asyncio
    async def test_transport_error_becomes_failure(self, fake_fetch):
        fake_fetch.queue(httpx.ConnectTimeout("connect timed out"))

        reply = await send_request(fake_fetch, "https://proxy.test/")

        assert reply.render() == "Error: connect timed out"
