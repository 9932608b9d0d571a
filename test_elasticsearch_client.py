"""Tests for the search backend client."""

import asyncio

import boto3
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer
from botocore.credentials import Credentials

from searchapi.elasticsearch import (
    ElasticsearchClient,
    ElasticsearchConfig,
    ElasticsearchException,
    RequestSigner,
    SigningException,
)


@pytest.fixture
async def backend():
    """Fake search backend recording every request it receives."""
    received = []

    async def handler(request: web.Request) -> web.Response:
        received.append(
            {
                "method": request.method,
                "path": request.path,
                "body": await request.read(),
                "headers": dict(request.headers),
            }
        )
        return web.Response(body=b"moo")

    async def failing(request: web.Request) -> web.Response:
        return web.Response(status=500, text="shard failure")

    app = web.Application()
    app.router.add_post("/index/doctype/_search", handler)
    app.router.add_post("/index/doctype/_msearch", handler)
    app.router.add_get("/_cat/health", handler)
    app.router.add_post("/broken/doctype/_search", failing)

    server = TestServer(app)
    await server.start_server()
    server.received = received
    yield server
    await server.close()


def make_client(server, signer=None, **overrides):
    config = ElasticsearchConfig(endpoint=str(server.make_url("/")), **overrides)
    return ElasticsearchClient(config, signer=signer)


async def test_search_posts_body_to_search_action(backend):
    client = make_client(backend)
    try:
        result = await client.search("index", "doctype", b"search request")
    finally:
        await client.close()

    assert result == b"moo"
    assert len(backend.received) == 1
    request = backend.received[0]
    assert request["method"] == "POST"
    assert request["path"] == "/index/doctype/_search"
    assert request["body"] == b"search request"
    assert request["headers"]["Content-Type"] == "application/json"


async def test_multi_search_posts_body_to_msearch_action(backend):
    client = make_client(backend)
    try:
        result = await client.multi_search("index", "doctype", b"multiSearch request")
    finally:
        await client.close()

    assert result == b"moo"
    request = backend.received[0]
    assert request["method"] == "POST"
    assert request["path"] == "/index/doctype/_msearch"
    assert request["body"] == b"multiSearch request"
    assert request["headers"]["Content-Type"] == "application/x-ndjson"


async def test_get_status_requests_cluster_health(backend):
    client = make_client(backend)
    try:
        result = await client.get_status()
        healthy = await client.health_check()
    finally:
        await client.close()

    assert result == b"moo"
    assert healthy is True
    assert [r["method"] for r in backend.received] == ["GET", "GET"]
    assert backend.received[0]["path"] == "/_cat/health"


async def test_error_status_raises(backend):
    client = make_client(backend)
    try:
        with pytest.raises(ElasticsearchException) as exc_info:
            await client.search("broken", "doctype", b"search request")
    finally:
        await client.close()

    assert exc_info.value.status_code == 500


async def test_connection_error_raises():
    client = ElasticsearchClient(ElasticsearchConfig(endpoint="http://127.0.0.1:1", timeout=2))
    try:
        with pytest.raises(ElasticsearchException) as exc_info:
            await client.multi_search("index", "doctype", b"{}")
        assert await client.health_check() is False
    finally:
        await client.close()

    assert exc_info.value.status_code is None
    assert exc_info.value.__cause__ is not None


async def test_missing_signer_raises_before_sending(backend):
    client = make_client(backend, sign_requests=True)
    try:
        with pytest.raises(SigningException) as exc_info:
            await client.get_status()
    finally:
        await client.close()

    assert str(exc_info.value) == "v4 signer missing. Cannot sign request"
    assert backend.received == []


async def test_signed_request_carries_sigv4_headers(backend):
    signer = RequestSigner("eu-west-1", "es", credentials=Credentials("AKIDEXAMPLE", "secret"))
    client = make_client(backend, signer=signer, sign_requests=True)
    try:
        await client.search("index", "doctype", b"search request")
    finally:
        await client.close()

    headers = backend.received[0]["headers"]
    assert headers["Authorization"].startswith("AWS4-HMAC-SHA256 Credential=AKIDEXAMPLE/")
    assert "/eu-west-1/es/aws4_request" in headers["Authorization"]
    assert "X-Amz-Date" in headers


def test_signer_keeps_given_headers():
    signer = RequestSigner("eu-west-1", credentials=Credentials("AKIDEXAMPLE", "secret", "session-token"))

    headers = signer.sign(
        "POST", "http://localhost:9200/ons/_doc/_search", b"{}", {"Content-Type": "application/json"}
    )

    assert headers["Content-Type"] == "application/json"
    assert headers["X-Amz-Security-Token"] == "session-token"
    assert "Authorization" in headers


def test_signer_without_credentials_raises(monkeypatch):
    monkeypatch.setattr(boto3.Session, "get_credentials", lambda self: None)

    with pytest.raises(SigningException):
        RequestSigner("eu-west-1")


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("SEARCH_ELASTICSEARCH_URL", "http://localhost:9200")
    monkeypatch.setenv("SEARCH_ELASTICSEARCH_INDEX", "ons_test")
    monkeypatch.setenv("SEARCH_SIGN_ELASTICSEARCH_REQUESTS", "true")
    monkeypatch.delenv("SEARCH_AWS_REGION", raising=False)

    config = ElasticsearchConfig.from_environment()

    assert config.endpoint == "http://localhost:9200"
    assert config.index == "ons_test"
    assert config.doc_type == "_doc"
    assert config.sign_requests is True
    assert config.aws_region == "eu-west-1"


def test_config_requires_endpoint(monkeypatch):
    monkeypatch.delenv("SEARCH_ELASTICSEARCH_URL", raising=False)

    with pytest.raises(ValueError):
        ElasticsearchConfig.from_environment()


@pytest.fixture
async def slow_backend():
    """Fake search backend that answers after the client has given up."""

    async def handler(request: web.Request) -> web.Response:
        await asyncio.sleep(2)
        return web.Response(body=b"late")

    app = web.Application()
    app.router.add_post("/index/doctype/_msearch", handler)
    app.router.add_get("/_cat/health", handler)

    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()


async def test_timeout_raises(slow_backend):
    client = make_client(slow_backend, timeout=1)
    try:
        with pytest.raises(ElasticsearchException) as exc_info:
            await client.multi_search("index", "doctype", b"{}")
    finally:
        await client.close()

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, asyncio.TimeoutError)


async def test_health_check_reports_timeout_as_unhealthy(slow_backend):
    client = make_client(slow_backend, timeout=1)
    try:
        assert await client.health_check() is False
    finally:
        await client.close()
