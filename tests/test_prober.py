"""可达性探测测试"""

import asyncio

from pr_quality_checker.core.prober import probe

URL = "https://pkg.go.dev/github.com/acme/widget"


def _probe(network, url=URL):
    async def go():
        async with network.client() as client:
            return await probe(client, url)
    return asyncio.run(go())


def test_head_success(network):
    network.add("HEAD", URL, 200)
    result = _probe(network)
    assert result.ok is True
    assert result.status == 200
    assert network.calls("GET") == []


def test_redirect_counts_as_reachable(network):
    network.add("HEAD", URL, 301, headers={"Location": "https://pkg.go.dev/other"})
    result = _probe(network)
    assert result.ok is True
    assert result.status == 301
    assert len(network.requests) == 1


def test_client_error_is_final(network):
    network.add("HEAD", URL, 404)
    network.add("GET", URL, 200)
    result = _probe(network)
    assert result.ok is False
    assert result.status == 404
    assert network.calls("GET") == []


def test_server_error_falls_back_to_get(network):
    network.add("HEAD", URL, 503)
    network.add("GET", URL, 200)
    result = _probe(network)
    assert result.ok is True
    assert result.status == 200
    assert network.calls() == [f"HEAD {URL}", f"GET {URL}"]


def test_fallback_get_failure(network):
    network.add("HEAD", URL, 500)
    network.add("GET", URL, 502)
    result = _probe(network)
    assert result.ok is False
    assert result.status == 502


def test_network_error_on_head(network):
    result = _probe(network)
    assert result.ok is False
    assert result.status is None
    assert len(network.requests) == 1


def test_network_error_on_fallback_get(network):
    network.add("HEAD", URL, 503)
    result = _probe(network)
    assert result.ok is False
    assert result.status is None
    assert len(network.requests) == 2
