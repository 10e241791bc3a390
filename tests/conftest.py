"""
Pytest fixtures for Creator Watch. HTTP goes to an in-process fake Helius via httpx.MockTransport.
"""

from __future__ import annotations

import json

import httpx
import pytest

from creator_watch import config
from creator_watch.client import HeliusClient

CREATOR = "3pMvTLUA9NzZQd4gi725p89mvND1wRNQM3C8XEv1hTdA"
API_KEY = "test-key"


class FakeHelius:
    """
    Serves getAssetsByCreator pages out of self.assets and keeps webhooks in a dict.
    Every request is recorded; fail_pages maps page number -> HTTP status to return.
    """

    def __init__(self, assets: list[str] | None = None) -> None:
        self.assets = list(assets or [])
        self.requests: list[httpx.Request] = []
        self.fail_pages: dict[int, int] = {}
        self.page_bodies: dict[int, object] = {}
        self.webhooks: dict[str, dict] = {}
        self.next_webhook_id = "wh-new"

    @property
    def rpc_calls(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests if r.url.host == "rpc.test"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.params.get("api-key") != API_KEY:
            return httpx.Response(401, json={"error": "unauthorized"})
        if request.url.host == "rpc.test":
            return self._rpc(json.loads(request.content))
        return self._webhooks(request)

    def _rpc(self, body: dict) -> httpx.Response:
        params = body["params"]
        page, limit = params["page"], params["limit"]
        if page in self.fail_pages:
            return httpx.Response(self.fail_pages[page], text="upstream error")
        if page in self.page_bodies:
            return httpx.Response(200, json=self.page_bodies[page])
        start = (page - 1) * limit
        items = [{"id": a, "interface": "V1_NFT"} for a in self.assets[start : start + limit]]
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": {"total": len(items), "items": items}})

    def _webhooks(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.rstrip("/")
        base = config.WEBHOOKS_PATH
        if request.method == "GET" and path == base:
            return httpx.Response(200, json=list(self.webhooks.values()))
        if request.method == "POST" and path == base:
            record = {"webhookID": self.next_webhook_id, **json.loads(request.content)}
            self.webhooks[self.next_webhook_id] = record
            return httpx.Response(200, json=record)
        webhook_id = path[len(base) + 1 :]
        if webhook_id not in self.webhooks:
            return httpx.Response(404, json={"error": "webhook not found"})
        if request.method == "PUT":
            record = {"webhookID": webhook_id, **json.loads(request.content)}
            self.webhooks[webhook_id] = record
            return httpx.Response(200, json=record)
        if request.method == "GET":
            return httpx.Response(200, json=self.webhooks[webhook_id])
        return httpx.Response(405)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test in tmp_path with no Creator Watch variables inherited from the shell."""
    for name in config.ENV_VARS.values():
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_helius():
    return FakeHelius()


@pytest.fixture
def make_client(fake_helius):
    """Factory for HeliusClient wired to fake_helius; same keyword arguments as the real one."""

    def _make(**kwargs) -> HeliusClient:
        kwargs.setdefault("api_key", API_KEY)
        kwargs.setdefault("rpc_url", "https://rpc.test")
        kwargs.setdefault("api_url", "https://api.test")
        kwargs.setdefault("rate_limit_rps", 0)
        kwargs["transport"] = httpx.MockTransport(fake_helius.handler)
        return HeliusClient(**kwargs)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
