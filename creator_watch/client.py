"""Helius API client: DAS JSON-RPC for asset pages, REST for webhooks. No retries."""

import time
from typing import Any

import httpx

from creator_watch import config
from creator_watch.errors import ProtocolError, TransportError
from creator_watch.logging_setup import get_logger
from creator_watch.models import PageRequest, WebhookConfig

logger = get_logger(__name__)


class HeliusClient:
    """Blocking HTTP client for the Helius indexing and webhook APIs with client-side throttling."""

    def __init__(
        self,
        api_key: str,
        rpc_url: str = config.RPC_URL,
        api_url: str = config.API_URL,
        timeout_sec: float = config.DEFAULT_TIMEOUT_SEC,
        rate_limit_rps: float = config.DEFAULT_RATE_LIMIT_RPS,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.rpc_url = rpc_url.rstrip("/")
        self.api_url = api_url.rstrip("/")
        self.timeout_sec = timeout_sec
        self.rate_limit_rps = rate_limit_rps
        self._transport = transport
        self._last_request_ts = 0.0

    def _throttle(self) -> None:
        min_interval = 1.0 / self.rate_limit_rps if self.rate_limit_rps > 0 else 0
        elapsed = time.monotonic() - self._last_request_ts
        if elapsed < min_interval:
            time.sleep(min_interval - elapsed)
        self._last_request_ts = time.monotonic()

    def _request(self, method: str, url: str, payload: Any = None) -> Any:
        """
        Send one request and return the decoded JSON body.
        Non-2xx or network failure -> TransportError; undecodable body -> ProtocolError.
        The api key travels as a query param and is kept out of every message.
        """
        self._throttle()
        try:
            with httpx.Client(timeout=self.timeout_sec, transport=self._transport) as client:
                resp = client.request(method, url, params={"api-key": self.api_key}, json=payload)
        except httpx.TimeoutException as e:
            raise TransportError(f"{method} {url} timed out after {self.timeout_sec}s") from e
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url} failed: {type(e).__name__}") from e
        if not resp.is_success:
            raise TransportError(f"{method} {url} returned HTTP {resp.status_code}", status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise ProtocolError(f"{method} {url} returned a non-JSON body") from e

    def get_assets_by_creator(self, request: PageRequest) -> list[dict]:
        """
        Fetch one page of assets created by request.creator_address.
        POST {rpc_url} with a JSON-RPC getAssetsByCreator envelope; returns result.items.
        An empty list is a valid (final) page; a missing envelope is a ProtocolError.
        """
        body = {
            "jsonrpc": "2.0",
            "id": f"{config.RPC_ID_PREFIX}-page-{request.page}",
            "method": config.RPC_METHOD_ASSETS_BY_CREATOR,
            "params": request.to_params(),
        }
        data = self._request("POST", self.rpc_url, body)
        if not isinstance(data, dict):
            raise ProtocolError(f"page {request.page}: response is not a JSON object")
        if data.get("error") is not None:
            raise ProtocolError(f"page {request.page}: RPC error {data['error']}")
        result = data.get("result")
        if not isinstance(result, dict):
            raise ProtocolError(f"page {request.page}: response has no 'result' object")
        items = result.get("items")
        if not isinstance(items, list):
            raise ProtocolError(f"page {request.page}: 'result.items' is missing or not a list")
        return items

    def update_webhook(self, webhook_id: str, webhook: WebhookConfig) -> Any:
        """Replace the whole webhook record. PUT /v0/webhooks/{webhookID}."""
        url = f"{self.api_url}{config.WEBHOOKS_PATH}/{webhook_id}"
        return self._request("PUT", url, webhook.to_payload())

    def create_webhook(self, webhook: WebhookConfig) -> Any:
        """Create a webhook. POST /v0/webhooks."""
        url = f"{self.api_url}{config.WEBHOOKS_PATH}"
        return self._request("POST", url, webhook.to_payload())

    def get_webhook(self, webhook_id: str) -> dict:
        """GET /v0/webhooks/{webhookID}."""
        url = f"{self.api_url}{config.WEBHOOKS_PATH}/{webhook_id}"
        data = self._request("GET", url)
        if not isinstance(data, dict):
            raise ProtocolError(f"webhook {webhook_id}: response is not a JSON object")
        return data

    def list_webhooks(self) -> list[dict]:
        """GET /v0/webhooks. Returns every webhook on the account."""
        url = f"{self.api_url}{config.WEBHOOKS_PATH}"
        data = self._request("GET", url)
        if not isinstance(data, list):
            raise ProtocolError("webhook list response is not a JSON array")
        return [w for w in data if isinstance(w, dict)]
