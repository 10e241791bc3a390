"""Registrar: push the collected address list to the webhook as a full replacement."""

from __future__ import annotations

import json
from pathlib import Path

from creator_watch import config
from creator_watch.client import HeliusClient
from creator_watch.errors import ProtocolError
from creator_watch.logging_setup import get_logger
from creator_watch.models import WebhookConfig
from creator_watch.storage import load_addresses

logger = get_logger(__name__)


class Registrar:
    """Builds a WebhookConfig from an address collection and sends it in one request."""

    def __init__(self, client: HeliusClient) -> None:
        self.client = client

    def register_webhook(
        self,
        addresses: list[str],
        callback_url: str,
        event_types: list[str],
        webhook_id: str | None = None,
        webhook_type: str = config.DEFAULT_WEBHOOK_TYPE,
    ) -> str:
        """
        Replace the webhook's monitored set with addresses (PUT when webhook_id is given,
        otherwise create one with POST). Returns the webhook id.
        """
        webhook = WebhookConfig(
            webhook_url=callback_url,
            transaction_types=list(event_types),
            account_addresses=list(addresses),
            webhook_type=webhook_type,
        )
        if webhook_id:
            logger.info("register: updating webhook %s with %s address(es)", webhook_id, len(addresses))
            data = self.client.update_webhook(webhook_id, webhook)
        else:
            logger.info("register: no webhook id configured, creating webhook with %s address(es)", len(addresses))
            data = self.client.create_webhook(webhook)
        logger.info("register: response %s", json.dumps(data, ensure_ascii=False)[:2000])

        if not isinstance(data, dict):
            raise ProtocolError("webhook response is not a JSON object")
        returned_id = data.get("webhookID")
        if isinstance(returned_id, str) and returned_id:
            return returned_id
        if webhook_id:
            return webhook_id
        raise ProtocolError("create webhook response has no 'webhookID'")

    def register_from_file(
        self,
        path: str | Path,
        callback_url: str,
        event_types: list[str],
        webhook_id: str | None = None,
        webhook_type: str = config.DEFAULT_WEBHOOK_TYPE,
    ) -> str:
        """Load the collector's address file and register it. FileError if absent or malformed."""
        addresses = load_addresses(path)
        logger.info("register: loaded %s address(es) from %s", len(addresses), path)
        return self.register_webhook(addresses, callback_url, event_types, webhook_id, webhook_type)
