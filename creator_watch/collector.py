"""Collector: page through getAssetsByCreator, accumulate asset ids, persist the list."""

from __future__ import annotations

from pathlib import Path

from creator_watch import config
from creator_watch.client import HeliusClient
from creator_watch.errors import ConfigError
from creator_watch.logging_setup import get_logger
from creator_watch.models import PageRequest, extract_asset_ids
from creator_watch.storage import save_addresses

logger = get_logger(__name__)


class Collector:
    """Orchestrates fetch (client) -> extract ids (models) -> persist (storage)."""

    def __init__(
        self,
        client: HeliusClient,
        page_size: int = config.DEFAULT_PAGE_SIZE,
        only_verified: bool = True,
    ) -> None:
        if page_size < 1:
            raise ConfigError(f"page size must be >= 1, got {page_size}")
        self.client = client
        self.page_size = page_size
        self.only_verified = only_verified
        self.pages_fetched = 0

    def collect_assets(self, creator_address: str) -> list[str]:
        """
        Return every asset id created by creator_address, in page order.
        Stops on an empty page or on a page shorter than page_size; a full page always
        costs one more request. Transport and protocol errors propagate unhandled.
        """
        request = PageRequest(creator_address, 1, self.page_size, self.only_verified)
        results: list[str] = []
        self.pages_fetched = 0
        while True:
            items = self.client.get_assets_by_creator(request)
            self.pages_fetched += 1
            if not items:
                logger.debug("page %s: empty, stopping", request.page)
                break
            results.extend(extract_asset_ids(items))
            logger.info("page %s: %s item(s), %s total", request.page, len(items), len(results))
            if len(items) < self.page_size:
                break
            request = request.next()
        return results

    def run(self, creator_address: str, out_path: str | Path) -> list[str]:
        """Collect, then overwrite out_path with the full list. Nothing is written on failure."""
        logger.info(
            "collect: creator=%s page_size=%s only_verified=%s",
            creator_address,
            self.page_size,
            self.only_verified,
        )
        addresses = self.collect_assets(creator_address)
        path = save_addresses(out_path, addresses)
        logger.info(
            "collect: %s asset id(s) from %s page(s) written to %s",
            len(addresses),
            self.pages_fetched,
            path,
        )
        logger.debug("collect: all asset ids: %s", ",".join(addresses))
        return addresses
