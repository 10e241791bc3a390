"""Data model for indexing-API page requests and webhook configuration."""

from dataclasses import dataclass, field
from typing import Any

from creator_watch.errors import ProtocolError


@dataclass(frozen=True)
class PageRequest:
    """One getAssetsByCreator page: creator filter, 1-based page, page size, verified flag."""
    creator_address: str
    page: int
    limit: int
    only_verified: bool = True

    def to_params(self) -> dict[str, Any]:
        return {
            "creatorAddress": self.creator_address,
            "onlyVerified": self.only_verified,
            "page": self.page,
            "limit": self.limit,
        }

    def next(self) -> "PageRequest":
        return PageRequest(self.creator_address, self.page + 1, self.limit, self.only_verified)


@dataclass
class WebhookConfig:
    """Full webhook record. Sent whole on every update, never as a patch."""
    webhook_url: str
    transaction_types: list[str]
    account_addresses: list[str] = field(default_factory=list)
    webhook_type: str = "enhanced"

    def to_payload(self) -> dict[str, Any]:
        return {
            "webhookURL": self.webhook_url,
            "transactionTypes": list(self.transaction_types),
            "accountAddresses": list(self.account_addresses),
            "webhookType": self.webhook_type,
        }


def extract_asset_ids(items: list[Any]) -> list[str]:
    """
    Return the id of each asset item, in arrival order.
    No dedup and no format check; an item without a string id is a ProtocolError.
    """
    ids: list[str] = []
    for index, item in enumerate(items):
        asset_id = item.get("id") if isinstance(item, dict) else None
        if not isinstance(asset_id, str):
            raise ProtocolError(f"asset item {index} has no string 'id'")
        ids.append(asset_id)
    return ids
