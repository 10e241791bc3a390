"""All constants and configuration for Creator Watch."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

from dotenv import load_dotenv

from creator_watch.errors import ConfigError

# --- Helius endpoints ---
RPC_URL = "https://mainnet.helius-rpc.com"
API_URL = "https://api.helius.xyz"
WEBHOOKS_PATH = "/v0/webhooks"
RPC_METHOD_ASSETS_BY_CREATOR = "getAssetsByCreator"
RPC_ID_PREFIX = "creator-watch"

# --- HTTP client defaults ---
DEFAULT_TIMEOUT_SEC = 30.0
DEFAULT_RATE_LIMIT_RPS = 5.0

# --- Collector ---
DEFAULT_PAGE_SIZE = 1000
DEFAULT_ADDRESSES_FILE = "addresses.json"

# --- Webhook ---
DEFAULT_TRANSACTION_TYPES = ["NFT_LISTING", "NFT_SALE"]
DEFAULT_WEBHOOK_TYPE = "enhanced"

# --- Logging ---
LOG_DIR = "logs"
LOG_FILE = "app.log"

# --- Exit codes ---
EXIT_OK = 0
EXIT_FAILURE = 1

# Settings field -> environment variable
ENV_VARS = {
    "api_key": "HELIUS_API_KEY",
    "rpc_url": "HELIUS_RPC_URL",
    "api_url": "HELIUS_API_URL",
    "creator_address": "CREATOR_ADDRESS",
    "webhook_url": "WEBHOOK_URL",
    "webhook_id": "WEBHOOK_ID",
    "transaction_types": "WEBHOOK_TRANSACTION_TYPES",
    "webhook_type": "WEBHOOK_TYPE",
    "addresses_file": "ADDRESSES_FILE",
    "page_size": "PAGE_SIZE",
}


def parse_csv_list(value: str | None) -> list[str]:
    """Split a comma-separated string into non-empty stripped items."""
    return [v.strip() for v in (value or "").split(",") if v.strip()]


def parse_page_size(value: str | int | None) -> int:
    if value is None or value == "":
        return DEFAULT_PAGE_SIZE
    try:
        size = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"page size must be an integer, got {value!r}") from None
    if size < 1:
        raise ConfigError(f"page size must be >= 1, got {size}")
    return size


@dataclass
class Settings:
    """Runtime configuration. Secrets come from the environment only."""
    api_key: str | None = None
    rpc_url: str = RPC_URL
    api_url: str = API_URL
    creator_address: str | None = None
    webhook_url: str | None = None
    webhook_id: str | None = None
    transaction_types: list[str] = field(default_factory=lambda: list(DEFAULT_TRANSACTION_TYPES))
    webhook_type: str = DEFAULT_WEBHOOK_TYPE
    addresses_file: Path = Path(DEFAULT_ADDRESSES_FILE)
    page_size: int = DEFAULT_PAGE_SIZE

    def require(self, *names: str) -> None:
        """Raise ConfigError listing every named field that is unset or empty."""
        missing = [n for n in names if not getattr(self, n)]
        if missing:
            labels = ", ".join(f"{n} ({ENV_VARS.get(n, n)})" for n in missing)
            raise ConfigError(f"missing required configuration: {labels}")

    def override(self, **values) -> "Settings":
        """Return a copy with every non-None value applied (CLI flags win over env)."""
        known = {f.name for f in fields(self)}
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        for name, value in values.items():
            if name not in known:
                raise ConfigError(f"unknown setting: {name}")
            if value is not None:
                current[name] = value
        return Settings(**current)


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Build Settings from the environment. A .env file (given path, or ./.env in the
    working directory when present; parent directories are not searched) is loaded
    first; variables already set in the process environment win.
    """
    if env_file is not None:
        if not Path(env_file).is_file():
            raise ConfigError(f"env file not found: {env_file}")
        load_dotenv(env_file)
    else:
        local_env = Path.cwd() / ".env"
        if local_env.is_file():
            load_dotenv(local_env)

    def _get(name: str) -> str | None:
        raw = os.getenv(ENV_VARS[name])
        return raw.strip() if raw and raw.strip() else None

    settings = Settings(
        api_key=_get("api_key"),
        rpc_url=_get("rpc_url") or RPC_URL,
        api_url=_get("api_url") or API_URL,
        creator_address=_get("creator_address"),
        webhook_url=_get("webhook_url"),
        webhook_id=_get("webhook_id"),
        webhook_type=_get("webhook_type") or DEFAULT_WEBHOOK_TYPE,
        addresses_file=Path(_get("addresses_file") or DEFAULT_ADDRESSES_FILE),
        page_size=parse_page_size(_get("page_size")),
    )
    types = parse_csv_list(_get("transaction_types"))
    if types:
        settings.transaction_types = types
    return settings
