"""CLI: collect (creator assets -> file), register (file -> webhook), sync (both), show (webhook state)."""

import argparse
import json
import logging
import sys
from pathlib import Path

from creator_watch import config
from creator_watch.client import HeliusClient
from creator_watch.collector import Collector
from creator_watch.config import Settings, load_settings, parse_csv_list, parse_page_size
from creator_watch.errors import CreatorWatchError
from creator_watch.logging_setup import get_logger, setup_logging
from creator_watch.registrar import Registrar

logger = get_logger(__name__)


def _settings(args: argparse.Namespace) -> Settings:
    """Environment (and .env) first, then any flag given on the command line."""
    settings = load_settings(getattr(args, "env_file", None))
    types = getattr(args, "transaction_types", None)
    page_size = getattr(args, "page_size", None)
    addresses_file = getattr(args, "out", None) or getattr(args, "addresses_file", None)
    return settings.override(
        creator_address=getattr(args, "creator", None),
        page_size=parse_page_size(page_size) if page_size is not None else None,
        addresses_file=Path(addresses_file) if addresses_file else None,
        webhook_url=getattr(args, "webhook_url", None),
        webhook_id=getattr(args, "webhook_id", None),
        transaction_types=parse_csv_list(types) if types is not None else None,
        webhook_type=getattr(args, "webhook_type", None),
    )


def _client(settings: Settings, args: argparse.Namespace) -> HeliusClient:
    settings.require("api_key")
    return HeliusClient(
        api_key=settings.api_key,
        rpc_url=settings.rpc_url,
        api_url=settings.api_url,
        timeout_sec=getattr(args, "timeout", config.DEFAULT_TIMEOUT_SEC),
        rate_limit_rps=getattr(args, "rate_limit_rps", config.DEFAULT_RATE_LIMIT_RPS),
    )


def cmd_collect(args: argparse.Namespace) -> int:
    settings = _settings(args)
    settings.require("api_key", "creator_address")
    collector = Collector(
        _client(settings, args),
        page_size=settings.page_size,
        only_verified=not getattr(args, "all_assets", False),
    )
    addresses = collector.run(settings.creator_address, settings.addresses_file)
    logger.info("Done: %s asset id(s) saved to %s", len(addresses), settings.addresses_file)
    return config.EXIT_OK


def cmd_register(args: argparse.Namespace) -> int:
    settings = _settings(args)
    settings.require("api_key", "webhook_url", "transaction_types")
    registrar = Registrar(_client(settings, args))
    webhook_id = registrar.register_from_file(
        settings.addresses_file,
        settings.webhook_url,
        settings.transaction_types,
        webhook_id=settings.webhook_id,
        webhook_type=settings.webhook_type,
    )
    logger.info("Done: webhook %s now monitors the addresses from %s", webhook_id, settings.addresses_file)
    return config.EXIT_OK


def cmd_sync(args: argparse.Namespace) -> int:
    """
    Collect then register in one process. The list is handed over in memory;
    the address file is still written so a later `register` sees the same state.
    """
    settings = _settings(args)
    settings.require("api_key", "creator_address", "webhook_url", "transaction_types")
    client = _client(settings, args)
    collector = Collector(
        client,
        page_size=settings.page_size,
        only_verified=not getattr(args, "all_assets", False),
    )
    addresses = collector.run(settings.creator_address, settings.addresses_file)
    webhook_id = Registrar(client).register_webhook(
        addresses,
        settings.webhook_url,
        settings.transaction_types,
        webhook_id=settings.webhook_id,
        webhook_type=settings.webhook_type,
    )
    logger.info("Done: %s asset id(s) registered on webhook %s", len(addresses), webhook_id)
    return config.EXIT_OK


def cmd_show(args: argparse.Namespace) -> int:
    """Print the configured webhook (or every webhook on the account) as JSON on stdout."""
    settings = _settings(args)
    client = _client(settings, args)
    if settings.webhook_id:
        data = client.get_webhook(settings.webhook_id)
    else:
        data = client.list_webhooks()
        logger.info("show: %s webhook(s) on account", len(data))
    print(json.dumps(data, ensure_ascii=False, indent=2))
    return config.EXIT_OK


def _common_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--env-file", default=None, help="Load settings from this .env file (default: ./.env if present)")
    common.add_argument("--timeout", type=float, default=config.DEFAULT_TIMEOUT_SEC, help="HTTP timeout seconds")
    common.add_argument(
        "--rate-limit-rps",
        type=float,
        default=config.DEFAULT_RATE_LIMIT_RPS,
        help="Max requests per second",
    )
    common.add_argument("--log-dir", default=config.LOG_DIR, help="Directory for %s" % config.LOG_FILE)
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return common


def _add_collect_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--creator", help="Creator address to enumerate (env CREATOR_ADDRESS)")
    p.add_argument("--page-size", type=int, default=None, help="Items per page (default %s)" % config.DEFAULT_PAGE_SIZE)
    p.add_argument("--all-assets", action="store_true", help="Include assets where the creator is unverified")


def _add_webhook_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--webhook-url", help="Callback URL (env WEBHOOK_URL)")
    p.add_argument("--webhook-id", help="Webhook to replace (env WEBHOOK_ID); created when omitted")
    p.add_argument(
        "--transaction-types",
        metavar="T1,T2",
        help="Comma-separated transaction types (default %s)" % ",".join(config.DEFAULT_TRANSACTION_TYPES),
    )
    p.add_argument("--webhook-type", help="Webhook type (default %s)" % config.DEFAULT_WEBHOOK_TYPE)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creator-watch",
        description="Collect a creator's asset ids from Helius and register them on a webhook.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    common = _common_parser()

    collect_parser = subparsers.add_parser("collect", parents=[common], help="Page through a creator's assets and save their ids")
    _add_collect_args(collect_parser)
    collect_parser.add_argument("--out", help="Address file to write (default %s)" % config.DEFAULT_ADDRESSES_FILE)
    collect_parser.set_defaults(func=cmd_collect)

    register_parser = subparsers.add_parser("register", parents=[common], help="Replace the webhook's addresses with the saved list")
    register_parser.add_argument("--addresses-file", help="Address file to read (default %s)" % config.DEFAULT_ADDRESSES_FILE)
    _add_webhook_args(register_parser)
    register_parser.set_defaults(func=cmd_register)

    sync_parser = subparsers.add_parser("sync", parents=[common], help="collect then register in one run")
    _add_collect_args(sync_parser)
    sync_parser.add_argument("--out", help="Address file to write (default %s)" % config.DEFAULT_ADDRESSES_FILE)
    _add_webhook_args(sync_parser)
    sync_parser.set_defaults(func=cmd_sync)

    show_parser = subparsers.add_parser("show", parents=[common], help="Print webhook configuration as JSON")
    show_parser.add_argument("--webhook-id", help="Webhook to show (env WEBHOOK_ID); all webhooks when omitted")
    show_parser.set_defaults(func=cmd_show)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_dir=args.log_dir)
    try:
        return args.func(args)
    except CreatorWatchError as e:
        logger.error("%s: %s", e.kind, e)
        return config.EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
