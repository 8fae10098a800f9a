"""Command line entry point: publish every auction listed in the config file."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from auction_showcase.api.bigone import BigOneClient
from auction_showcase.api.press_one import PublishResult, ShowcasePublisher
from auction_showcase.config import Settings, load_settings
from auction_showcase.errors import ShowcaseError
from auction_showcase.logging import configure_logging, get_logger
from auction_showcase.pipelines.showcase_pipeline import ShowcasePipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auction-showcase",
        description="Publish BigONE auctions and their bids to PRESS.one.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the config file (default: config.yaml/.yml/.json/.toml in the working directory)",
    )
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    parser.add_argument(
        "--console",
        action="store_true",
        help="Render logs for humans instead of as JSON lines",
    )
    return parser


async def publish_all(settings: Settings) -> list[PublishResult]:
    pipeline = ShowcasePipeline(
        app=settings.app,
        auctions=settings.auctions,
        source=BigOneClient(settings.app),
        publisher=ShowcasePublisher(settings.app),
    )
    return await pipeline.run()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, json_logs=not args.console)
    logger = get_logger(__name__)

    try:
        settings = load_settings(args.config)
        asyncio.run(publish_all(settings))
    except ShowcaseError as exc:
        logger.error("showcase_failed", error_type=type(exc).__name__, error=str(exc))
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
