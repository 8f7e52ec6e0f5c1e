#!/usr/bin/env python3
"""Manage property listings in a local JSON record-store.

Commands:
- seed: generate synthetic listings and create them on the store
- list: print every listing, newest first
- show: print one listing as UI JSON
- delete: delete one listing

The store file defaults to PROPERTY_STORE_PATH (or properties.json).
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_store.adapter import PropertyRecordAdapter
from property_store.config import PropertyStoreConfig
from property_store.generators import PropertyGenerator
from property_store.logging import get_logger, setup_logging
from property_store.notifications import ConsoleNotifier
from property_store.serialization import to_ui_dict
from property_store.store import JsonFileRecordStore

logger = get_logger(__name__)


async def seed(adapter: PropertyRecordAdapter, count: int, seed_value: int | None) -> int:
    """Create ``count`` generated listings; return how many were created."""
    generator = PropertyGenerator(seed=seed_value)
    created = 0
    for payload in generator.generate_batch(count):
        if await adapter.create(payload) is not None:
            created += 1
    logger.info("Seeded %d/%d properties", created, count)
    return created


async def list_properties(adapter: PropertyRecordAdapter) -> None:
    properties = await adapter.list()
    print(f"\n{'='*60}")
    print(f"Properties ({len(properties)})")
    print("=" * 60)
    for prop in properties:
        print(
            f"{prop.id:>5}  {prop.listing_date[:10]}  {prop.type:<10}  "
            f"${prop.price:>12,.0f}  {prop.title}"
        )


async def show(adapter: PropertyRecordAdapter, record_id: str) -> int:
    prop = await adapter.get_by_id(record_id)
    if prop is None:
        print(f"Property {record_id} not found")
        return 1
    print(json.dumps(to_ui_dict(prop), indent=2, ensure_ascii=False))
    return 0


async def run(args: argparse.Namespace, config: PropertyStoreConfig) -> int:
    store = JsonFileRecordStore(args.store, pretty=config.file_store.pretty)
    notifier = ConsoleNotifier()
    adapter = PropertyRecordAdapter(store, notifier, entity=config.record_store.entity)
    if config.record_store.is_configured:
        logger.info(
            "Record-store project %s is configured; using local store %s",
            config.record_store.project_id,
            args.store,
        )
    else:
        logger.debug("No record-store credentials set; using local store %s", args.store)

    try:
        if args.command == "seed":
            created = await seed(adapter, args.count, args.seed if args.seed is not None else config.seed)
            return 0 if created == args.count else 1
        if args.command == "list":
            await list_properties(adapter)
            return 0
        if args.command == "show":
            return await show(adapter, args.id)
        if args.command == "delete":
            return 0 if await adapter.delete(args.id) else 1
        return 2
    finally:
        notifier.close()


def main() -> None:
    """Main entry point."""
    config = PropertyStoreConfig.from_env()

    parser = argparse.ArgumentParser(description="Manage property listings in a JSON record-store")
    parser.add_argument(
        "--store",
        type=Path,
        default=config.file_store.path,
        help=f"JSON store file (default: {config.file_store.path})",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed_parser = subparsers.add_parser("seed", help="Create generated listings")
    seed_parser.add_argument("--count", type=int, default=10, help="Number of listings (default: 10)")
    seed_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    subparsers.add_parser("list", help="List every listing")

    show_parser = subparsers.add_parser("show", help="Show one listing")
    show_parser.add_argument("id", help="Listing Id")

    delete_parser = subparsers.add_parser("delete", help="Delete one listing")
    delete_parser.add_argument("id", help="Listing Id")

    args = parser.parse_args()

    config.log_level = args.log_level
    config.validate()
    setup_logging(level=config.log_level, format_type=config.log_format)

    sys.exit(asyncio.run(run(args, config)))


if __name__ == "__main__":
    main()
