#!/usr/bin/env python3
"""
Run one product search against the configured storefront API and print
the compiled request and the normalized result.

Usage:
    PYTHONPATH=src python scripts/run_search.py "https://shop.test/search?search=shoes&priceFrom=50"
    PYTHONPATH=src python scripts/run_search.py --category bags "https://shop.test/c?sort=price:asc"
    PYTHONPATH=src python scripts/run_search.py --text "red shoes"

Reads API_BASE_URL / SEARCH_PATH from the environment or .env.
"""

import argparse
import asyncio
import json
import os
import sys

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from core.logging import configure_logging
from product_search.client import StorefrontSearchClient
from product_search.query_compiler import compile_search_request, compile_text_request
from product_search.service import SearchService


async def run(args: argparse.Namespace) -> None:
    if args.text:
        request = compile_text_request(args.target)
    else:
        request = compile_search_request(args.target, args.category)

    print("Compiled request:")
    print(json.dumps(request.model_dump(by_alias=True), indent=2))
    print("\nOutbound query parameters:")
    print(json.dumps(request.to_query_params(), indent=2))

    client = StorefrontSearchClient()
    service = SearchService(client=client)
    try:
        if args.text:
            result = await service.search_by_text(args.target)
        else:
            result = await service.search_by_url(args.target, args.category)
    finally:
        await client.aclose()

    summary = result.model_dump(by_alias=True, exclude_none=True)
    if not args.full:
        summary["data"] = [hit.get("id") or hit.get("slug") for hit in result.data]

    print(f"\nResult ({result.count} products, {result.total_pages} pages):")
    print(json.dumps(summary, indent=2, ensure_ascii=False))


def main():
    parser = argparse.ArgumentParser(description="Run a storefront product search")
    parser.add_argument("target", help="Listing URL, or free text with --text")
    parser.add_argument("--category", help="Category slug overriding ?categories=")
    parser.add_argument("--text", action="store_true", help="Treat target as free text")
    parser.add_argument("--full", action="store_true", help="Print full product hits")
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    args = parser.parse_args()

    configure_logging(log_level="DEBUG" if args.debug else "WARNING")
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
