#!/usr/bin/env python3
"""
Query the site search index from the command line.

Loads the translations document, builds the index for one language and
prints the ranked results with their excerpts.

Usage:
    python scripts/search_translations.py "cloud"
    python scripts/search_translations.py --lang en --source https://example.com/translations.json "projects"
"""

import argparse
import logging
import sys

from sitesearch import SearchService, TranslationStore, load_translations
from sitesearch.core.config import settings


def main() -> int:
    parser = argparse.ArgumentParser(description="Search the site pages")
    parser.add_argument("query", help="Text to search for")
    parser.add_argument("--lang", default=settings.DEFAULT_LANGUAGE)
    parser.add_argument("--source", default=settings.TRANSLATIONS_SOURCE)
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL)

    store = TranslationStore()
    if not store.load(load_translations(args.source)):
        print(f"Translations unavailable: {args.source}")
        return 1

    service = SearchService(store)
    index = service.build_index(args.lang)
    print(f"Indexed {len(index)} pages ({args.lang})")

    results = service.search(args.query)
    if not results:
        print(f'{service.messages()["noResults"]} "{args.query}"')
        return 0

    for result in results:
        print(f"[{result.relevance:>2}] {result.title} ({result.url})")
        print(f"     {result.excerpt}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
