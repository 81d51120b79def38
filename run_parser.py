#!/usr/bin/env python3
"""
CLI script to parse saved dictionary result pages.

Reads HTML files that were fetched earlier, classifies and extracts each
one, and prints the results as JSON in the camelCase message shape the
display layer consumes.

Usage:
    python run_parser.py fixtures/favorable.html
    python run_parser.py fixtures/*.html -o results.json
    python run_parser.py page.html --features lxml -v
"""

import argparse
import json
from pathlib import Path

# Load .env file automatically (COLLINS_PARSER_* settings)
from dotenv import load_dotenv
load_dotenv()

from collins_parser.config import ParserSettings, SUPPORTED_FEATURES
from collins_parser.main import CollinsParser
from collins_parser.schemas import to_message


def main():
    parser = argparse.ArgumentParser(description="Parse saved dictionary result pages")
    parser.add_argument("files", nargs="+", help="HTML files to parse")
    parser.add_argument("--output", "-o", help="Output JSON file")
    parser.add_argument("--features", choices=SUPPORTED_FEATURES, help="BeautifulSoup tree builder")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    settings = ParserSettings.from_env(features=args.features)
    collins = CollinsParser(settings=settings, log_level="DEBUG" if args.verbose else None)

    results = []

    for filepath in args.files:
        path = Path(filepath)
        print(f"Parsing: {path.name}")

        try:
            result = collins.parse_file(path)
        except OSError as e:
            # Unreadable file; parsing itself never raises
            results.append({
                "file": path.name,
                "status": "error",
                "error": str(e)
            })
            print(f"  ✗ Error: {e}")
            continue

        results.append({
            "file": path.name,
            "status": "success",
            "result": to_message(result)
        })
        print(f"  ✓ {result.type}")

    # ensure_ascii=False keeps the Chinese glosses readable
    output = json.dumps(results, indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"\nSaved to: {args.output}")
    else:
        print("\n" + output)


if __name__ == "__main__":
    main()
