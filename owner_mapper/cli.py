#!/usr/bin/env python3
"""CLI entry point for owner-mapper"""

import sys
import json
import argparse
import logging

from . import config
from .counties import available_counties
from .exceptions import OwnerMapperError
from .fetch import fetch_document
from .main import run, run_batch
from .utils import find_default_input, print_completed, setup_logging

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="owner-mapper",
        description="Classify and normalize property owner names from county appraiser records",
    )
    parser.add_argument("--log-dir", default=config.LOG_DIR, help="Directory for log files")
    subparsers = parser.add_subparsers(dest="command")

    def add_common(sub):
        sub.add_argument("--county", default=config.COUNTY,
                         help="County adapter to use (see 'owner-mapper counties')")
        sub.add_argument("--output-dir", default=config.OUTPUT_DIR, help="Output directory")
        sub.add_argument("--output-file", default=config.OUTPUT_FILE, help="Output JSON file name")
        sub.add_argument("--company-keyword", action="append", dest="company_keywords",
                         default=list(config.EXTRA_COMPANY_KEYWORDS),
                         help="Extra company keyword (repeatable)")

    run_parser = subparsers.add_parser("run", help="Map owners of a single property document")
    add_common(run_parser)
    run_parser.add_argument("--input", help="Input document (defaults to input.html / input.json)")
    run_parser.add_argument("--property-id", help="Override the property identifier")
    run_parser.add_argument("--quiet", action="store_true", help="Do not print the resulting JSON")

    batch_parser = subparsers.add_parser("batch", help="Map owners of every document in a directory")
    add_common(batch_parser)
    batch_parser.add_argument("--input-dir", default="input", help="Directory of HTML/JSON documents")
    batch_parser.add_argument("--max-workers", type=int, default=config.MAX_WORKERS,
                              help="Number of worker threads")

    fetch_parser = subparsers.add_parser("fetch", help="Download the document a seed file points at")
    fetch_parser.add_argument("--seed", default="property_seed.json",
                              help="JSON file with a source_http_request")
    fetch_parser.add_argument("--output", help="Where to save the document")
    fetch_parser.add_argument("--timeout", type=float, default=config.HTTP_TIMEOUT,
                              help="Request timeout in seconds")

    subparsers.add_parser("counties", help="List available county adapters")
    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "counties":
        for name in available_counties():
            print(name)
        return 0

    setup_logging(args.log_dir, config.LOG_LEVEL)

    try:
        if args.command == "fetch":
            path = fetch_document(args.seed, args.output, args.timeout)
            print_completed(f"fetch -> {path}")
            return 0

        if args.command == "run":
            input_path = args.input or find_default_input()
            data = run(input_path, args.county, args.output_dir, args.output_file,
                       property_id=args.property_id, extra_keywords=args.company_keywords)
            if not args.quiet:
                print(json.dumps(data, indent=2, ensure_ascii=False))
            print_completed("run")
            return 0

        if args.command == "batch":
            _, _, failures = run_batch(args.input_dir, args.county, args.output_dir, args.output_file,
                                       extra_keywords=args.company_keywords, max_workers=args.max_workers)
            print_completed("batch", success=not failures)
            return 1 if failures else 0

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    except OwnerMapperError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
