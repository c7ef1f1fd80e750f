"""Command-line entry point for breach.vip searches."""

import argparse
import logging
import sys

from . import config
from .builder import build_request
from .client import BreachVIPClient
from .exceptions import BreachVIPError, ParseError
from .runner import SearchRunner
from .version import __version__


def timeout_arg(value):
    try:
        return config.parse_timeout(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pybreachvip",
        description="Search breach.vip and save the results.",
    )
    parser.add_argument("--term", default="", help="Search term (required).")
    parser.add_argument(
        "--fields",
        default="domain",
        help="Comma-separated fields to search (default: domain).",
    )
    parser.add_argument(
        "--categories",
        default="",
        help="Comma-separated categories (optional).",
    )
    parser.add_argument(
        "--wildcard",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable wildcard matching (omitted from the request unless given).",
    )
    parser.add_argument(
        "--case",
        dest="case_sensitive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Case sensitive search (omitted from the request unless given).",
    )
    parser.add_argument(
        "--url",
        default=config.default_api_url(),
        help=f"API endpoint URL (or set {config.API_URL_ENV}).",
    )
    parser.add_argument(
        "--out",
        default=config.DEFAULT_OUTPUT,
        help=f"Output file path (default: {config.DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--timeout",
        type=timeout_arg,
        default=config.default_timeout(),
        help=f"Request timeout in seconds (or set {config.TIMEOUT_ENV}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request and parsing details to stderr.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def print_summary(summary):
    results = summary.results
    if summary.email_path:
        print(f"Emails saved to {summary.email_path}")
    if summary.password_path:
        print(f"Passwords saved to {summary.password_path}")
    print(f"Emails: {len(results.emails)}")
    print(f"Passwords: {len(results.passwords)}")
    print(f"Total results: {results.total} (Maximum: {summary.max_results})")


def main(argv=None, client_factory=None):
    try:
        parser = build_parser()
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 2
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    term = args.term.strip()
    if not term or not args.fields.strip():
        print("Error: --term and --fields are required.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        request = build_request(
            term,
            args.fields,
            args.categories,
            wildcard=args.wildcard,
            case_sensitive=args.case_sensitive,
        )
    except BreachVIPError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    client_factory = client_factory or BreachVIPClient
    runner = SearchRunner(client_factory(url=args.url, timeout=args.timeout))

    print(f"Searching for {term} on {args.url}")
    try:
        runner.save_response(request, args.out)
    except BreachVIPError as error:
        print(f"Error sending request: {error}", file=sys.stderr)
        return 1
    except OSError as error:
        print(f"Error writing output file: {error}", file=sys.stderr)
        return 1
    print(f"Response saved to {args.out}")

    try:
        summary = runner.process_response(args.out)
    except ParseError as error:
        print(f"Error parsing results: {error}", file=sys.stderr)
        return 1
    except OSError as error:
        print(f"Error writing result files: {error}", file=sys.stderr)
        return 1

    print_summary(summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
