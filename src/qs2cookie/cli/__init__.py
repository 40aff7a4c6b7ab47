"""qs2cookie CLI — preview the cookies a query string would produce.

Entry point registered as ``qs2cookie`` in ``pyproject.toml``::

    [project.scripts]
    qs2cookie = "qs2cookie.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``qs2cookie`` command."""
    parser = argparse.ArgumentParser(
        prog="qs2cookie",
        description="qs2cookie — copy query string pairs into Set-Cookie headers.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped and dropped pairs to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- qs2cookie preview ------------------------------------------------
    preview_parser = subparsers.add_parser(
        "preview", help="Print the headers produced for a query string"
    )
    preview_parser.add_argument("query", help="Raw query string, without the leading '?'")

    naming = preview_parser.add_argument_group("naming")
    naming.add_argument("--name", default="qs2cookie", help="Cookie name")
    naming.add_argument(
        "--name-from", default=None, help="Take the cookie name from this query parameter"
    )
    naming.add_argument("--prefix", default="", help="Prefix for the cookie name or keys")

    packing = preview_parser.add_argument_group("packing")
    packing.add_argument(
        "--per-pair",
        action="store_true",
        help="Emit one unescaped cookie per pair instead of one packed cookie",
    )
    packing.add_argument(
        "--encode-in-key",
        action="store_true",
        help="Pack the pairs into the cookie name instead of its value",
    )
    packing.add_argument("--pair-delimiter", default="^", help="Separator between pairs")
    packing.add_argument("--kv-delimiter", default="|", help="Separator between key and value")
    packing.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="KEY",
        help="Query parameter to leave out (repeatable)",
    )
    packing.add_argument("--max-size", type=int, default=1024, help="Size limit in bytes")

    attributes = preview_parser.add_argument_group("attributes")
    attributes.add_argument("--domain", default="", help="Cookie domain, e.g. .example.com")
    attributes.add_argument("--path", default="/", help="Cookie path")
    attributes.add_argument(
        "--expires", type=int, default=0, help="Lifetime in seconds (0 = session cookie)"
    )

    request = preview_parser.add_argument_group("request")
    request.add_argument("--dnt", action="store_true", help="Simulate a DNT request header")
    request.add_argument(
        "--enable-if-dnt", action="store_true", help="Process requests carrying DNT"
    )
    request.add_argument(
        "--time", type=float, default=None, help="Request time as a Unix timestamp"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "preview":
        from qs2cookie.cli._preview import run_preview

        run_preview(args)
