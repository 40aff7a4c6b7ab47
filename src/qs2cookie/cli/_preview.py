"""``qs2cookie preview`` — run the transformation for one query string.

Prints one ``Name: value`` line per response header, or a single
``declined: <reason>`` line. Exits with code 2 on invalid options.
"""

import argparse
import sys
import time

from qs2cookie.config import CookieConfig, PackingMode
from qs2cookie.errors import ConfigurationError
from qs2cookie.pipeline import QueryRequest, transform


def config_from_args(args: argparse.Namespace) -> CookieConfig:
    """Build a ``CookieConfig`` from parsed ``preview`` arguments."""
    return CookieConfig(
        enabled_if_dnt=args.enable_if_dnt,
        cookie_name=args.name,
        cookie_name_from=args.name_from,
        prefix=args.prefix,
        packing=PackingMode.PER_PAIR if args.per_pair else PackingMode.AGGREGATED,
        encode_in_key=args.encode_in_key,
        pair_delimiter=args.pair_delimiter,
        key_value_delimiter=args.kv_delimiter,
        ignore=tuple(args.ignore),
        max_size=args.max_size,
        expires=args.expires,
        domain=args.domain,
        path=args.path,
    )


def run_preview(args: argparse.Namespace) -> None:
    """Print the headers *args.query* would produce."""
    try:
        config = config_from_args(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    request_time = args.time if args.time is not None else time.time()
    outcome = transform(
        QueryRequest(query=args.query, request_time=request_time, dnt=args.dnt),
        config,
        clock=lambda: request_time,
    )

    if outcome.declined is not None:
        print(f"declined: {outcome.declined}")
        return

    for name, value in outcome.headers():
        print(f"{name}: {value}")
