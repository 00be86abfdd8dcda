#!/usr/bin/env python3
"""Print HMAC signatures for catalog ids, for building signed QR links."""

import argparse
import sys
from pathlib import Path

from get_env_values import SOFKA_SECRET, CATALOG_PATH
from sofka_aroma.catalog.catalog import CatalogManager
from sofka_aroma.errors import CatalogLoadError
from sofka_aroma.utils import sign_id


def sign_ids(ids, secret: str) -> list:
    """Return (id, signature) pairs in the order given."""
    return [(record_id, sign_id(record_id, secret)) for record_id in ids]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Sign catalog ids for QR links")
    parser.add_argument(
        "ids",
        nargs="*",
        help="Ids to sign (default: every id in the catalog)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=Path(CATALOG_PATH) if CATALOG_PATH else None,
        help="Path to the catalog JSON (default: CATALOG_PATH or the bundled catalog)",
    )
    parser.add_argument(
        "--secret",
        default=SOFKA_SECRET,
        help="Signing secret (default: SOFKA_SECRET)",
    )
    args = parser.parse_args(argv)

    if not args.secret:
        print("No secret configured: set SOFKA_SECRET or pass --secret", file=sys.stderr)
        return 2

    ids = args.ids
    if not ids:
        try:
            ids = list(CatalogManager(args.catalog).load())
        except CatalogLoadError as e:
            print(str(e), file=sys.stderr)
            return 1

    for record_id, signature in sign_ids(ids, args.secret):
        print(f"{record_id}\t{signature}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
