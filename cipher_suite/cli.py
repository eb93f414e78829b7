"""
Command line front end for the cipher suite tables.

Subcommands:
- id: Resolve cipher suite names to IANA ids
- name: Render IANA ids as names (IANA or OpenSSL-style spelling)
- list: Split a cipher list the way a TLS client does and resolve each entry
- table: Dump every spelling the tables know
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .codec import decode_key
from .config import CONFIG
from .logging_utils import get_logger
from .lookup import UNKNOWN_SUITE_ID, iter_cipher_list, lookup_id, lookup_name
from .table import SUITE_TABLE

logger = get_logger("cipher_suite")


def _parse_suite_id(value: str) -> int:
    """Accept 0x-prefixed hex or decimal suite ids."""
    try:
        suite_id = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a suite id: {value!r}")
    if not (0 <= suite_id <= 0xFFFF):
        raise argparse.ArgumentTypeError(f"suite id out of range (0-0xFFFF): {value}")
    return suite_id


def _parse_max_len(value: str) -> int:
    """Name capacity, same 1..255 range as CONFIG[NAME_MAX_LEN]."""
    try:
        max_len = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a length: {value!r}")
    if not (1 <= max_len <= 255):
        raise argparse.ArgumentTypeError(f"max length out of range (1-255): {value}")
    return max_len


def id_command(args) -> int:
    """Print the id of every name; fail if any name does not resolve."""
    status = 0
    for name in args.names:
        suite_id = lookup_id(name)
        if suite_id == UNKNOWN_SUITE_ID:
            print(f"Error: unknown cipher suite: {name}", file=sys.stderr)
            status = 1
            continue
        print(f"0x{suite_id:04X} {name}")
    return status


def name_command(args) -> int:
    """Print the preferred spelling of every id; fail on unknown ids."""
    status = 0
    for suite_id in args.ids:
        result = lookup_name(suite_id, max_len=args.max_len, prefer_rfc=args.prefer_rfc)
        if not result.ok:
            status = 1
        print(f"0x{suite_id:04X} {result.text}")
    return status


def list_command(args) -> int:
    """Resolve each entry of a cipher list."""
    entries = [
        {"cipher": token, "id": suite_id, "known": suite_id != UNKNOWN_SUITE_ID}
        for token, suite_id in iter_cipher_list(args.cipher_list)
    ]
    if args.json:
        print(json.dumps(entries, indent=2))
    else:
        for entry in entries:
            shown = f"0x{entry['id']:04X}" if entry["known"] else "unknown"
            print(f"{shown:<8} {entry['cipher']}")
    return 0 if all(entry["known"] for entry in entries) else 1


def table_command(args) -> int:
    """Dump every spelling in table order."""
    for entry in SUITE_TABLE:
        if args.rfc_only and not entry.is_rfc:
            continue
        print(f"0x{entry.suite_id:04X} {decode_key(entry.key)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="TLS cipher suite name/id lookup")
    parser.add_argument("--verbose", action="store_true",
                        help="Log lookup misses (DEBUG level)")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    id_parser = subparsers.add_parser('id', help='Resolve cipher suite names to IANA ids')
    id_parser.add_argument("names", nargs="+",
                           help="Suite names (e.g., TLS_RSA_WITH_AES_128_CBC_SHA, AES128-SHA)")

    name_parser = subparsers.add_parser('name', help='Render IANA ids as names')
    name_parser.add_argument("ids", nargs="+", type=_parse_suite_id,
                             help="Suite ids, hex (0x002F) or decimal (47)")
    style = name_parser.add_mutually_exclusive_group()
    style.add_argument("--rfc", dest="prefer_rfc", action="store_true",
                       help="Prefer IANA TLS_... spellings")
    style.add_argument("--alias", dest="prefer_rfc", action="store_false",
                       help="Prefer OpenSSL-style aliases")
    name_parser.set_defaults(prefer_rfc=CONFIG["PREFER_RFC_NAMES"])
    name_parser.add_argument("--max-len", type=_parse_max_len, default=CONFIG["NAME_MAX_LEN"],
                             help=f"Longest name to render (default: {CONFIG['NAME_MAX_LEN']})")

    list_parser = subparsers.add_parser('list', help='Resolve each entry of a cipher list')
    list_parser.add_argument("cipher_list",
                             help="Cipher list separated by ':', ',', ';' or whitespace")
    list_parser.add_argument("--json", action="store_true",
                             help="Print entries as a JSON array")

    table_parser = subparsers.add_parser('table', help='Dump the cipher suite table')
    table_parser.add_argument("--rfc-only", action="store_true",
                              help="Only print IANA TLS_... spellings")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if args.command == 'id':
        return id_command(args)
    elif args.command == 'name':
        return name_command(args)
    elif args.command == 'list':
        return list_command(args)
    return table_command(args)


if __name__ == "__main__":
    sys.exit(main())
