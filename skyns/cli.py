#!/usr/bin/env python3
"""
skyns CLI

Point Skynet registry entries at skylinks and print the skyns:// URI to
publish as a Handshake record:
  skyns update - Write a skylink to a registry entry
  skyns skylink - Show every text form of a skylink
  skyns uri - Print the skyns:// URI of an entry without writing

Usage:
  skyns update --seed <seed> --data-key <key> <skylink>
  skyns skylink <skylink>
  skyns uri --seed <seed> --data-key <key>
"""

import argparse
import logging
import sys

import yaml

from .config import Config
from .errors import UpdateError
from .flow import RegistryUpdateFlow
from .skylink import parse_skylink


def load_config(args) -> Config:
    """Config file (if any) with command-line overrides applied."""
    try:
        config = Config.from_file(args.config) if args.config else Config()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config {args.config}: {e}", file=sys.stderr)
        sys.exit(1)
    return config.with_overrides(portal_url=args.portal, timeout=args.timeout)


def build_flow(config: Config) -> RegistryUpdateFlow:
    return RegistryUpdateFlow(
        config.create_client(),
        portal_url=config.portal_url,
        scheme=config.uri_scheme,
    )


def cmd_update(args):
    """Write the skylink and print the URI."""
    flow = build_flow(load_config(args))

    try:
        uri = flow.update(args.seed, args.data_key, args.skylink)
    except (UpdateError, ValueError) as e:
        print(f"Failed to update registry entry: {e}", file=sys.stderr)
        sys.exit(1)

    print(uri)


def cmd_skylink(args):
    """Print the Base64, Base32 and subdomain forms of a skylink."""
    config = load_config(args)

    try:
        skylink = parse_skylink(args.skylink)
    except (UpdateError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Base64: {skylink.to_base64()}")
    print(f"Base32: {skylink.to_base32()}")
    print(f"URL:    {skylink.subdomain_url(config.portal_url)}")


def cmd_uri(args):
    """Print the URI of an entry."""
    flow = build_flow(load_config(args))

    try:
        uri = flow.lookup_uri(args.seed, args.data_key)
    except (UpdateError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(uri)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="skyns",
        description="skyns - Point Skynet registry entries at skylinks",
    )
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--portal", help="Portal URL (default: https://siasky.net)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # update command
    update_parser = subparsers.add_parser("update", help="Point a registry entry at a skylink")
    update_parser.add_argument("skylink", help="Skylink (Base64, sia:, portal URL or Base32)")
    update_parser.add_argument("--seed", required=True, help="Seed the keypair is derived from")
    update_parser.add_argument("--data-key", required=True, help="Registry data key")

    # skylink command
    skylink_parser = subparsers.add_parser("skylink", help="Show the text forms of a skylink")
    skylink_parser.add_argument("skylink", help="Skylink in any accepted form")

    # uri command
    uri_parser = subparsers.add_parser("uri", help="Print the skyns:// URI of an entry")
    uri_parser.add_argument("--seed", required=True, help="Seed the keypair is derived from")
    uri_parser.add_argument("--data-key", required=True, help="Registry data key")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "update":
        cmd_update(args)
    elif args.command == "skylink":
        cmd_skylink(args)
    elif args.command == "uri":
        cmd_uri(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
