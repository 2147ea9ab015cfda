# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for rest-options.

Usage:
    python -m rest_options serve
    python -m rest_options generate-key
    python -m rest_options set-restrictions allow_only --list-file names.txt

Configuration comes from the REST_OPTIONS_* environment variables
(see :class:`rest_options.config.ServiceConfig`).

Exit codes:
    0: Success
    1: Failure (details on stderr)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import uvicorn

from rest_options.admin import AdminRouter, RegenerateApiKey, SaveRestrictionPolicy
from rest_options.app import create_app
from rest_options.config import ServiceConfig, create_store
from rest_options.exceptions import RestOptionsError
from rest_options.restrictions import RestrictionType

logger = logging.getLogger("rest_options")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rest-options")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("serve", help="Run the HTTP service")
    sub.add_parser("generate-key", help="Generate a new API key and print it")

    restrict = sub.add_parser("set-restrictions", help="Save the restriction policy")
    restrict.add_argument("restriction_type", choices=[t.value for t in RestrictionType])
    restrict.add_argument(
        "--list-file",
        type=Path,
        help="File with one option name per line",
    )
    return parser


async def _run_command(config: ServiceConfig, args: argparse.Namespace) -> None:
    store = create_store(config.store)
    try:
        router = AdminRouter(store)
        if args.command == "generate-key":
            result = await router.dispatch(RegenerateApiKey())
            print(result.api_key)
        elif args.command == "set-restrictions":
            text = args.list_file.read_text(encoding="utf-8") if args.list_file else ""
            policy = await router.dispatch(
                SaveRestrictionPolicy(restriction_type=args.restriction_type, restriction_list=text)
            )
            print(f"{policy.mode.value}: {', '.join(policy.items) or '(empty list)'}")
    finally:
        await store.close()


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = _build_parser().parse_args(argv)

    try:
        config = ServiceConfig.from_env()
        _configure_logging(config.debug)

        if args.command == "serve":
            logger.info(f"Starting rest-options on {config.host}:{config.port}")
            uvicorn.run(create_app(config), host=config.host, port=config.port)
        else:
            asyncio.run(_run_command(config, args))
        return 0

    except (RestOptionsError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
