#!/usr/bin/env python3
"""Command-line access to the cars API.

Examples::

    cars_cli.py list
    cars_cli.py get 42
    cars_cli.py create make=Ford model=Focus year=2019
    cars_cli.py update 42 year=2020
    cars_cli.py delete 42

The base URL comes from ``--base-url`` or ``CARS_BASE_URL``.
Values that parse as JSON (numbers, booleans, null) are sent typed;
anything else is sent as a string.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from pycars import Car, CarsClient, CarsConfig, CarsError, CarsValidationError


def _parse_fields(pairs: list[str]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise SystemExit(f"expected FIELD=VALUE, got {pair!r}")
        try:
            fields[key] = json.loads(value)
        except json.JSONDecodeError:
            fields[key] = value
    return fields


def _print(value: Any) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False, default=str))


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    config = CarsConfig.from_env(**overrides)

    async with CarsClient(config) as client:
        try:
            if args.command == "list":
                _print([car.to_payload() for car in await client.list_cars()])
            elif args.command == "get":
                _print((await client.get_car(args.id)).to_payload())
            elif args.command == "create":
                created = await client.create_car(Car.model_validate(_parse_fields(args.fields)))
                _print(created.to_payload())
            elif args.command == "update":
                current = await client.get_car(args.id)
                updated = await client.update_car(current.with_fields(**_parse_fields(args.fields)))
                _print(updated.to_payload())
            elif args.command == "delete":
                await client.delete_car(args.id)
                _print({"deleted": args.id})
        except CarsValidationError as exc:
            _print({"errors": exc.errors})
            return 1
        except CarsError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--base-url", help="API root URL (default: $CARS_BASE_URL)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable DEBUG logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list all cars")
    get = sub.add_parser("get", help="show one car")
    get.add_argument("id")
    create = sub.add_parser("create", help="create a car")
    create.add_argument("fields", nargs="+", metavar="FIELD=VALUE")
    update = sub.add_parser("update", help="change fields of a car")
    update.add_argument("id")
    update.add_argument("fields", nargs="+", metavar="FIELD=VALUE")
    delete = sub.add_parser("delete", help="delete a car")
    delete.add_argument("id")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
