from __future__ import annotations

import argparse
import dataclasses
import importlib
import logging
import sys
from typing import Any, Optional, Sequence

from configstore.errors import ConfigStoreError, SchemaError
from configstore.fields import describe
from configstore.gate import LoadGate, load_once
from configstore.logging import LoggingSettings, init_logging
from configstore.report import print_config

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="configstore", description="Inspect environment-backed configuration records")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: print
    print_parser = subparsers.add_parser("print", help="Load a record from the environment and print it")
    print_parser.add_argument("target", help="Record class as 'package.module:ClassName'")
    print_parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Skip loading from the environment and print the zero-valued record",
    )

    # Command: describe
    describe_parser = subparsers.add_parser("describe", help="List the fields a record reads from the environment")
    describe_parser.add_argument("target", help="Record class as 'package.module:ClassName'")

    return parser


def _import_target(target: str) -> Any:
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise SchemaError(f"Target must look like 'package.module:ClassName', got: {target}")
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        raise SchemaError(f"Cannot import module '{module_name}'") from e
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise SchemaError(f"Module '{module_name}' has no attribute '{attr}'") from e


def _instantiate(target: Any) -> Any:
    if not (isinstance(target, type) and dataclasses.is_dataclass(target)):
        raise SchemaError(f"Target must be a dataclass record, got: {target!r}")
    try:
        return target()
    except TypeError as e:
        raise SchemaError(f"Record {target.__name__} cannot be created without arguments: {e}") from e


def _print(args: argparse.Namespace) -> None:
    record = _instantiate(_import_target(args.target))
    load_once(record, args.test_mode, LoadGate())
    print_config(record)


def _describe(args: argparse.Namespace) -> None:
    for descriptor in describe(_import_target(args.target)):
        secret = " secret" if descriptor.secret else ""
        sys.stdout.write(
            f"{descriptor.name}: {descriptor.kind.value} env={descriptor.env} "
            f"default={descriptor.default!r}{secret}\n"
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        init_logging(LoggingSettings(level=args.log_level))
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.command == "print":
            _print(args)
        elif args.command == "describe":
            _describe(args)
    except SchemaError as e:
        logger.error("Invalid configuration record: %s", e)
        return 2
    except ConfigStoreError as e:
        logger.error("Configuration could not be loaded: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
