#!/usr/bin/env python3
"""
recdb CLI

Runs a single record operation against the store directory and prints the
line it wrote to the operation log.

Commands:

    get <file> <key>                print record[key]
    set <file> <key> <value>        set record[key] (use --json to pass a JSON value)
    remove <file> <key>             delete record[key]
    create <file>                   create a record holding {}
    delete <file>                   delete a record file
    merge                           write every record into merge.json
    union <file_a> <file_b>         keys present in either record
    intersect <file_a> <file_b>     keys present in both records
    difference <file_a> <file_b>    keys present in exactly one record
    reset                           rewrite the seed records and empty the log
    show-log                        print the operation log

Paths default to RECDB_STORE_DIR / RECDB_LOG_PATH (see configs/settings.py).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path when running as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from configs.settings import settings
from exceptions.exceptions import ResetException
from runtime.models.record_models import OperationResult
from runtime.service.record_service import RecordService


def _report(result: OperationResult) -> int:
    """Print the logged message; return the process exit status."""
    print(f"[recdb] {result.message}")
    return 0 if result.ok else 1


def _parse_value(raw: str, as_json: bool):
    if not as_json:
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"[recdb] --json value is not valid JSON: {exc}")


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


async def run_command(service: RecordService, args: argparse.Namespace) -> int:
    command: str = args.command

    if command == "get":
        return _report(await service.get(args.file, args.key))
    if command == "set":
        return _report(await service.set(args.file, args.key, args.value))
    if command == "remove":
        return _report(await service.remove(args.file, args.key))
    if command == "create":
        return _report(await service.create_file(args.file))
    if command == "delete":
        return _report(await service.delete_file(args.file))
    if command == "merge":
        return _report(await service.merge_data())
    if command == "union":
        return _report(await service.union(args.file_a, args.file_b))
    if command == "intersect":
        return _report(await service.intersect(args.file_a, args.file_b))
    if command == "difference":
        return _report(await service.difference(args.file_a, args.file_b))
    if command == "reset":
        try:
            await service.reset()
        except ResetException as exc:
            print(f"[recdb] ERROR {exc}")
            return 1
        print(f"[recdb] Reset {service.store.store_dir} and emptied {service.log_store.log_path}")
        return 0
    if command == "show-log":
        for entry in service.entries():
            print(f"{entry.timestamp}  {entry.message}")
        return 0

    raise ValueError(f"Unknown command: {command}")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="recdb: file-backed JSON record store")
    parser.add_argument(
        "--store-dir",
        default=str(settings.store_dir),
        help="Directory holding the record files (default: RECDB_STORE_DIR or 'db')",
    )
    parser.add_argument(
        "--log-path",
        default=str(settings.log_path),
        help="Operation log file (default: RECDB_LOG_PATH or 'log.txt')",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # get
    p_get = subparsers.add_parser("get", help="Log the value of record[key]")
    p_get.add_argument("file", help="Record file name, e.g. scott.json")
    p_get.add_argument("key")

    # set
    p_set = subparsers.add_parser("set", help="Set record[key] and rewrite the record")
    p_set.add_argument("file", help="Record file name, e.g. scott.json")
    p_set.add_argument("key")
    p_set.add_argument("value")
    p_set.add_argument(
        "--json",
        action="store_true",
        help="Parse value as JSON instead of storing it as a string",
    )

    # remove
    p_remove = subparsers.add_parser("remove", help="Delete record[key] and rewrite the record")
    p_remove.add_argument("file", help="Record file name, e.g. scott.json")
    p_remove.add_argument("key")

    # create / delete
    p_create = subparsers.add_parser("create", help="Create a record holding {}")
    p_create.add_argument("file", help="Record file name, e.g. new.json")
    p_delete = subparsers.add_parser("delete", help="Delete a record file")
    p_delete.add_argument("file", help="Record file name, e.g. scott.json")

    # merge
    subparsers.add_parser("merge", help="Merge every record into the merge file")

    # key-set comparisons
    for name, help_text in (
        ("union", "Keys present in either record"),
        ("intersect", "Keys present in both records"),
        ("difference", "Keys present in exactly one record"),
    ):
        p_cmp = subparsers.add_parser(name, help=help_text)
        p_cmp.add_argument("file_a")
        p_cmp.add_argument("file_b")

    # reset / show-log
    subparsers.add_parser("reset", help="Rewrite the seed records and empty the log")
    subparsers.add_parser("show-log", help="Print the operation log")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "set":
        args.value = _parse_value(args.value, args.json)

    try:
        logging.basicConfig(level=settings.log_level)
        service = RecordService.from_settings(
            settings,
            store_dir=args.store_dir,
            log_path=args.log_path,
        )
    except RuntimeError as exc:
        parser.error(str(exc))
    return asyncio.run(run_command(service, args))


if __name__ == "__main__":
    sys.exit(main())
