# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Inspect and manage a directory of persisted .edmx models.
#
# COMMANDS:
# ---------
# 1. Show where a consumer type's model lives:
#    python -m modelstore.cli path MyApp.BlogContext
#
# 2. Load a model and print it as JSON:
#    python -m modelstore.cli show MyApp.BlogContext
#
# 3. List the cached consumer types:
#    python -m modelstore.cli list
#
# 4. Delete every cached model:
#    python -m modelstore.cli reset --confirm
#
# OPTIONS:
# --------
#   --dir DIR   Override MODEL_STORE_DIR
#
# EXIT CODES:
# -----------
#   0 success, 1 cache miss / nothing done, 2 unreadable model
#
# ==============================================

import argparse
import json
import sys
from typing import List, Optional

from modelstore.config import get_config
from modelstore.errors import ModelDeserializationError
from modelstore.persistence import FileModelStore, FILE_EXTENSION


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modelstore",
        description="Inspect persisted compiled models"
    )
    parser.add_argument("--dir", help="Model store directory (default: MODEL_STORE_DIR)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    path_parser = subparsers.add_parser("path", help="Print the file path for a consumer type")
    path_parser.add_argument("key", help="Fully-qualified consumer type name")

    show_parser = subparsers.add_parser("show", help="Load a model and print it as JSON")
    show_parser.add_argument("key", help="Fully-qualified consumer type name")

    subparsers.add_parser("list", help="List cached consumer types")

    reset_parser = subparsers.add_parser("reset", help="Delete all cached models")
    reset_parser.add_argument("--confirm", action="store_true", help="Actually delete")

    return parser


def _open_store(args: argparse.Namespace) -> FileModelStore:
    config = get_config().store
    return FileModelStore(
        args.dir or config.location,
        indent=config.indent,
        atomic_writes=config.atomic_writes
    )


def _cached_files(store: FileModelStore) -> list:
    if not store.location.is_dir():
        return []
    return sorted(store.location.glob(f"*{FILE_EXTENSION}"))


def cmd_path(store: FileModelStore, args: argparse.Namespace) -> int:
    print(store.get_file_path(args.key))
    return 0


def cmd_show(store: FileModelStore, args: argparse.Namespace) -> int:
    try:
        model = store.try_load(args.key)
    except ModelDeserializationError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 2

    if model is None:
        print(f"No stored model for '{args.key}' in {store.location}")
        return 1

    print(json.dumps(model.to_dict(), indent=2))
    return 0


def cmd_list(store: FileModelStore, args: argparse.Namespace) -> int:
    files = _cached_files(store)
    for file_path in files:
        print(file_path.name[:-len(FILE_EXTENSION)])
    print(f"{len(files)} cached model(s) in {store.location}")
    return 0


def cmd_reset(store: FileModelStore, args: argparse.Namespace) -> int:
    files = _cached_files(store)
    if not args.confirm:
        print(f"Would delete {len(files)} file(s) from {store.location}; pass --confirm")
        return 1

    for file_path in files:
        file_path.unlink()
        print(f"🗑️  Deleted {file_path}")
    print("All cached models cleared!")
    return 0


COMMANDS = {
    "path": cmd_path,
    "show": cmd_show,
    "list": cmd_list,
    "reset": cmd_reset,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    store = _open_store(args)
    try:
        return COMMANDS[args.command](store, args)
    except ValueError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
