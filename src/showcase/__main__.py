"""
Demo runner.
Run: python -m showcase [--list] [demo-id ...] (from repo root, with .env or env vars set).
"""
import argparse
import logging
import sys
from pathlib import Path

from showcase.catalog import load_catalog, select
from showcase.config import load_env_file, load_settings
from showcase.runner import run_demos

# Repo root: from src/showcase/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

logger = logging.getLogger("showcase")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showcase",
        description="Run the language feature demos in catalog order.",
    )
    parser.add_argument("ids", nargs="*", help="demo ids to run (default: all)")
    parser.add_argument("--list", action="store_true", help="list demo ids and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    load_env_file(_REPO_ROOT)
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.getLevelName(settings.log_level),
    )

    entries = load_catalog()
    if args.list:
        for entry in entries:
            print(f"{entry.id}\t{entry.title}")
        return 0
    if args.ids:
        try:
            entries = select(entries, args.ids)
        except KeyError as e:
            print(f"Unknown demo id(s): {e.args[0]}", file=sys.stderr)
            return 2

    logger.debug("Running %d demos against %s", len(entries), settings.api_base_url)
    failed = run_demos(entries, settings)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
