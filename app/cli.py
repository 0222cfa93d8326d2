"""
Lango CLI - command-line interface for translation management.

Usage:
    lango serve --port 4400
    lango extract
    lango extract --patterns "src/**/*.tsx"
    lango check-unused
    lango generate
    lango translate --keys common_save common_cancel
    lango status --filter missing --search dashboard
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import uvicorn
from dotenv import load_dotenv

from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings, get_translation_client
from modules.translations.config import ProjectConfig, load_project_config
from modules.translations.errors import TranslationsError
from modules.translations.extractor import check_unused_keys, extract_from_codebase
from modules.translations.generator import generate_translation_sets
from modules.translations.status import (
    StatusFilter,
    build_status_report,
    filter_statuses,
    sort_statuses,
    summarize,
)
from modules.translations.store import TranslationStore
from modules.translations.translator import translate_missing_strings

logger = get_module_logger()


def _load_config(args) -> ProjectConfig:
    path = args.config or get_settings().project.CONFIG_PATH
    return load_project_config(Path(path))


def cmd_serve(args) -> int:
    """Start the HTTP API."""
    settings = get_settings()
    host = args.host or settings.server.HOST
    port = args.port or settings.server.PORT
    print(f"Lango API listening on http://{host}:{port}")
    uvicorn.run("main:server_app", host=host, port=port, log_level="warning")
    return 0


def cmd_extract(args) -> int:
    """Scan the codebase and register new keys."""
    config = _load_config(args)
    store = TranslationStore.from_config(config)
    summary = extract_from_codebase(config, store, args.patterns)

    print(f"Found {len(summary.extracted)} translation calls")
    print(f"Added {summary.added} new keys ({summary.existing} already registered)")
    return 0


def cmd_check_unused(args) -> int:
    """Record which stored keys no longer appear in the codebase."""
    config = _load_config(args)
    store = TranslationStore.from_config(config)
    report = check_unused_keys(config, store, args.patterns)

    print(f"{len(report.unused_keys)} of {report.total_keys} keys are unused")
    for key in report.unused_keys:
        print(f"  {key}")
    return 0


def cmd_generate(args) -> int:
    """Write locale bundles for every configured set."""
    config = _load_config(args)
    store = TranslationStore.from_config(config)
    files = generate_translation_sets(config, store)

    for item in files:
        print(f"{item.path} ({item.key_count} keys)")
    print(f"Generated {len(files)} translation files")
    return 0


def cmd_translate(args) -> int:
    """Fill absent values with AI translations awaiting approval."""
    config = _load_config(args)
    store = TranslationStore.from_config(config)
    client = get_translation_client()
    results = translate_missing_strings(
        config,
        store,
        client,
        keys=args.keys,
        batch_size=get_settings().openai.BATCH_SIZE,
    )

    print(f"Translated {len(results)} strings (pending approval)")
    return 0


def cmd_status(args) -> int:
    """Print per-key status and the overall counts."""
    config = _load_config(args)
    store = TranslationStore.from_config(config)
    report = build_status_report(
        store.read(),
        config.master_language,
        config.available_languages,
        config.classify,
        config.complete_max_absent,
    )

    listed = sort_statuses(
        filter_statuses(report, StatusFilter(args.filter), args.search)
    )
    for item in listed:
        flags = []
        if item.pending:
            flags.append("pending")
        if item.unused:
            flags.append("unused")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        print(f"{item.status.value:<8} {item.group:<8} {item.key}{suffix}")

    summary = summarize(report)
    print(
        f"Total: {summary.total}  complete: {summary.complete}  "
        f"partial: {summary.partial}  missing: {summary.missing}  "
        f"pending: {summary.pending}  unused: {summary.unused}"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lango",
        description="Lango - translation key extraction, review and generation",
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="Project file (default: LANGO_CONFIG_PATH)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # === Serve ===
    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")
    serve_parser.add_argument("--host", help="Interface to bind")
    serve_parser.add_argument("--port", type=int, help="Port to listen on")

    # === Extract ===
    extract_parser = subparsers.add_parser("extract", help="Register keys found in the codebase")
    extract_parser.add_argument("--patterns", nargs="+", help="Glob patterns to scan")

    # === Check unused ===
    unused_parser = subparsers.add_parser("check-unused", help="Flag keys no longer used")
    unused_parser.add_argument("--patterns", nargs="+", help="Glob patterns to scan")

    # === Generate ===
    subparsers.add_parser("generate", help="Write locale bundles")

    # === Translate ===
    translate_parser = subparsers.add_parser("translate", help="AI-translate missing values")
    translate_parser.add_argument("--keys", nargs="+", help="Only translate these keys")

    # === Status ===
    status_parser = subparsers.add_parser("status", help="Show translation status")
    status_parser.add_argument(
        "--filter",
        choices=[item.value for item in StatusFilter],
        default=StatusFilter.ALL.value,
        help="Only list keys with this status",
    )
    status_parser.add_argument("--search", help="Case-insensitive text search")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "serve": cmd_serve,
        "extract": cmd_extract,
        "check-unused": cmd_check_unused,
        "generate": cmd_generate,
        "translate": cmd_translate,
        "status": cmd_status,
    }

    try:
        return commands[args.command](args)
    except (TranslationsError, ValueError) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
