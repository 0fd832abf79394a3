"""
PrimeVue MCP Command Line

Runs the extraction pipeline stages and the HTTP query API.

Usage:
    primevue-mcp build                 # all extractors, then merge
    primevue-mcp extract-api           # data/api.json
    primevue-mcp extract-docs          # data/docs.json (needs api.json)
    primevue-mcp extract-logic         # data/logic.json
    primevue-mcp extract-tokens        # data/tokens.json
    primevue-mcp merge                 # data/combined.json
    primevue-mcp serve --port 3000     # HTTP query API
    primevue-mcp init-config           # data/config.yaml with defaults
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from primevue_mcp import __version__
from primevue_mcp.configs import (
    create_default_config,
    get_config_path,
    get_dataset_paths,
    get_full_config,
    get_logger,
    setup_logging,
)
from primevue_mcp.exceptions import PrimeVueMCPError
from primevue_mcp.pipeline import (
    run_docs_extraction,
    run_logic_extraction,
    run_merge,
    run_signature_extraction,
    run_token_extraction,
)

logger = get_logger("cli")


def _resolve(args: argparse.Namespace) -> tuple[dict, dict[str, Path]]:
    """Merge command line overrides into runtime config and resolve data paths."""
    config = get_full_config()
    if getattr(args, "library_dir", None):
        config["library_dir"] = args.library_dir
    if getattr(args, "theme_dir", None):
        config["theme_dirs"] = list(args.theme_dir)

    data_path = Path(args.data_dir).resolve() if args.data_dir else None
    return config, get_dataset_paths(data_path)


def cmd_extract_api(args: argparse.Namespace) -> None:
    config, paths = _resolve(args)
    run_signature_extraction(config["library_dir"], paths["api"])


def cmd_extract_docs(args: argparse.Namespace) -> None:
    config, paths = _resolve(args)
    run_docs_extraction(
        paths["api"],
        paths["docs"],
        base_url=config["docs_base_url"],
        delay=config["docs_request_delay"],
    )


def cmd_extract_logic(args: argparse.Namespace) -> None:
    config, paths = _resolve(args)
    run_logic_extraction(config["library_dir"], paths["logic"])


def cmd_extract_tokens(args: argparse.Namespace) -> None:
    config, paths = _resolve(args)
    run_token_extraction(config["theme_dirs"], paths["tokens"])


def cmd_merge(args: argparse.Namespace) -> None:
    _, paths = _resolve(args)
    run_merge(paths)


def cmd_build(args: argparse.Namespace) -> None:
    """Run every extractor in order, then merge."""
    cmd_extract_api(args)
    if args.skip_docs:
        logger.info("Skipping documentation fetch")
    else:
        cmd_extract_docs(args)
    cmd_extract_logic(args)
    cmd_extract_tokens(args)
    cmd_merge(args)


def cmd_init_config(args: argparse.Namespace) -> None:
    if create_default_config():
        logger.info(f"Created {get_config_path()}")
    else:
        logger.info(f"Config already exists: {get_config_path()}")


def cmd_serve(args: argparse.Namespace) -> None:
    from primevue_mcp.catalog import configure_catalog
    from primevue_mcp.controllers.http import run_server

    config, paths = _resolve(args)
    configure_catalog(path=paths["combined"], ttl=config["cache_ttl"])
    run_server(host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="primevue-mcp",
        description="Extract PrimeVue component metadata and serve it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    # Options shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data-dir", help="Directory for the JSON datasets (default: ./data)")

    library = argparse.ArgumentParser(add_help=False)
    library.add_argument("--library-dir", help="PrimeVue package root (default: node_modules/primevue)")

    themes = argparse.ArgumentParser(add_help=False)
    themes.add_argument(
        "--theme-dir",
        action="append",
        help="Theme package root to scan for tokens (repeatable)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    sub = subparsers.add_parser("extract-api", parents=[common, library], help="Extract props, emits and slots")
    sub.set_defaults(func=cmd_extract_api)

    sub = subparsers.add_parser("extract-docs", parents=[common], help="Fetch titles, descriptions and examples")
    sub.set_defaults(func=cmd_extract_docs)

    sub = subparsers.add_parser("extract-logic", parents=[common, library], help="Extract logic signals")
    sub.set_defaults(func=cmd_extract_logic)

    sub = subparsers.add_parser("extract-tokens", parents=[common, themes], help="Extract design tokens")
    sub.set_defaults(func=cmd_extract_tokens)

    sub = subparsers.add_parser("merge", parents=[common], help="Merge stage outputs into combined.json")
    sub.set_defaults(func=cmd_merge)

    sub = subparsers.add_parser("build", parents=[common, library, themes], help="Run every stage, then merge")
    sub.add_argument("--skip-docs", action="store_true", help="Do not fetch the documentation site")
    sub.set_defaults(func=cmd_build)

    sub = subparsers.add_parser("init-config", help="Write a default config.yaml into the data directory")
    sub.set_defaults(func=cmd_init_config)

    sub = subparsers.add_parser("serve", parents=[common], help="Run the HTTP query API")
    sub.add_argument("--host", help="Bind address (default: HOST or 0.0.0.0)")
    sub.add_argument("--port", type=int, help="Port (default: PORT or 3000)")
    sub.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)
    setup_logging(debug=True if args.debug else None)

    try:
        args.func(args)
    except PrimeVueMCPError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
