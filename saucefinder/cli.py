#!/usr/bin/env python3
"""
cli.py - Entry point for SAUCEFINDER
Find the original source of an image with SauceNAO.
"""

import argparse
import asyncio
import sys
import time
from pathlib import Path
from typing import Optional

from rich.console import Console

import saucefinder as pkg
from . import logger
from .config import SauceFinderConfig, load_config
from .search.formatters import SEARCH_FAILED_MESSAGE, emit, format_reply_lines
from .search.search_service import SauceSearchService

console = Console()
_CLI_SESSION_START_MONOTONIC = time.monotonic()


def _ui_info(message: str) -> None:
    console.print(f"[cyan][INFO][/cyan] {message}")


def _ui_warn(message: str) -> None:
    console.print(f"[yellow][WARNING][/yellow] {message}")


def _ui_error(message: str) -> None:
    console.print(f"[red][ERROR][/red] {message}")


def _reset_cli_session_timer() -> None:
    global _CLI_SESSION_START_MONOTONIC
    _CLI_SESSION_START_MONOTONIC = time.monotonic()


def _format_elapsed_runtime(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.1f}s"
    if seconds < 3_600:
        return f"{seconds / 60:.1f}m"
    return f"{seconds / 3_600:.1f}h"


def _ui_goodbye_with_elapsed() -> None:
    elapsed = max(0.0, time.monotonic() - _CLI_SESSION_START_MONOTONIC)
    _ui_info(f"Goodbye! Elapsed {_format_elapsed_runtime(elapsed)}")


def resolve_config_path(args_config: Optional[str]) -> Path:
    if args_config:
        p = Path(args_config).expanduser()
        if p.is_dir():
            p = p / "config.toml"
        return p

    cwd_candidate = Path.cwd() / "config.toml"
    if cwd_candidate.exists():
        return cwd_candidate

    repo_root = Path(__file__).resolve().parent.parent
    root_candidate = repo_root / "config.toml"
    if root_candidate.exists() and (repo_root / "pyproject.toml").exists():
        return root_candidate
    return cwd_candidate


async def run_search(config: SauceFinderConfig, image_url: str) -> bool:
    """Search one image and print the reply. Returns False when the search failed."""
    async with SauceSearchService.from_config(config) as service:
        result = await service.search(image_url)

    if result is None:
        _ui_error(SEARCH_FAILED_MESSAGE)
        return False

    for line in format_reply_lines(result, config.saucenao.low_similarity_warning_level):
        emit(line)
    return True


def show_help(parser: argparse.ArgumentParser) -> None:
    print(f"SAUCEFINDER v{getattr(pkg, '__version__', '0.0.0')} - Find the source of an image")
    print()
    parser.print_help()


def main():
    """Entry point"""
    _reset_cli_session_timer()
    parser = argparse.ArgumentParser(add_help=False)
    for args, kwargs in (
        (("-h", "--help"), {"action": "store_true", "help": "Show help"}),
        (("-c", "--config"), {"metavar": "PATH", "help": "Path to config.toml (file or directory)"}),
        (("-l", "--log-file"), {"metavar": "FILE", "help": "Also write output to this log file"}),
        (("-d", "--debug"), {"action": "store_true", "help": "Debug mode with API calls, responses, timestamps"}),
    ):
        parser.add_argument(*args, **kwargs)
    parser.add_argument('image_url', nargs='?', help='Publicly reachable URL of the image to search')

    try:
        args = parser.parse_args()
        if args.help or not args.image_url:
            show_help(parser)
            sys.exit(0)

        config = load_config(resolve_config_path(args.config))
        if not config.saucenao.enable:
            _ui_warn("SauceNAO search is disabled in the configuration.")
            sys.exit(1)
        if not config.saucenao.api_key:
            _ui_error("SauceNAO API key is not configured.")
            sys.exit(1)

        log_file = Path(args.log_file).expanduser() if args.log_file else None
        with logger.SauceFinderLogger(log_file=log_file, debug=args.debug or config.debug_mode) as log:
            logger.set_logger(log)
            ok = asyncio.run(run_search(config, args.image_url))
        sys.exit(0 if ok else 1)
    except KeyboardInterrupt:
        _ui_goodbye_with_elapsed()
        sys.exit(0)
    except Exception as e:
        _ui_error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
