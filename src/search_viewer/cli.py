"""CLI/bootstrap helpers for the search viewer application."""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from search_viewer.action_messages import build_actionable_error
from search_viewer.config import UserConfig, load_config, normalize_server_url
from search_viewer.models import CONFIG_APP_NAME, View
from search_viewer.navigation import build_search_location, encode_query

logger = logging.getLogger(__name__)


def _resolve_start_location(args: argparse.Namespace) -> str:
    """Build the initial location from LOCATION, --view and --query.

    ``--query`` and ``--view`` take precedence over the positional location.
    """
    if args.query is not None and args.view is not None:
        encoded = encode_query(args.query)
        if not encoded:
            return f"/?view={args.view}"
        return f"/?view={args.view}&q={encoded}"
    if args.query is not None:
        return build_search_location(args.query)
    if args.view is not None:
        return f"/?view={args.view}"
    return args.location or "/"


def _apply_overrides(args: argparse.Namespace, config: UserConfig) -> UserConfig | int:
    """Apply command-line overrides on top of the loaded config."""
    if args.server is not None:
        try:
            config.server_url = normalize_server_url(args.server)
        except ValueError as e:
            print(
                build_actionable_error(
                    "use the given --server",
                    why=str(e),
                    next_step="pass an origin such as http://localhost:8080",
                ),
                file=sys.stderr,
            )
            return 1
    if args.no_open:
        config.open_in_browser = False
    return config


def _configure_logging(debug: bool) -> None:
    """Configure logging. When debug=True, logs to file at DEBUG level."""
    if not debug:
        # Default: suppress all logging (TUI captures stderr)
        logging.disable(logging.CRITICAL)
        return

    log_dir = Path(user_config_dir(CONFIG_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "debug.log"

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG)


def _validate_interactive_tty() -> bool:
    """Return True when stdin/stdout are interactive terminals."""
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def main(
    argv: list[str] | None = None,
    *,
    load_config_fn: Callable[[], UserConfig] = load_config,
    configure_logging_fn: Callable[[bool], None] = _configure_logging,
    validate_interactive_tty_fn: Callable[[], bool] = _validate_interactive_tty,
    app_factory: Callable[..., Any] | None = None,
) -> int:
    """Main entry point. Returns exit code."""
    parser = argparse.ArgumentParser(
        description="Search a personal search server and browse your session in a TUI"
    )
    parser.add_argument(
        "location",
        nargs="?",
        default="/",
        help="Initial location, for example '/?view=favorites' or '/?q=cats' (default: /)",
    )
    parser.add_argument(
        "-q",
        "--query",
        type=str,
        default=None,
        help="Start with a search for this text",
    )
    parser.add_argument(
        "--view",
        choices=[view.value for view in View],
        default=None,
        help="Start in this view",
    )
    parser.add_argument(
        "--server",
        type=str,
        default=None,
        help="Server origin (default: config value, http://localhost:8080)",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Record visits without opening them in the system browser",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to file (~/.config/search-viewer/debug.log)",
    )
    args = parser.parse_args(argv)

    configure_logging_fn(args.debug)
    logger.debug("search-viewer starting, argv=%r", argv)

    config = load_config_fn()
    result = _apply_overrides(args, config)
    if isinstance(result, int):
        return result
    config = result
    location = _resolve_start_location(args)

    if not validate_interactive_tty_fn():
        print(
            "Error: search-viewer requires an interactive TTY for the full UI.",
            file=sys.stderr,
        )
        print("Next steps:", file=sys.stderr)
        print("  - Run search-viewer directly in a terminal session", file=sys.stderr)
        print("  - Use --help for command documentation", file=sys.stderr)
        return 2

    if app_factory is None:
        from search_viewer.app import SearchViewer as _SearchViewer

        app_factory = _SearchViewer

    logger.debug("Starting at %r against %s", location, config.server_url)
    app = app_factory(location, config=config)
    app.run()
    return 0


__all__ = [
    "_apply_overrides",
    "_configure_logging",
    "_resolve_start_location",
    "_validate_interactive_tty",
    "main",
]
