"""Entry point for running the weather board as a module."""

import argparse
import atexit
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import ValidationError

from .app import WeatherBoardApp
from .models.config import Config

# Global reference for signal handlers
_app: WeatherBoardApp | None = None
_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", log_dir: Path | str = "logs") -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the rotating log file
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    log_dir = Path(log_dir)
    try:
        log_dir.mkdir(exist_ok=True)
        # Rotate at 10MB, keep 5 backup files
        file_handler = RotatingFileHandler(
            log_dir / "weatherboard.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)
    except (PermissionError, OSError):
        pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def _signal_handler(signum: int, frame: object) -> None:
    """Handle shutdown signals gracefully."""
    signal_name = signal.Signals(signum).name
    _logger.info(f"Received {signal_name}, shutting down gracefully...")

    if _app is not None:
        _app.exit()


def _cleanup() -> None:
    _logger.info("Weather Board shutdown complete")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown."""
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)
    atexit.register(_cleanup)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Weather Board - Weather cards and event recommendations for areas of Kigali"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    global _app

    args = build_parser().parse_args(argv)

    if args.version:
        from . import __version__

        print(f"Weather Board v{__version__}")
        sys.exit(0)

    try:
        config = Config.load_or_default(args.config)
    except (ValidationError, ValueError) as e:
        print(f"Invalid config file {args.config}: {e}", file=sys.stderr)
        sys.exit(1)

    log_level = "DEBUG" if args.verbose else config.settings.log_level
    setup_logging(log_level)
    setup_signal_handlers()

    _logger.info("Starting Weather Board")

    if not args.config.exists():
        _logger.info(f"Config file not found: {args.config}, using defaults (mock API)")

    _app = WeatherBoardApp(config=config)
    _app.run()


if __name__ == "__main__":
    main()
