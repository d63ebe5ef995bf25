#!/usr/bin/env python3
"""
SlideREPL CLI

Usage:
    sliderepl                                  # Serve slides.go on 127.0.0.1:3999
    sliderepl --http 0.0.0.0:8080              # Listen on another address
    sliderepl --slides talk.go                 # Use another slides file
    sliderepl --html                           # Send program output as raw HTML
    sliderepl --static talk.html               # Write all slides to one HTML file and exit
    sliderepl -http :8080 -slides talk.go      # Single-dash spellings work too
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from sliderepl.core import Settings, get_settings, setup_logging

logger = logging.getLogger(__name__)


def parse_listen_address(value: str) -> tuple[str, int]:
    """Split a host:port listen address."""
    host, sep, port = value.rpartition(":")
    if not sep or not port.isdigit():
        raise argparse.ArgumentTypeError(f"expected host:port, got {value!r}")
    return host or "127.0.0.1", int(port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sliderepl",
        description="Present Go slides with a compile-and-run editor",
    )
    parser.add_argument(
        "-http", "--http",
        type=parse_listen_address,
        help="host:port to listen on",
    )
    parser.add_argument(
        "-html", "--html",
        action="store_true",
        default=None,
        help="render program output as HTML",
    )
    parser.add_argument(
        "-slides", "--slides",
        type=Path,
        help="slides file to read in",
    )
    parser.add_argument(
        "-static", "--static",
        type=Path,
        help="write slides to a static HTML file",
    )
    parser.add_argument(
        "-debug", "--debug",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def apply_arguments(settings: Settings, args: argparse.Namespace) -> Settings:
    """Override settings with the flags given on the command line."""
    if args.http is not None:
        settings.host, settings.port = args.http
    if args.html is not None:
        settings.html_output = args.html
    if args.slides is not None:
        settings.slides_file = args.slides
    if args.static is not None:
        settings.static_html = args.static
    if args.debug:
        settings.debug = True
    return settings


def write_static(settings: Settings) -> None:
    """Export every slide to the configured static HTML file."""
    from sliderepl.services.slides import SlideDeckService, export_static

    deck = SlideDeckService.from_file(settings.slides_file)
    print(f"Writing to file {settings.static_html}")
    export_static(deck.slides, settings.static_html)


def serve(settings: Settings) -> None:
    """Run the HTTP server until interrupted."""
    import uvicorn

    from sliderepl.main import create_app

    print(f"Listening on {settings.http_listen}")
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_arguments(get_settings(), args)
    setup_logging(logging.DEBUG if settings.debug else logging.INFO)

    try:
        if settings.static_html is not None:
            write_static(settings)
        else:
            serve(settings)
    except OSError as e:
        logger.error(f"Fatal: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
