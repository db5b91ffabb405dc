#!/usr/bin/env python3
"""
layerkv Server Entry Point

Serves a store over HTTP: GET, PUT and DELETE on /<key>.

Usage:
    python -m layerkv.server                        # Default settings (127.0.0.1:8080)
    python -m layerkv.server --port 9000            # Custom port
    python -m layerkv.server -d /var/lib/kv         # Custom root directory
    python -m layerkv.server --backend memory       # Non-persistent store
    python -m layerkv.server --capacity 4096        # Larger cache
    python -m layerkv.server --debug                # Enable debug logging

Environment Variables:
    LAYERKV_HOST        - Server bind address
    LAYERKV_PORT        - Server port
    LAYERKV_ROOT        - Root directory for file-backed stores
    LAYERKV_BACKEND     - memory, file, lru or layered
    LAYERKV_CAPACITY    - Cache size in entries
    LAYERKV_DEBUG       - Enable debug mode (true/false)
    LAYERKV_LOG_LEVEL   - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from .api import create_app
from .client import BACKENDS, open_store
from .config.settings import settings
from .errors import KVError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="layerkv: Embeddable Key-Value Store Server",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--host",
        type=str,
        default=settings.HOST,
        help="Host address to bind to",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help="Port number to listen on",
    )

    parser.add_argument(
        "-d", "--root",
        type=str,
        default=settings.ROOT,
        help="Root directory for file and layered backends",
    )

    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=settings.BACKEND,
        help="Storage backend",
    )

    parser.add_argument(
        "--capacity",
        type=int,
        default=settings.CAPACITY,
        help="Maximum number of cached entries (lru and layered backends)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else settings.LOG_LEVEL.upper()

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the server."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    try:
        store = open_store(args.backend, root=args.root, capacity=args.capacity)
    except KVError as e:
        logger.error(f"Cannot open {args.backend} store: {e}")
        sys.exit(1)

    app = create_app(store)

    logger.info("Starting layerkv server")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")
    logger.info(f"  Backend: {args.backend}")
    if args.backend in ("file", "layered"):
        logger.info(f"  Root: {args.root}")
    if args.backend in ("lru", "layered"):
        logger.info(f"  Capacity: {args.capacity}")

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level="debug" if args.debug else "info",
    )


if __name__ == "__main__":
    main()
