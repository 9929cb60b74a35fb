"""
CLI Serve Command

Run the fixture comment API under uvicorn.

Usage:
    comment serve [--host 127.0.0.1] [--port 8000]
"""

from __future__ import annotations

import logging
from argparse import Namespace

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0


def serve_cmd(args: Namespace) -> int:
    """Handle serve command."""
    import uvicorn

    logger.info(f"Serving fixture API on http://{args.host}:{args.port}/")
    uvicorn.run("api.app:app", host=args.host, port=args.port, reload=args.reload)
    return EXIT_SUCCESS
