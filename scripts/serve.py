#!/usr/bin/env python3
"""
Run the mall directory API under uvicorn.

Usage:
  python scripts/serve.py [--host 0.0.0.0] [--port 3000] [--reload]

Host and port default to HOST / PORT from the environment.
"""
from __future__ import annotations

import argparse
import logging

import uvicorn

from mall.core.config import get_settings


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Run the mall directory API")
    ap.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = ap.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "mall.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
