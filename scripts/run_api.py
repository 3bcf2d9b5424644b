#!/usr/bin/env python3
"""
Serve the studio API with uvicorn.
Host and port come from `API_HOST` / `API_PORT` unless given on the command line.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from studio_api.api.api_config import get_api_config


def parse_args() -> argparse.Namespace:
    config = get_api_config()
    parser = argparse.ArgumentParser(description="Run the studio API")
    parser.add_argument("--host", default=config.host)
    parser.add_argument("--port", type=int, default=config.port)
    parser.add_argument("--reload", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    uvicorn.run(
        "studio_api.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
