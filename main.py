#!/usr/bin/env python3
"""
Developers API -- launcher.

Usage:
  python main.py
  python main.py --port 8080
  python main.py --host 127.0.0.1 --reload

Environment variables:
  SECRET_KEY / JWT_SECRET   Token signing key (32+ chars). Required unless DEBUG=true.
  PORT                      Port to bind when --port is not given (default 3000).
  DEBUG                     true to auto-generate a signing key for local runs.
"""

import argparse

import uvicorn

from core.config import get_settings


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Developers API -- authenticated CRUD over an in-memory developer registry.",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to bind (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    print(f"  Server is running on port {args.port}")
    print(f"  Swagger documentation available at http://localhost:{args.port}/api-docs")
    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
