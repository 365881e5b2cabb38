"""
Development runner for the contacts app.

Usage:
  python main.py
  HOST=0.0.0.0 PORT=8080 python main.py
"""

from __future__ import annotations

import uvicorn

from Security.security_config import SETTINGS


def main() -> None:
    config = uvicorn.Config(
        "app.main:app",
        host=SETTINGS["HOST"],
        port=SETTINGS["PORT"],
        proxy_headers=True,
    )
    server = uvicorn.Server(config)
    server.run()


if __name__ == "__main__":
    main()
