"""Vercel serverless entrypoint for the FIDO dashboard."""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from fido_dashboard.api.asgi import app  # noqa: E402

__all__ = ["app"]
