"""
Launcher for the graticut cutting service.

``python run.py`` serves the FastAPI app from ``backend/graticut/main.py``
on port 8000.  Set ``CUT_DEBUG=1`` to also get the per-cut debug lines
from the engine.
"""

from __future__ import annotations

import sys
from pathlib import Path

import logging
import uvicorn

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

HOST = "0.0.0.0"
PORT = 8000


def main() -> None:
    """Serve the cutting API with Uvicorn."""
    root = str(Path(__file__).resolve().parent)
    if root not in sys.path:
        sys.path.append(root)

    # backend/ is only importable once the checkout root is on sys.path
    from backend.graticut.main import app  # type: ignore

    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
