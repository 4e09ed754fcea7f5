"""Serve the prebuilt dashboard bundle from the API process.

Only used in production mode. Existing files under the bundle directory are
served as-is; every other non-API path falls back to ``index.html`` so the
single-page app can handle its own routing.
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse

from costboard.domain.shared import RouteNotFoundError

logger = logging.getLogger(__name__)

BUNDLED_FRONTEND_DIR = Path(__file__).resolve().parent / "static"
INDEX_FILE = "index.html"

# Paths owned by the API; they must 404 instead of returning the app shell
_API_PREFIXES = ("api", "health", "docs", "redoc", "openapi.json")


def resolve_frontend_file(root: Path, requested: str) -> Path:
    """Map a request path to a file inside ``root``.

    Returns the requested file when it exists inside ``root``, otherwise the
    bundle's ``index.html``. Paths escaping ``root`` never resolve to the
    escaped target.
    """
    root = root.resolve()
    index = root / INDEX_FILE
    if not requested:
        return index

    candidate = (root / requested).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return index
    return candidate


def _is_api_path(path: str) -> bool:
    head = path.split("/", 1)[0]
    return head in _API_PREFIXES


def mount_frontend(app: FastAPI, frontend_dir: Path) -> bool:
    """Register the catch-all route serving ``frontend_dir``.

    Must be called after every API router is included, since the catch-all
    matches any GET path.

    Returns
    -------
    True if the bundle was mounted, False if ``index.html`` is missing.
    """
    root = frontend_dir.resolve()
    if not (root / INDEX_FILE).is_file():
        logger.warning(
            "Frontend bundle not found at %s, serving API only",
            root,
        )
        return False

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str) -> FileResponse:
        if _is_api_path(full_path):
            raise RouteNotFoundError(f"/{full_path}")
        return FileResponse(resolve_frontend_file(root, full_path))

    logger.info("Serving frontend bundle from %s", root)
    return True
