"""Static serving of the prebuilt single-page dashboard."""

from costboard.presentation.web.frontend import (
    BUNDLED_FRONTEND_DIR,
    mount_frontend,
    resolve_frontend_file,
)

__all__ = [
    "BUNDLED_FRONTEND_DIR",
    "mount_frontend",
    "resolve_frontend_file",
]
