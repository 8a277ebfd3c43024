"""Static file server for the front end."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from starlette.routing import Mount
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from starlette.applications import Starlette

logger = logging.getLogger(__name__)


class StaticFileServer:
    """Serves the front end from a directory, with index.html at "/"."""

    def __init__(self, directory: str | Path) -> None:
        """Initialize with the directory holding the front end files."""
        self.directory = Path(directory)

    def register_routes(self, app: Starlette) -> bool:
        """Mount the directory at "/" after all other routes.

        Args:
            app: The Starlette application instance.

        Returns:
            True if the directory exists and was mounted.
        """
        if not self.directory.is_dir():
            logger.warning(f"Static directory not found at {self.directory}")
            return False

        # Appended last so API routes take precedence over the catch-all mount
        app.routes.append(
            Mount("/", app=StaticFiles(directory=str(self.directory), html=True), name="static")
        )
        logger.info(f"Mounted static files from {self.directory}")
        return True
