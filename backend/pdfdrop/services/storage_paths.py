"""Directory bootstrap for uploaded files and thumbnails."""
import logging
from pathlib import Path

from pdfdrop.config import Settings

logger = logging.getLogger(__name__)


def ensure_storage_dirs(settings: Settings) -> list[Path]:
    """Create the uploads and thumbnails directories if missing.

    Idempotent. Permission errors propagate and abort startup.
    """
    created = []
    for raw in (settings.UPLOADS_DIR, settings.THUMBNAILS_DIR):
        path = Path(raw)
        if not path.is_dir():
            path.mkdir(parents=True, exist_ok=True)
            logger.info("Created directory %s", path)
        created.append(path)
    return created
