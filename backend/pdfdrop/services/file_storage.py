"""Local disk storage for uploaded PDFs."""
import io
import logging
import os
import random
import re
import time
from pathlib import Path

import aiofiles
from pypdf import PdfReader

logger = logging.getLogger(__name__)

_SAFE_EXTENSION = re.compile(r"^\.[A-Za-z0-9]+$")


def generate_name(original_name: str) -> str:
    """Build a storage name: `<epoch-millis>-<random 0..1e9><ext>`.

    Not cryptographically unique. The extension is kept only when it is
    plain alphanumeric since the original name comes from the client.
    """
    unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    ext = Path(original_name).suffix
    if not _SAFE_EXTENSION.match(ext):
        ext = ""
    return f"{unique}{ext}"


def count_pdf_pages(file_bytes: bytes) -> int | None:
    """Return the page count, or None when the bytes don't parse as a PDF."""
    try:
        with io.BytesIO(file_bytes) as f, PdfReader(f) as reader:
            return len(reader.pages)
    except Exception as e:
        logger.debug("Could not read PDF pages: %s", e)
        return None


class FileStorageService:
    """Handles file read/write under the uploads directory."""

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)

    def path_for(self, name: str) -> Path:
        return self.base_path / name

    async def save(self, file_bytes: bytes, original_name: str) -> str:
        """Save file bytes under a generated name. Returns that name."""
        name = generate_name(original_name)
        path = self.path_for(name)
        try:
            async with aiofiles.open(path, "wb") as f:
                await f.write(file_bytes)
        except BaseException:
            # A partial file would be served without a record
            path.unlink(missing_ok=True)
            raise
        return name

    async def delete(self, name: str) -> None:
        """Delete a stored file if it exists."""
        path = self.path_for(name)
        if path.exists():
            os.remove(path)
