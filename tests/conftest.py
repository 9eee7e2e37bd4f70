"""Shared fixtures: an isolated app per test, rooted in tmp_path."""
import io
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
import pytest
from fastapi.testclient import TestClient
from pypdf import PdfWriter

from pdfdrop.config import Settings
from pdfdrop.main import create_app


def make_pdf(pages: int = 1) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=200, height=200)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


@pytest.fixture()
def pdf_bytes() -> bytes:
    return make_pdf(pages=2)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>pdfdrop</h1>", encoding="utf-8")
    return Settings(
        UPLOADS_DIR=str(tmp_path / "uploads"),
        PUBLIC_DIR=str(public),
        THUMBNAILS_DIR=str(public / "thumbnails"),
        METADATA_FILE=str(tmp_path / "files.json"),
    )


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def disk_full(monkeypatch):
    """aiofiles writes land 10 bytes, then fail as if the disk filled up."""
    real_open = aiofiles.open

    @asynccontextmanager
    async def _open(path, mode="r", *args, **kwargs):
        async with real_open(path, mode, *args, **kwargs) as f:

            class _Handle:
                async def write(self, data):
                    await f.write(data[:10])
                    raise OSError("disk full")

            yield _Handle()

    monkeypatch.setattr(aiofiles, "open", _open)
