"""Upload and section listing routes."""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, UploadFile, File as FastAPIFile
from fastapi.responses import JSONResponse

from pdfdrop.config import Settings
from pdfdrop.deps import get_file_storage, get_settings, get_store
from pdfdrop.schemas.file import FileListResponse, FileRecord, UploadErrorResponse, UploadResponse
from pdfdrop.services.file_storage import FileStorageService, count_pdf_pages
from pdfdrop.services.metadata_store import MetadataStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])


def _upload_error(message: str, status: int) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status)


def _utc_timestamp() -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2026-10-19T08:15:02.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": UploadErrorResponse}, 500: {"model": UploadErrorResponse}},
)
async def upload_file(
    request: Request,
    file: Optional[UploadFile] = FastAPIFile(None),
    section: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
    store: MetadataStore = Depends(get_store),
    storage: FileStorageService = Depends(get_file_storage),
):
    """Store an uploaded PDF and append its metadata record."""
    # FastAPI binds only the last part when a field repeats
    parts = (await request.form()).getlist("file")
    if len(parts) > 1:
        logger.warning("Rejected upload with %d file parts", len(parts))
        return _upload_error("Only one file may be uploaded per request", 400)

    if file is not None and file.content_type != settings.ALLOWED_MIME_TYPE:
        logger.warning(
            "Rejected upload %r with content type %s", file.filename, file.content_type
        )
        await file.close()
        return _upload_error("Only PDF files are allowed", 400)

    stored_name = None
    try:
        if file is None:
            raise ValueError("No file was uploaded")

        contents = await file.read()
        original_name = file.filename or "unnamed"
        stored_name = await storage.save(contents, original_name)

        record = FileRecord(
            id=stored_name,
            name=original_name,
            section=section,
            date=_utc_timestamp(),
            path=f"/uploads/{stored_name}",
            pages=await asyncio.to_thread(count_pdf_pages, contents),
        )
        await store.append(record.model_dump())
    except Exception as e:
        logger.exception("Upload failed")
        if stored_name is not None:
            try:
                await storage.delete(stored_name)
            except OSError:
                logger.exception("Could not remove %s after failed upload", stored_name)
        message = str(e) if settings.EXPOSE_ERROR_DETAILS else "Internal server error"
        return _upload_error(message, 500)

    logger.info("Stored %s in section %r", record.id, record.section)
    return {
        "success": True,
        "message": "File uploaded successfully",
        "file": record,
    }


@router.get("/files/{section}", response_model=FileListResponse)
async def list_section_files(
    section: str,
    store: MetadataStore = Depends(get_store),
):
    """List files tagged with a section. Store errors yield an empty list."""
    try:
        records = await store.by_section(section)
        files = [FileRecord.model_validate(r) for r in records]
    except Exception as e:
        logger.warning("Could not read files for section %r: %s", section, e)
        return {"files": []}
    return {"files": files}
