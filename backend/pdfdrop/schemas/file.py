"""File request/response schemas."""
from pydantic import BaseModel
from typing import Optional


class FileRecord(BaseModel):
    """Metadata for one uploaded file, as persisted in the store."""
    id: str
    name: str
    section: Optional[str] = None
    date: str
    path: str
    pages: Optional[int] = None


class UploadResponse(BaseModel):
    success: bool = True
    message: str
    file: FileRecord


class UploadErrorResponse(BaseModel):
    success: bool = False
    error: str


class FileListResponse(BaseModel):
    files: list[FileRecord]
