"""
Multipart helpers shared by the upload endpoints
"""

from typing import List, Optional, Sequence

from fastapi import UploadFile

from app.services.image_upload import UploadedFile

CHUNK_SIZE = 1024 * 1024


async def _read_bounded(file: UploadFile, max_size: int) -> bytes:
    """Read at most max_size + 1 bytes, enough to tell an oversized part apart"""
    chunks = []
    remaining = max_size + 1
    while remaining > 0:
        chunk = await file.read(min(CHUNK_SIZE, remaining))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


async def read_uploads(
    files: Optional[Sequence[UploadFile]],
    max_size: int,
    max_files: Optional[int] = None,
) -> List[UploadedFile]:
    """
    Buffer multipart file parts; parts without a filename are skipped.

    Buffering stops one part past max_files and one byte past max_size per
    part, so the upload checks still see the violation without the request
    being held in memory.
    """
    uploads = []
    for file in files or []:
        if not file.filename:
            continue
        if max_files is not None and len(uploads) > max_files:
            break
        data = await _read_bounded(file, max_size)
        uploads.append(UploadedFile(filename=file.filename, content_type=file.content_type, data=data))
    return uploads
