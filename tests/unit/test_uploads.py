"""Tests for bounded buffering of multipart upload parts"""
import pytest
from unittest.mock import MagicMock

from app.api.uploads import CHUNK_SIZE, read_uploads


class FakeUpload:
    """UploadFile stand-in that records how many bytes were read"""

    def __init__(self, filename, data, content_type="image/png"):
        self.filename = filename
        self.content_type = content_type
        self._data = data
        self.bytes_read = 0

    async def read(self, size=-1):
        end = len(self._data) if size < 0 else self.bytes_read + size
        chunk = self._data[self.bytes_read:end]
        self.bytes_read += len(chunk)
        return chunk


class TestReadUploads:

    @pytest.mark.asyncio
    async def test_small_parts_are_read_whole(self):
        files = [FakeUpload("a.png", b"png-bytes"), FakeUpload("b.jpg", b"jpg-bytes", "image/jpeg")]

        uploads = await read_uploads(files, max_size=1024)

        assert [upload.data for upload in uploads] == [b"png-bytes", b"jpg-bytes"]
        assert uploads[1].content_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_oversized_part_stops_one_byte_past_limit(self):
        huge = FakeUpload("huge.png", b"x" * (3 * CHUNK_SIZE))

        uploads = await read_uploads([huge], max_size=CHUNK_SIZE + 10)

        assert huge.bytes_read == CHUNK_SIZE + 11
        assert uploads[0].size == CHUNK_SIZE + 11

    @pytest.mark.asyncio
    async def test_stops_one_part_past_max_files(self):
        files = [FakeUpload(f"{i}.png", b"x" * 100) for i in range(11)]

        uploads = await read_uploads(files, max_size=1024, max_files=3)

        assert len(uploads) == 4
        assert all(file.bytes_read == 0 for file in files[4:])

    @pytest.mark.asyncio
    async def test_parts_without_filename_are_skipped(self):
        unnamed = MagicMock(filename="")

        uploads = await read_uploads([unnamed, FakeUpload("a.png", b"png")], max_size=1024)

        assert [upload.filename for upload in uploads] == ["a.png"]
        unnamed.read.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_files(self):
        assert await read_uploads(None, max_size=1024) == []
