"""
Response schemas shared by several endpoints
"""

from typing import List

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class UploadedImagesResponse(BaseModel):
    urls: List[str]


class UploadedImageResponse(BaseModel):
    url: str
