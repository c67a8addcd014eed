"""
Core module initialization
"""

from .config import config
from .errors import ErrorKind, ErrorResponse, ErrorResponseModel, status_for
from .logger import logger

__all__ = [
    "config",
    "ErrorKind",
    "ErrorResponse",
    "ErrorResponseModel",
    "status_for",
    "logger",
]
