"""
API schemas for admin authentication
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.admin import AdminPublic


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class AdminSummary(BaseModel):
    id: str
    email: str


class LoginResponse(BaseModel):
    token: str
    admin: AdminSummary


class VerifyResponse(BaseModel):
    admin: AdminPublic
