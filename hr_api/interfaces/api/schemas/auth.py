"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="Registered employee email")
    password: str


class SessionUser(BaseModel):
    id: int
    name: str
    email: str
    role: str | None


class LoginData(BaseModel):
    user: SessionUser
    token: str
