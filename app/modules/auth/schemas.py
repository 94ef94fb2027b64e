from pydantic import BaseModel, EmailStr, Field

from app.modules.users.schemas import UserResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse
