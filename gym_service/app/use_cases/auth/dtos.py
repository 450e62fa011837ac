"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
"""

from pydantic import BaseModel


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated intent to create a member account"""

    name: str
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User summary in authentication responses"""

    id: str
    name: str
    email: str
    role: str
    email_verified: bool


class RegisterResponse(BaseModel):
    """Response for member registration use case"""

    user: UserInfo
    message: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "bearer"
    user: UserInfo


class VerifyEmailResponse(BaseModel):
    """Response for email verification use case"""

    status: str
    message: str


class ResendVerificationResponse(BaseModel):
    """Response for resend verification email use case"""

    status: str
    message: str
