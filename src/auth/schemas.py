from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Schema for User response."""
    id: int
    email: str
    full_name: str
    avatar_url: str | None = None
    role: str

    model_config = ConfigDict(from_attributes=True)


class UserLogin(BaseModel):
    """Schema for user login."""
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    """Schema for a freshly created session."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
