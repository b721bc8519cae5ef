from pydantic import BaseModel, Field, EmailStr, validator
from typing import List, Optional
from datetime import datetime

ALLOWED_ROLES = ['user', 'admin']


class UserBase(BaseModel):
    username: str = Field(..., min_length=1, max_length=255, description="Unique username")
    email: EmailStr = Field(..., description="Unique e-mail address")
    first_name: Optional[str] = Field(None, max_length=255, description="First name")
    last_name: Optional[str] = Field(None, max_length=255, description="Last name")
    role: str = Field("user", description="User role")
    is_active: bool = Field(True, description="Whether the user is active")

    @validator('role')
    def validate_role(cls, v):
        if v.lower() not in ALLOWED_ROLES:
            raise ValueError(f'Role must be one of: {", ".join(ALLOWED_ROLES)}')
        return v.lower()


class UserCreate(UserBase):
    pass


class UserResponse(UserBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserList(BaseModel):
    users: List[UserResponse] = Field(default_factory=list)
