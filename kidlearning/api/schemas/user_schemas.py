from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class LoginRequest(BaseModel):
    avatar: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

class ParentRegister(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    confirm_password: Optional[str] = None

class ChildCreate(BaseModel):
    child_name: str = Field(..., min_length=1, max_length=100)
    child_avatar: Optional[str] = None
    username: Optional[str] = Field(None, min_length=1, max_length=100)

class UserResponse(BaseModel):
    id: int
    username: str
    is_parent: bool
    child_name: Optional[str] = None
    child_avatar: Optional[str] = None
    parent_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True
    )
