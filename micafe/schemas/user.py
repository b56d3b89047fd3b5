# micafe/schemas/user.py
from pydantic import BaseModel, EmailStr, Field
from typing import List

from micafe.models.users import Role

# Shared properties for user models
class UserBase(BaseModel):
    email: EmailStr

# Schema for user authentication credentials
class UserLogin(UserBase):
    password: str

# Schema for registration requests; the role is always client
class UserCreate(UserBase):
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)

# Output schema for user profile details
class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    role: Role

    class Config:
        from_attributes = True

# Schema for JWT authentication token response
class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: Role
    landing_page: str

# Schema for paginated user list response
class PaginatedUsersResponse(BaseModel):
    items: List[UserResponse]
    total: int
    page: int
    page_size: int
