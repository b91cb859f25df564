from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


class ManagerBase(BaseModel):
    last_name: str = Field(..., min_length=1, max_length=100)
    first_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr


class ManagerCreate(ManagerBase):
    password: str = Field(..., min_length=1)

    class Config:
        json_schema_extra = {
            "example": {
                "last_name": "Martin",
                "first_name": "Claire",
                "email": "claire.martin@example.com",
                "password": "s3cret"
            }
        }


# Full replace: the password is re-hashed on every update
class ManagerUpdate(ManagerCreate):
    pass


class ManagerResponse(ManagerBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ManagerSummary(BaseModel):
    id: int
    last_name: str
    first_name: str

    class Config:
        from_attributes = True
