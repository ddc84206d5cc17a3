
from pydantic import BaseModel, EmailStr, Field
from cityhall.models.enums import UserRole
from cityhall.schemas.user import UserOut

class RegisterIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=256)
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    role: UserRole
    department: str | None = None

class LoginIn(BaseModel):
    email: EmailStr
    password: str

class LoginOut(BaseModel):
    user: UserOut
    token: str
