# app/schemas/user.py
from pydantic import BaseModel, EmailStr, Field

# Body of POST /register and POST /login
class UserCredentials(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class Token(BaseModel):
    message: str
    token: str
