
from pydantic import BaseModel, EmailStr, Field

class SignupRequest(BaseModel):
	username: str = Field(min_length=1, max_length=50)
	email: EmailStr
	# bcrypt truncation to 72 bytes happens in core.security.
	password: str = Field(min_length=1)

class LoginRequest(BaseModel):
	email: EmailStr
	password: str

class LoginResponse(BaseModel):
	message: str
	token: str
	username: str
