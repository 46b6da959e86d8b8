from pydantic import BaseModel, EmailStr, ConfigDict

class UserSchema(BaseModel):
    id: int
    name: str
    email: EmailStr
    model_config = ConfigDict(from_attributes=True)

# internal DTO for the service
class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str
