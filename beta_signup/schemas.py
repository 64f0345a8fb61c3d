from pydantic import BaseModel
from typing import Optional


class RegistrationRequest(BaseModel):
    email: Optional[str] = None
    language: Optional[str] = None


class RegistrationResponse(BaseModel):
    success: bool
    message: str
