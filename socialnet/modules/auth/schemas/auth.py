from typing import Optional
from pydantic import BaseModel, Field, StrictBool

from socialnet.core.schemas import APIModel, LowercaseStr


class Identity(BaseModel):
    """Claims carried by a verified access token"""

    id: str = Field(..., min_length=1)
    is_admin: StrictBool = False


class LoginRequest(APIModel):
    email: LowercaseStr
    password: str


class LoginUser(APIModel):
    id: str
    name: str
    email: str
    is_admin: bool
    profile_image_url: Optional[str] = None


class LoginResponse(APIModel):
    token: str
    token_type: str = "bearer"
    user: LoginUser
