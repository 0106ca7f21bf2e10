from pydantic import BaseModel
from typing import Optional


class VerifiedIdentity(BaseModel):
    id: str  # auth.users.id
    email: Optional[str] = None
    full_name: Optional[str] = None
