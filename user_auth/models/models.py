from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, EmailStr, Field


class register(BaseModel):
    name: str = Field(..., min_length=1, title="Display Name")
    email: EmailStr = Field(..., title="Email Address")
    password: str = Field(..., min_length=1, title="Password")


class login(BaseModel):
    email: EmailStr = Field(..., title="Email Address")
    password: str = Field(..., min_length=1, title="Password")


class PublicUser(BaseModel):
    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    token: str
    user: PublicUser


class ProfileResponse(BaseModel):
    user: PublicUser


class UserInDB(BaseModel):
    id: str
    name: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "UserInDB":
        return cls(
            id=str(document["_id"]),
            name=document["name"],
            email=document["email"],
            password_hash=document["passwordHash"],
            created_at=document.get("createdAt"),
        )

    def public(self) -> PublicUser:
        return PublicUser(id=self.id, name=self.name, email=self.email)
