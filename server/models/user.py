# server/models/user.py

from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, Field


# -------------------------------
# Stored User Document
# -------------------------------

class UserRecord(BaseModel):
    """
    A user document in the credential collection.
    Field names on disk: _id, name, email, password (bcrypt hash), createdAt.
    """
    id: Optional[str] = None
    name: str
    email: str
    password_hash: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "password": self.password_hash,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "UserRecord":
        return cls(
            id=str(doc["_id"]),
            name=doc.get("name", ""),
            email=doc["email"],
            password_hash=doc.get("password", ""),
            created_at=doc.get("createdAt") or datetime.now(timezone.utc),
        )


# -------------------------------
# Request / Response Schemas
# -------------------------------

class RegisterRequest(BaseModel):
    # presence is checked by the register handler, not by validation
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(BaseModel):
    success: bool
    userId: str


class UserProfile(BaseModel):
    name: str
    email: str


class LoginResponse(BaseModel):
    token: str
    user: UserProfile


class ProtectedResponse(BaseModel):
    message: str
    userId: str
