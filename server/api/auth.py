# server/api/auth.py

from typing import Optional
from fastapi import APIRouter, Depends, Header, Request

from server.core.auth import AuthService
from server.models.user import (
    LoginRequest,
    LoginResponse,
    ProtectedResponse,
    RegisterRequest,
    RegisterResponse,
)


router = APIRouter(prefix="/api")


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_current_user(
    authorization: Optional[str] = Header(None),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    return auth.authorize(authorization)


# -------------------------------
# Authentication Endpoints
# -------------------------------

@router.post("/register", response_model=RegisterResponse)
def register(req: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Creates a user account. Fails with 400 on a missing field or an already registered email.
    """
    user_id = auth.register(req.name, req.email, req.password)
    return {"success": True, "userId": user_id}


@router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Exchanges email + password for a bearer token valid for one hour.
    """
    token, user = auth.login(req.email, req.password)
    return {"token": token, "user": user}


@router.get("/protected", response_model=ProtectedResponse)
def protected(current_user: str = Depends(get_current_user)):
    return {"message": "Access granted", "userId": current_user}
