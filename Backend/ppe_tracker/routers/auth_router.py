# auth_router.py
from typing import Optional

import jwt  # PyJWT
from fastapi import APIRouter, HTTPException, Header, Depends
from pydantic import BaseModel, EmailStr
from sqlalchemy.orm import Session

from ppe_tracker.database import get_db
from ppe_tracker.models.manager_model import Manager
from ppe_tracker.schemas.manager import ManagerResponse
from ppe_tracker.security import verify_password, create_jwt_token, decode_jwt_token
from ppe_tracker.services import manager_service
from ppe_tracker.utils import success_resp, parse_id

router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


def _get_token_subject_from_header(authorization: Optional[str]) -> int:
    """Decode Bearer token and return the manager id it was issued for."""
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization required")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid authorization header")
    try:
        payload = decode_jwt_token(parts[1])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")

    manager_id = parse_id(payload.get("sub"))
    if manager_id is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    return manager_id


def get_current_manager(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> Manager:
    manager_id = _get_token_subject_from_header(authorization)
    manager = manager_service.get_manager(db, manager_id)
    if manager is None:
        raise HTTPException(status_code=401, detail="Manager no longer exists")
    return manager


@router.post("/login")
def login_manager(body: LoginRequest, db: Session = Depends(get_db)):
    """
    - unknown email or wrong password -> 401 "Invalid email or password"
    - on success -> data: { "email": ..., "token": "JWT" }
    """
    manager = manager_service.get_manager_by_email(db, body.email)
    if manager is None or not verify_password(body.password, manager.password_hash, manager.password_salt):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    # PyJWT requires "sub" to be a string
    token = create_jwt_token({"sub": str(manager.id), "email": manager.email})
    return success_resp("Login successful", {"email": manager.email, "token": token})


@router.get("/me")
def read_current_manager(current_manager: Manager = Depends(get_current_manager)):
    return success_resp("Manager profile", ManagerResponse.model_validate(current_manager))
