import os
import hmac
import hashlib
import binascii
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt  # PyJWT

# Load JWT secret and settings from env
JWT_SECRET = os.getenv("JWT_SECRET", "change_this_in_production")
JWT_ALGORITHM = "HS256"
JWT_EXP_DAYS = int(os.getenv("JWT_EXP_DAYS", "1"))  # default 1 day

PBKDF2_ITERATIONS = 100_000


def hash_password(password: str, salt: Optional[str] = None):
    """
    PBKDF2-HMAC-SHA256 password hashing with salt.
    Returns (hash, salt).
    """
    if salt is None:
        salt = binascii.hexlify(os.urandom(16)).decode()
    dk = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), PBKDF2_ITERATIONS)
    return binascii.hexlify(dk).decode(), salt


def verify_password(password: str, expected_hash: str, salt: str) -> bool:
    pwd_hash, _ = hash_password(password, salt)
    return hmac.compare_digest(pwd_hash, expected_hash)


def create_jwt_token(payload: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = payload.copy()
    if expires_delta is None:
        expires_delta = timedelta(days=JWT_EXP_DAYS)
    now = datetime.now(timezone.utc)
    to_encode.update({"exp": now + expires_delta, "iat": now})
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_jwt_token(token: str) -> dict:
    """Raises jwt.ExpiredSignatureError / jwt.InvalidTokenError on a bad token."""
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
