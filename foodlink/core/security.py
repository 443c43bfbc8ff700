from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from foodlink.core.config import settings
from foodlink.core.errors import InvalidCredentials, Unauthorized

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
# Missing or non-bearer headers are reported by get_current_user_id, not by HTTPBearer.
security = HTTPBearer(auto_error=False)

def _normalize_password(password: str) -> str:
	# bcrypt only considers the first 72 bytes; truncate consistently to avoid errors.
	raw = password.encode("utf-8")
	if len(raw) <= 72:
		return password
	return raw[:72].decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
	return pwd_context.hash(_normalize_password(password))

def verify_password(password: str, password_hash: str) -> bool:
	return pwd_context.verify(_normalize_password(password), password_hash)

def create_access_token(user_id: int, username: str, expires_delta: Optional[timedelta] = None) -> str:
	now = datetime.now(timezone.utc)
	if expires_delta is None:
		expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRES_MIN)
	payload = {
		"sub": str(user_id),
		"username": username,
		"type": "access",
		"iat": int(now.timestamp()),
		"exp": int((now + expires_delta).timestamp()),
	}
	return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)

def decode_token(token: str) -> dict:
	return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])

def authenticate(token: Optional[str]) -> int:
	"""Resolve a bearer token to the user id it was issued for."""
	if not token:
		raise Unauthorized("Authentication token missing")
	try:
		payload = decode_token(token)
	except JWTError:
		raise InvalidCredentials("Invalid or expired token")
	if payload.get("type") != "access":
		raise InvalidCredentials("Invalid token type")
	subject = payload.get("sub")
	if not subject or not str(subject).isdigit():
		raise InvalidCredentials("Invalid token")
	return int(subject)

def get_current_user_id(creds: HTTPAuthorizationCredentials | None = Depends(security)) -> int:
	if creds is None:
		raise Unauthorized("Authentication token missing")
	return authenticate(creds.credentials)
