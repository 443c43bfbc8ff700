from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from foodlink.db.session import get_db
from foodlink.db.models import User
from foodlink.schemas.auth import SignupRequest, LoginRequest, LoginResponse
from foodlink.core.security import hash_password, verify_password, create_access_token
from foodlink.core.errors import Conflict, InvalidCredentials, NotFound
from foodlink.core.logging import log_event

router = APIRouter(prefix="/api", tags=["auth"])

@router.post("/signup", status_code=201)
def signup(request: Request, payload: SignupRequest, db: Session = Depends(get_db)):
	email = payload.email.lower()
	if db.query(User).filter(User.email == email).first():
		raise Conflict("Email already exists")
	if db.query(User).filter(User.username == payload.username).first():
		raise Conflict("Username already exists")

	user = User(
		username=payload.username,
		email=email,
		password_hash=hash_password(payload.password),
	)
	db.add(user)
	try:
		db.commit()
	except IntegrityError:
		# Lost a race with a concurrent signup; report whichever value was taken.
		db.rollback()
		if db.query(User).filter(User.email == email).first():
			raise Conflict("Email already exists")
		raise Conflict("Username already exists")

	log_event("user_registered", user_id=user.id, email=email, request_id=request.state.request_id)
	return {"message": "User registered successfully"}

@router.post("/login", response_model=LoginResponse)
def login(request: Request, payload: LoginRequest, db: Session = Depends(get_db)):
	email = payload.email.lower()
	user = db.query(User).filter(User.email == email).first()
	if not user:
		raise NotFound("User not found", status_code=400)
	if not verify_password(payload.password, user.password_hash):
		raise InvalidCredentials("Invalid password", status_code=400)

	token = create_access_token(user_id=user.id, username=user.username)

	log_event("user_login", user_id=user.id, request_id=request.state.request_id)
	return {"message": "Login successful", "token": token, "username": user.username}
