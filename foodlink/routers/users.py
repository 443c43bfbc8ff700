from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from foodlink.db.session import get_db
from foodlink.db.models import User
from foodlink.schemas.users import UserInfo
from foodlink.core.security import get_current_user_id
from foodlink.core.errors import NotFound

router = APIRouter(prefix="/api/user", tags=["users"])

@router.get("/info", response_model=UserInfo)
def get_user_info(db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id)):
	user = db.query(User).filter(User.id == user_id).first()
	if not user:
		raise NotFound("User not found")
	return user
