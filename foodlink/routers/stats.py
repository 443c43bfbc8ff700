from fastapi import APIRouter, Depends
from sqlalchemy import case, func
from sqlalchemy.orm import Session

from foodlink.db.session import get_db
from foodlink.db.models import Donation
from foodlink.schemas.donations import StatsOut

router = APIRouter(prefix="/api", tags=["stats"])

@router.get("/stats", response_model=StatsOut)
def get_stats(db: Session = Depends(get_db)):
	# Both counts come from one statement so they describe the same snapshot.
	total, claimed = db.query(
		func.count(Donation.id),
		func.coalesce(func.sum(case((Donation.claimed.is_(True), 1), else_=0)), 0),
	).one()
	return {"total_donations": total, "claimed_donations": claimed}
