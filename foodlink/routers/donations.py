from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from foodlink.db.session import get_db
from foodlink.db.models import Donation, User
from foodlink.schemas.donations import (
	DonationCreate, DonationUpdate, DonationOut, DonationMessage, ClaimRequest,
)
from foodlink.core.security import get_current_user_id
from foodlink.core.errors import Conflict, NotFound
from foodlink.core.logging import log_event

router = APIRouter(prefix="/api", tags=["donations"])


def _load_user(db: Session, user_id: int) -> User:
	user = db.query(User).filter(User.id == user_id).first()
	if not user:
		raise NotFound("User not found")
	return user


def _unclaimed(db: Session, donation_id: int):
	return db.query(Donation).filter(Donation.id == donation_id, Donation.claimed.is_(False))


def _reject_guarded_write(db: Session, donation_id: int, conflict_message: str):
	"""Explain why a write guarded on ``claimed = false`` matched no row."""
	db.rollback()
	if not db.query(Donation.id).filter(Donation.id == donation_id).first():
		raise NotFound("Donation not found.")
	raise Conflict(conflict_message)


def _increment(db: Session, user_id: int, column):
	db.query(User).filter(User.id == user_id).update({column: column + 1}, synchronize_session=False)


@router.post("/donate", status_code=201, response_model=DonationMessage)
def donate(
	request: Request,
	payload: DonationCreate,
	db: Session = Depends(get_db),
	user_id: int = Depends(get_current_user_id),
):
	donor = _load_user(db, user_id)
	donation = Donation(**payload.model_dump(), donated_by=donor.id)
	db.add(donation)
	# Donation row and donor counter share one transaction.
	_increment(db, donor.id, User.donations_made)
	db.commit()
	db.refresh(donation)

	log_event("donation_created", donation_id=donation.id, donor_id=donor.id, request_id=request.state.request_id)
	return {"message": "Donation saved successfully!", "donation": DonationOut.model_validate(donation)}


@router.get("/donations", response_model=list[DonationOut])
def list_donations(db: Session = Depends(get_db)):
	return db.query(Donation).order_by(Donation.id.asc()).all()


@router.get("/donations/by-donor/{donor_name}", response_model=list[DonationOut])
def list_donations_by_donor(donor_name: str, db: Session = Depends(get_db)):
	rows = db.query(Donation).filter(Donation.name == donor_name).order_by(Donation.id.asc()).all()
	if not rows:
		raise NotFound("No donations found for this donor.")
	return rows


@router.get("/donations/filter", response_model=list[DonationOut])
def filter_donations(
	location: str | None = None,
	food_item: str | None = Query(None, alias="foodItem"),
	db: Session = Depends(get_db),
):
	query = db.query(Donation).filter(Donation.claimed.is_(False))
	if location:
		query = query.filter(Donation.location == location)
	if food_item:
		query = query.filter(Donation.food_item == food_item)
	return query.order_by(Donation.id.asc()).all()


@router.get("/matching-donations", response_model=list[DonationOut])
def matching_donations(
	location: str = Query(..., min_length=1),
	db: Session = Depends(get_db),
):
	rows = (
		db.query(Donation)
		.filter(Donation.location == location, Donation.claimed.is_(False))
		.order_by(Donation.id.asc())
		.all()
	)
	if not rows:
		raise NotFound("No matching donations found in this location.")
	return rows


@router.put("/donations/{donation_id}", response_model=DonationMessage)
def update_donation(
	request: Request,
	donation_id: int,
	payload: DonationUpdate,
	db: Session = Depends(get_db),
):
	values = payload.model_dump(exclude_unset=True)
	if values:
		updated = _unclaimed(db, donation_id).update(values, synchronize_session=False)
		if not updated:
			_reject_guarded_write(db, donation_id, "Cannot update a claimed donation.")
		db.commit()
	elif not _unclaimed(db, donation_id).first():
		_reject_guarded_write(db, donation_id, "Cannot update a claimed donation.")

	donation = db.query(Donation).filter(Donation.id == donation_id).first()
	log_event(
		"donation_updated",
		donation_id=donation_id,
		fields=sorted(values),
		request_id=request.state.request_id,
	)
	return {"message": "Donation updated successfully!", "donation": DonationOut.model_validate(donation)}


@router.delete("/donations/{donation_id}")
def delete_donation(request: Request, donation_id: int, db: Session = Depends(get_db)):
	deleted = _unclaimed(db, donation_id).delete(synchronize_session=False)
	if not deleted:
		_reject_guarded_write(db, donation_id, "Cannot delete a claimed donation.")
	db.commit()

	log_event("donation_deleted", donation_id=donation_id, request_id=request.state.request_id)
	return {"message": "Donation deleted successfully!"}


@router.post("/claim", response_model=DonationMessage)
def claim_donation(
	request: Request,
	payload: ClaimRequest,
	db: Session = Depends(get_db),
	user_id: int = Depends(get_current_user_id),
):
	claimer = _load_user(db, user_id)
	# Compare-and-swap on the claimed flag: only one concurrent claim can match.
	claimed = _unclaimed(db, payload.donation_id).update(
		{
			Donation.claimed: True,
			Donation.claimed_by: claimer.id,
			Donation.claimed_at: datetime.utcnow(),
		},
		synchronize_session=False,
	)
	if not claimed:
		_reject_guarded_write(db, payload.donation_id, "Donation already claimed.")
	_increment(db, claimer.id, User.claimed_donations)
	db.commit()

	donation = db.query(Donation).filter(Donation.id == payload.donation_id).first()
	log_event(
		"donation_claimed",
		donation_id=donation.id,
		claimer_id=claimer.id,
		request_id=request.state.request_id,
	)
	return {"message": "Donation successfully claimed!", "donation": DonationOut.model_validate(donation)}
