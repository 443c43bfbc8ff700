from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean
from datetime import datetime
from foodlink.db.base import Base

class User(Base):
	__tablename__ = "users"

	id = Column(Integer, primary_key=True, index=True)
	username = Column(String, unique=True, index=True, nullable=False)
	email = Column(String, unique=True, index=True, nullable=False)
	password_hash = Column(String, nullable=False)
	donations_made = Column(Integer, nullable=False, default=0)
	claimed_donations = Column(Integer, nullable=False, default=0)
	created_at = Column(DateTime, default=datetime.utcnow)

class Donation(Base):
	__tablename__ = "donations"

	id = Column(Integer, primary_key=True, index=True)
	name = Column(String, index=True, nullable=False)
	food_item = Column(String, index=True, nullable=False)
	quantity = Column(Integer, nullable=False)
	location = Column(String, index=True, nullable=False)
	phone_number = Column(String, nullable=False)
	address = Column(String, nullable=False)
	created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
	claimed = Column(Boolean, nullable=False, default=False)
	claimed_by = Column(Integer, ForeignKey("users.id"), nullable=True)
	claimed_at = Column(DateTime, nullable=True)
	# Rows from before ownership tracking have no donor; the API always sets it.
	donated_by = Column(Integer, ForeignKey("users.id"), nullable=True)
