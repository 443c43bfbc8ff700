from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _reject_bool(v):
	# JSON true/false would otherwise coerce to 1/0.
	if isinstance(v, bool):
		raise ValueError("Quantity must be an integer")
	return v


class DonationCreate(BaseModel):
	name: str = Field(min_length=1)
	food_item: str = Field(alias="foodItem", min_length=1)
	quantity: int = Field(ge=0)
	location: str = Field(min_length=1)
	phone_number: str = Field(alias="phoneNumber", min_length=1)
	address: str = Field(min_length=1)

	class Config:
		populate_by_name = True
		str_strip_whitespace = True

	@field_validator("quantity", mode="before")
	@classmethod
	def quantity_not_bool(cls, v):
		return _reject_bool(v)


class DonationUpdate(BaseModel):
	name: Optional[str] = Field(None, min_length=1)
	food_item: Optional[str] = Field(None, alias="foodItem", min_length=1)
	quantity: Optional[int] = Field(None, ge=0)
	location: Optional[str] = Field(None, min_length=1)
	phone_number: Optional[str] = Field(None, alias="phoneNumber", min_length=1)
	address: Optional[str] = Field(None, min_length=1)

	class Config:
		populate_by_name = True
		str_strip_whitespace = True

	@field_validator("*")
	@classmethod
	def no_nulls(cls, v):
		if v is None:
			raise ValueError("Field may be omitted but not null")
		return v

	@field_validator("quantity", mode="before")
	@classmethod
	def quantity_not_bool(cls, v):
		return _reject_bool(v)


class ClaimRequest(BaseModel):
	donation_id: int = Field(alias="donationId")

	class Config:
		populate_by_name = True


class DonationOut(BaseModel):
	id: int
	name: str
	food_item: str = Field(serialization_alias="foodItem")
	quantity: int
	location: str
	phone_number: str = Field(serialization_alias="phoneNumber")
	address: str
	created_at: datetime = Field(serialization_alias="createdAt")
	claimed: bool
	claimed_by: Optional[int] = Field(None, serialization_alias="claimedBy")
	claimed_at: Optional[datetime] = Field(None, serialization_alias="claimedAt")
	donated_by: Optional[int] = Field(None, serialization_alias="donatedBy")

	class Config:
		from_attributes = True


class DonationMessage(BaseModel):
	message: str
	donation: DonationOut


class StatsOut(BaseModel):
	total_donations: int = Field(serialization_alias="totalDonations")
	claimed_donations: int = Field(serialization_alias="claimedDonations")
